"""
The VIEW layer: Qt widgets only. Views read from the controller and repaint
on its signals; they never write to the simulation state.
"""
