"""
The CONTROLLER layer advances the sweep and owns the frame clock.

`stepper` and `particles` are pure Python; `scheduler` and `simulation` use
Qt signals and timers but no widgets.
"""
