"""Interactive visualization of diffusion time scaling (t = L²/D) with particle size."""
__version__ = "0.1.0"
