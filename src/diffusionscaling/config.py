"""
Configuration & Constants
=========================
This module serves as the central registry for default parameters, validation
ranges and visual constants.

Why is this file needed?
------------------------
1. Abstraction: It prevents magic numbers (ranges, colors, frame rates)
   scattered throughout the model, controller and view layers.
2. Consistency: The control panel, the validators and the tests all read the
   same limits, so a changed range is changed everywhere at once.

Exports:
    DEFAULT_* (float): Initial simulation parameters.
    *_RANGE (tuple): Inclusive/exclusive validation limits.
    DIFFUSION_PRESETS, BASELINE_PRESETS: Selector entries for the control panel.
"""
from __future__ import annotations

# Sweep
RADIUS_STEPS: int = 100  # 101 radii incl. both endpoints

# Default parameters
DEFAULT_MIN_SIZE_NM: float = 1.0
DEFAULT_MAX_SIZE_NM: float = 1000.0
DEFAULT_BASELINE_SIZE_NM: float = 10000.0  # 10 µm
DEFAULT_DIFFUSION_COEFFICIENT: float = 1e-14  # m²/s

# Validation limits (nm, m²/s)
MAX_SIZE_RANGE: tuple[float, float] = (10.0, 10000.0)  # inclusive
MIN_SIZE_RANGE: tuple[float, float] = (0.1, 1000.0)  # inclusive, also < max size
CUSTOM_DIFFUSION_RANGE: tuple[float, float] = (0.0, 1.0)  # exclusive

# (label, value) pairs for the selectors
DIFFUSION_PRESETS: list[tuple[str, float]] = [
    ("1e-12 m²/s (small molecule in gel)", 1e-12),
    ("1e-13 m²/s (protein in tissue)", 1e-13),
    ("1e-14 m²/s (nanoparticle in matrix)", 1e-14),
    ("1e-15 m²/s (dense polymer)", 1e-15),
]
BASELINE_PRESETS: list[tuple[str, float]] = [
    ("1 µm", 1000.0),
    ("5 µm", 5000.0),
    ("10 µm", 10000.0),
    ("50 µm", 50000.0),
    ("100 µm", 100000.0),
]

# Frame loop
FRAME_INTERVAL_MS: int = 16  # ~60 FPS
REFRESH_EVERY_N_TICKS: int = 3

# Particle visuals (canvas pixels, progress units per frame)
MAX_VISUAL_RADIUS: float = 60.0
MIN_VISUAL_RADIUS: float = 10.0
BASELINE_VISUAL_FACTOR: float = 0.8
BASE_PARTICLE_SPEED: float = 0.003
WAVE_COUNT: int = 3
WAVE_TRAVEL_PX: float = 100.0
WAVE_SPACING_PX: float = 30.0
WAVE_BASE_OPACITY: float = 0.5
WAVE_OPACITY_STEP: float = 0.15

# Canvas
CANVAS_HEIGHT: int = 400
CANVAS_GRID_SPACING: int = 40
CANVAS_BACKGROUND: str = "#f9fafb"
CANVAS_GRID_COLOR: str = "#e5e7eb"
CANVAS_TEXT_COLOR: str = "#1f2937"
BASELINE_COLOR: str = "#ef4444"
CURRENT_COLOR: str = "#10b981"

# Chart
DIFFUSION_CURVE_COLOR: str = "#3b82f6"
IMPROVEMENT_CURVE_COLOR: str = "#8b5cf6"

# Start/Pause button
START_BUTTON_COLOR: str = "#14b8a6"
PAUSE_BUTTON_COLOR: str = "#ef4444"
