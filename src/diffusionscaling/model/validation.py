"""
Parameter Validation
====================
Range checks for user-supplied simulation parameters.

Every validator returns the accepted value as a float or raises
:class:`~diffusionscaling.errors.ConfigurationError` with a message meant to be
shown to the user as-is.
"""
from __future__ import annotations

import math

from diffusionscaling.config import MAX_SIZE_RANGE, MIN_SIZE_RANGE, CUSTOM_DIFFUSION_RANGE
from diffusionscaling.errors import ConfigurationError


def parse_float(text: str) -> float:
    """Parse user text into a finite float (accepts ``1e-13`` style input)."""
    try:
        value = float(str(text).strip().replace(",", ""))
    except ValueError:
        raise ConfigurationError(f"'{text}' is not a number.") from None
    if not math.isfinite(value):
        raise ConfigurationError(f"'{text}' is not a finite number.")
    return value


def validate_max_size(value: float) -> float:
    low, high = MAX_SIZE_RANGE
    if not low <= value <= high:
        raise ConfigurationError(f"Please enter a value between {low:,.0f} and {high:,.0f} nm")
    return float(value)


def validate_min_size(value: float, max_size: float) -> float:
    """Min size must lie in its own range and stay below the current max size."""
    low, high = MIN_SIZE_RANGE
    if not (low <= value <= high and value < max_size):
        raise ConfigurationError(
            f"Please enter a value between {low:g} and {high:,.0f} nm (less than max size)"
        )
    return float(value)


def validate_diffusion_coefficient(value: float) -> float:
    low, high = CUSTOM_DIFFUSION_RANGE
    if not low < value < high:
        raise ConfigurationError("Please enter a positive value less than 1 (e.g., 1e-13)")
    return float(value)


def validate_baseline_size(value: float) -> float:
    if not value > 0:
        raise ConfigurationError(f"Baseline size must be positive, got {value!r}.")
    return float(value)
