from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from diffusionscaling.config import RADIUS_STEPS

if TYPE_CHECKING:
    import numpy.typing as npt


def log_spaced(min_value: float, max_value: float, steps: int = RADIUS_STEPS) -> npt.NDArray[np.float64]:
    """
    Log-uniform samples between two positive bounds.

    Args:
        min_value: Lower bound (first sample).
        max_value: Upper bound (last sample).
        steps: Number of intervals; ``steps + 1`` samples are returned.

    Returns:
        Array of ``steps + 1`` values, ``10**(log10(min) + (log10(max) - log10(min)) * i/steps)``.
    """
    min_log = np.log10(min_value)
    max_log = np.log10(max_value)
    fractions = np.arange(steps + 1, dtype=np.float64) / steps
    values = np.power(10.0, min_log + (max_log - min_log) * fractions)

    # pin the endpoints, pow(10, log10(x)) is not always exactly x
    values[0] = min_value
    values[-1] = max_value
    return values


def generate_radii(min_size: float, max_size: float, steps: int = RADIUS_STEPS) -> tuple[float, ...]:
    """
    Build the radius sequence (nm) swept by the simulation.

    The sequence is immutable once built; it is regenerated on reset.
    """
    return tuple(float(r) for r in log_spaced(min_size, max_size, steps))
