"""Custom exceptions for the :mod:`diffusionscaling` package."""
from __future__ import annotations


class DiffusionScalingError(Exception):
    """Base exception for diffusion scaling errors."""


class ConfigurationError(DiffusionScalingError, ValueError):
    """Invalid user-supplied simulation parameter."""


__all__ = [
    "DiffusionScalingError",
    "ConfigurationError",
]
