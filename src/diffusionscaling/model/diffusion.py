"""
Diffusion Time Scaling
======================
Closed-form random-walk scaling of the time a particle needs to diffuse over
its own characteristic size.

    t = L² / D

with L the particle radius in metres and D the diffusion coefficient in m²/s.

Note: This module should be pure Python/NumPy and should NOT import PySide6.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np
import matplotlib.pyplot as plt

from diffusionscaling.config import DEFAULT_BASELINE_SIZE_NM, DEFAULT_DIFFUSION_COEFFICIENT
from diffusionscaling.errors import ConfigurationError
from diffusionscaling.model.radii import log_spaced
from diffusionscaling.utils import nm_to_m

if TYPE_CHECKING:
    import numpy.typing as npt


def diffusion_time(
    radius_nm: float | npt.NDArray[np.float64],
    diffusion_coefficient: float,
) -> float | npt.NDArray[np.float64]:
    """
    Diffusion time of a particle.

    Args:
        radius_nm: Particle radius in nanometres (scalar or array).
        diffusion_coefficient: Diffusion coefficient in m²/s.

    Returns:
        Diffusion time in seconds.

    Raises:
        ConfigurationError: If the diffusion coefficient is not positive.
    """
    if not diffusion_coefficient > 0:
        raise ConfigurationError(
            f"Diffusion coefficient must be positive, got {diffusion_coefficient!r}."
        )
    radius_m = nm_to_m(radius_nm)
    return (radius_m * radius_m) / diffusion_coefficient


def improvement_factor(
    radius_nm: float | npt.NDArray[np.float64],
    baseline_nm: float,
    diffusion_coefficient: float,
) -> float | npt.NDArray[np.float64]:
    """
    Speed-up of a particle relative to the baseline particle.

    Computed explicitly as ``t(baseline) / t(radius)``. D cancels, so the result
    equals ``(baseline / radius)**2``, but the two-step form is kept so it stays
    correct if the time model changes.
    """
    baseline_time = diffusion_time(baseline_nm, diffusion_coefficient)
    return baseline_time / diffusion_time(radius_nm, diffusion_coefficient)


@dataclass(frozen=True)
class DiffusionModel:
    """
    A medium (diffusion coefficient) together with the reference particle.
    """
    diffusion_coefficient: float = DEFAULT_DIFFUSION_COEFFICIENT  # m²/s
    baseline_size: float = DEFAULT_BASELINE_SIZE_NM  # nm

    def __post_init__(self) -> None:
        if not self.diffusion_coefficient > 0:
            raise ConfigurationError(
                f"Diffusion coefficient must be positive, got {self.diffusion_coefficient!r}."
            )
        if not self.baseline_size > 0:
            raise ConfigurationError(f"Baseline size must be positive, got {self.baseline_size!r}.")

    @property
    def baseline_time(self) -> float:
        return diffusion_time(self.baseline_size, self.diffusion_coefficient)

    def get_time(self, radius_nm: float | npt.NDArray[np.float64]) -> float | npt.NDArray[np.float64]:
        """Diffusion time in seconds for radius (nm)."""
        return diffusion_time(radius_nm, self.diffusion_coefficient)

    def get_improvement(self, radius_nm: float | npt.NDArray[np.float64]) -> float | npt.NDArray[np.float64]:
        """Improvement factor versus the baseline particle."""
        return improvement_factor(radius_nm, self.baseline_size, self.diffusion_coefficient)

    def plot(self, min_size: float = 1.0, max_size: float = 1000.0) -> None:
        """
        Plot the diffusion time and improvement curves over a radius range.
        """
        radii = log_spaced(min_size, max_size, 500)

        plt.rcParams["figure.constrained_layout.use"] = True
        fig, (ax_time, ax_gain) = plt.subplots(1, 2, figsize=(11, 5))

        ax_time.loglog(radii, self.get_time(radii), 'b', lw=2)
        ax_time.set_title(f"Diffusion Time (D = {self.diffusion_coefficient:.0e} m²/s)")
        ax_time.set_ylabel("Diffusion Time (s)")

        ax_gain.loglog(radii, self.get_improvement(radii), 'purple', lw=2)
        ax_gain.set_title(f"Improvement vs {self.baseline_size / 1000:.1f} µm Baseline")
        ax_gain.set_ylabel("Improvement Factor")

        for ax in (ax_time, ax_gain):
            ax.set_xlabel("Particle Radius (nm)")
            ax.grid(visible=True, which='major', axis='both', linestyle='-', color='gray', lw=0.5)
            ax.grid(visible=True, which='minor', axis='both', linestyle=':', color='gray', lw=0.5)

        plt.show()
