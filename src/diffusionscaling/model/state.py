"""
Simulation State (Data Model)
=============================
This module defines the data structures of a running sweep.

Why is this file needed?
------------------------
1. State Management: It holds the radius sequence, the step index and the
   computed series in one owned object instead of module globals.
2. Decoupling: The stepper writes to this object; views only read the series.

Classes:
    SimulationConfig: User parameters of the sweep.
    MetricSeries: Append-only result series.
    SimulationState: Index, running flag, radii and series.
    Phase: Derived state-machine phase.
"""
from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import StrEnum
import logging
from typing import TYPE_CHECKING

import numpy as np

from diffusionscaling.config import (
    DEFAULT_MIN_SIZE_NM, DEFAULT_MAX_SIZE_NM, DEFAULT_DIFFUSION_COEFFICIENT, DEFAULT_BASELINE_SIZE_NM
)
from diffusionscaling.errors import ConfigurationError
from diffusionscaling.model.diffusion import DiffusionModel
from diffusionscaling.model.radii import generate_radii

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)


class Phase(StrEnum):
    IDLE = "idle"
    RUNNING = "running"
    PAUSED = "paused"
    COMPLETE = "complete"


@dataclass(frozen=True)
class SimulationConfig:
    """
    Parameters of a sweep.

    Range limits of the input form are enforced in
    :mod:`diffusionscaling.model.validation`; here only the physical
    consistency (positive values, min < max) is checked.
    """
    min_size: float = DEFAULT_MIN_SIZE_NM  # nm
    max_size: float = DEFAULT_MAX_SIZE_NM  # nm
    diffusion_coefficient: float = DEFAULT_DIFFUSION_COEFFICIENT  # m²/s
    baseline_size: float = DEFAULT_BASELINE_SIZE_NM  # nm

    def __post_init__(self) -> None:
        if not 0 < self.min_size < self.max_size:
            raise ConfigurationError(
                f"Expected 0 < min size < max size, got {self.min_size!r} and {self.max_size!r}."
            )
        # DiffusionModel checks D and the baseline
        self.diffusion_model()

    def diffusion_model(self) -> DiffusionModel:
        return DiffusionModel(self.diffusion_coefficient, self.baseline_size)

    def generate_radii(self) -> tuple[float, ...]:
        return generate_radii(self.min_size, self.max_size)

    def with_changes(self, **changes: float) -> SimulationConfig:
        return replace(self, **changes)


@dataclass
class MetricSeries:
    """Parallel result series, indexed identically in step order."""
    radii: list[float] = field(default_factory=list)
    diffusion_times: list[float] = field(default_factory=list)
    improvement_factors: list[float] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.radii)

    def append(self, radius: float, time: float, improvement: float) -> None:
        self.radii.append(radius)
        self.diffusion_times.append(time)
        self.improvement_factors.append(improvement)

    def clear(self) -> None:
        self.radii.clear()
        self.diffusion_times.clear()
        self.improvement_factors.clear()

    def as_arrays(self) -> tuple[npt.NDArray[np.float64], npt.NDArray[np.float64], npt.NDArray[np.float64]]:
        """Read-only copies for consumers (chart, tests)."""
        return (
            np.array(self.radii, dtype=np.float64),
            np.array(self.diffusion_times, dtype=np.float64),
            np.array(self.improvement_factors, dtype=np.float64),
        )


@dataclass
class SimulationState:
    """
    The single mutable structure of a sweep. Only the stepper functions
    in :mod:`diffusionscaling.controller.stepper` should write to it.
    """
    radii: tuple[float, ...] = ()
    current_index: int = 0
    running: bool = False
    series: MetricSeries = field(default_factory=MetricSeries)

    @classmethod
    def initial(cls, config: SimulationConfig) -> SimulationState:
        return cls(radii=config.generate_radii())

    @property
    def phase(self) -> Phase:
        if self.running:
            return Phase.RUNNING
        if self.radii and self.current_index >= len(self.radii):
            return Phase.COMPLETE
        if self.current_index == 0:
            return Phase.IDLE
        return Phase.PAUSED

    def current_radius(self, fallback: float) -> float:
        """
        Radius shown by the views: the last computed radius, else the first
        radius of the sequence, else ``fallback``.
        """
        if self.series.radii:
            return self.series.radii[-1]
        if self.radii:
            return self.radii[0]
        return fallback
