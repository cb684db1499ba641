"""
Simulation Controller
=====================
Owns the sweep (configuration, state, particle visuals) and the frame clock,
and tells the views what changed via Qt signals.

Why is this file needed?
------------------------
1. Orchestration: It is the only place where the stepper, the refresh policy
   and the particle animation meet.
2. Signals: Views never poll; they repaint when the controller emits.
3. Validation gate: Configuration setters reject invalid input with a
   ConfigurationError before anything reaches the stepper.
"""
from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtCore import QObject, Signal

from diffusionscaling.controller import stepper
from diffusionscaling.controller.particles import ParticlePair
from diffusionscaling.controller.scheduler import FrameClock, QtFrameClock, RefreshThrottle
from diffusionscaling.errors import ConfigurationError
from diffusionscaling.model.state import SimulationConfig, SimulationState, MetricSeries, Phase
from diffusionscaling.model.validation import (
    validate_min_size, validate_max_size, validate_diffusion_coefficient, validate_baseline_size
)

logger = logging.getLogger(__name__)


class SimulationController(QObject):
    # Emitted when chart/stats should redraw (throttled during a run)
    refreshed = Signal()
    # Emitted on every animation frame; the canvas repaints
    frame_advanced = Signal()
    running_changed = Signal(bool)
    completed = Signal()
    config_changed = Signal(object)  # SimulationConfig

    def __init__(
        self,
        config: Optional[SimulationConfig] = None,
        clock: Optional[FrameClock] = None,
        throttle: Optional[RefreshThrottle] = None,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._config = config or SimulationConfig()
        self._state = SimulationState.initial(self._config)
        self.particles = ParticlePair()
        self.throttle = throttle or RefreshThrottle()

        self.clock: FrameClock = clock if clock is not None else QtFrameClock(parent=self)
        self.clock.on_frame = self.on_frame

        self._update_particles()

    # ------------------------------------------------------------------------------
    # Read-only views of the sweep
    # ------------------------------------------------------------------------------

    @property
    def config(self) -> SimulationConfig:
        return self._config

    @property
    def state(self) -> SimulationState:
        return self._state

    @property
    def series(self) -> MetricSeries:
        return self._state.series

    @property
    def phase(self) -> Phase:
        return self._state.phase

    @property
    def is_running(self) -> bool:
        return self._state.running

    @property
    def current_radius(self) -> float:
        return self._state.current_radius(fallback=self._config.min_size)

    # ------------------------------------------------------------------------------
    # Run control
    # ------------------------------------------------------------------------------

    def toggle(self) -> None:
        """Start/Pause button."""
        if stepper.toggle(self._state, self._config):
            self.clock.start()
        else:
            self.clock.stop()
        self.running_changed.emit(self._state.running)

    def start(self) -> None:
        if stepper.start(self._state, self._config):
            self.clock.start()
        self.running_changed.emit(self._state.running)

    def pause(self) -> None:
        stepper.pause(self._state)
        self.clock.stop()
        self.running_changed.emit(False)

    def reset(self) -> None:
        self.clock.stop()
        stepper.reset(self._state, self._config)
        self.particles.reset_progress()
        self._update_particles()

        self.refreshed.emit()
        self.frame_advanced.emit()
        self.running_changed.emit(False)

    def on_frame(self) -> None:
        """One frame of the clock: at most one step of the sweep."""
        if not self._state.running:
            self.clock.stop()
            self.running_changed.emit(False)
            return

        result = stepper.tick(self._state, self._config)
        if result is None:
            self.clock.stop()
            self.running_changed.emit(False)
            return

        if self.throttle.should_refresh(result.index, len(self._state.radii)):
            self._update_particles()
            self.refreshed.emit()

        self.particles.advance()
        self.frame_advanced.emit()

        if result.completed:
            self.clock.stop()
            self.running_changed.emit(False)
            self.completed.emit()

    # ------------------------------------------------------------------------------
    # Configuration (validated)
    # ------------------------------------------------------------------------------

    def set_max_size(self, value: float) -> None:
        value = validate_max_size(value)
        if value <= self._config.min_size:
            raise ConfigurationError(
                f"Max size must be greater than the min size ({self._config.min_size:g} nm)"
            )
        self._apply(max_size=value)

    def set_min_size(self, value: float) -> None:
        self._apply(min_size=validate_min_size(value, self._config.max_size))

    def set_diffusion_coefficient(self, value: float) -> None:
        self._apply(diffusion_coefficient=validate_diffusion_coefficient(value))

    def set_baseline_size(self, value: float) -> None:
        self._apply(baseline_size=validate_baseline_size(value))

    def _apply(self, **changes: float) -> None:
        new_config = self._config.with_changes(**changes)
        if new_config == self._config:
            return
        self._config = new_config
        logger.info(f"Configuration changed: {changes}")
        self.config_changed.emit(self._config)

        # A running sweep keeps its radii; new D/baseline apply to the next steps
        if not self._state.running:
            self.reset()

    def _update_particles(self) -> None:
        self.particles.update_properties(self._config, self.current_radius)
