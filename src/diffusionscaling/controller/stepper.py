"""
Simulation Stepper
==================
State machine of the radius sweep.

    Idle --start--> Running --tick--> Running ... --tick--> Complete
                    Running --pause--> Paused --start--> Running
    any --reset--> Idle

Every function takes the single owned :class:`SimulationState` and mutates it.
One tick is one discrete unit of work; ticks are delivered by a frame clock
(see :mod:`diffusionscaling.controller.scheduler`), so nothing here knows about
timers or Qt.

Note: This module should be pure Python and should NOT import PySide6.
"""
from __future__ import annotations

from dataclasses import dataclass
import logging

from diffusionscaling.model.diffusion import diffusion_time, improvement_factor
from diffusionscaling.model.state import SimulationConfig, SimulationState, Phase

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StepResult:
    """Metrics computed by a single tick."""
    index: int
    radius: float
    diffusion_time: float
    improvement_factor: float
    completed: bool


def start(state: SimulationState, config: SimulationConfig) -> bool:
    """
    Start or resume the sweep.

    Returns:
        True if the state is running afterwards.
    """
    if not state.radii:
        state.radii = config.generate_radii()

    if state.phase is Phase.COMPLETE:
        logger.info("Sweep already complete, reset to run again.")
        return False

    if not state.running:
        state.running = True
        logger.info(f"Sweep started at index {state.current_index}/{len(state.radii)}.")
    return True


def pause(state: SimulationState) -> None:
    """Freeze the index, keep the series."""
    if state.running:
        state.running = False
        logger.info(f"Sweep paused at index {state.current_index}/{len(state.radii)}.")


def toggle(state: SimulationState, config: SimulationConfig) -> bool:
    """Start if stopped, pause if running. Returns the new running flag."""
    if state.running:
        pause(state)
        return False
    return start(state, config)


def tick(state: SimulationState, config: SimulationConfig) -> StepResult | None:
    """
    Compute the metrics of the current radius and advance the index.

    A tick outside of the running phase is a no-op returning None.
    """
    if not state.running:
        return None

    if state.current_index >= len(state.radii):
        state.running = False
        return None

    index = state.current_index
    radius = state.radii[index]
    time = float(diffusion_time(radius, config.diffusion_coefficient))
    improvement = float(improvement_factor(radius, config.baseline_size, config.diffusion_coefficient))

    state.series.append(radius, time, improvement)
    state.current_index += 1

    completed = state.current_index >= len(state.radii)
    if completed:
        state.running = False
        logger.info(f"Sweep complete: {len(state.series)} data points.")
    else:
        logger.debug(f"Step {index}: r={radius:.4g} nm, t={time:.4g} s, gain={improvement:.4g}")

    return StepResult(
        index=index,
        radius=radius,
        diffusion_time=time,
        improvement_factor=improvement,
        completed=completed,
    )


def reset(state: SimulationState, config: SimulationConfig) -> None:
    """Back to Idle: clear the series and regenerate the radius sequence."""
    state.running = False
    state.current_index = 0
    state.series.clear()
    state.radii = config.generate_radii()
    logger.info(
        f"Sweep reset: {len(state.radii)} radii from {config.min_size:g} to {config.max_size:g} nm."
    )
