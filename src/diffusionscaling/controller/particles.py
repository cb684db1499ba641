from __future__ import annotations

from dataclasses import dataclass, field
import math

from diffusionscaling.config import (
    MAX_VISUAL_RADIUS, MIN_VISUAL_RADIUS, BASELINE_VISUAL_FACTOR, BASE_PARTICLE_SPEED,
    WAVE_COUNT, WAVE_TRAVEL_PX, WAVE_SPACING_PX, WAVE_BASE_OPACITY, WAVE_OPACITY_STEP,
    BASELINE_COLOR, CURRENT_COLOR,
)
from diffusionscaling.model.state import SimulationConfig


@dataclass
class ParticleVisual:
    """
    One drawn particle. Position is relative to the canvas so that a resize
    only needs a repaint.
    """
    x_fraction: float
    color: str
    radius: float = 0.0  # px
    speed: float = 0.0  # progress per frame
    progress: float = 0.0  # 0..1, phase of the diffusion waves

    def advance(self) -> None:
        self.progress += self.speed
        if self.progress > 1:
            self.progress = 0.0

    def waves(self) -> list[tuple[float, float]]:
        """(radius px, opacity) of each expanding wave ring."""
        rings = []
        for i in range(WAVE_COUNT):
            wave_radius = self.radius + self.progress * WAVE_TRAVEL_PX + i * WAVE_SPACING_PX
            opacity = max(0.0, WAVE_BASE_OPACITY - self.progress - i * WAVE_OPACITY_STEP)
            rings.append((wave_radius, opacity))
        return rings


@dataclass
class ParticlePair:
    """Baseline (left) and current (right) particles of the comparison canvas."""
    baseline: ParticleVisual = field(default_factory=lambda: ParticleVisual(0.25, BASELINE_COLOR))
    current: ParticleVisual = field(default_factory=lambda: ParticleVisual(0.75, CURRENT_COLOR))

    def update_properties(self, config: SimulationConfig, current_radius: float) -> None:
        """
        Derive visual size and speed from the latest metrics.

        The baseline is always drawn large and slow; the current particle
        scales with its size and moves faster by sqrt of its time advantage.
        """
        model = config.diffusion_model()
        baseline_time = model.baseline_time
        current_time = model.get_time(current_radius)

        self.baseline.radius = MAX_VISUAL_RADIUS * BASELINE_VISUAL_FACTOR
        self.baseline.speed = BASE_PARTICLE_SPEED

        size_ratio = current_radius / config.baseline_size
        self.current.radius = max(MIN_VISUAL_RADIUS, MAX_VISUAL_RADIUS * size_ratio * 2)

        time_ratio = baseline_time / current_time
        self.current.speed = BASE_PARTICLE_SPEED * math.sqrt(time_ratio)

    def advance(self) -> None:
        self.baseline.advance()
        self.current.advance()

    def reset_progress(self) -> None:
        self.baseline.progress = 0.0
        self.current.progress = 0.0
