import math

import pytest

from diffusionscaling.controller.particles import ParticlePair, ParticleVisual
from diffusionscaling.model.state import SimulationConfig


def test_baseline_is_large_and_slow():
    pair = ParticlePair()
    pair.update_properties(SimulationConfig(), current_radius=1.0)
    assert pair.baseline.radius == pytest.approx(48.0)
    assert pair.baseline.speed == pytest.approx(0.003)


def test_current_particle_scales_with_size_and_speed():
    config = SimulationConfig(baseline_size=10000.0)
    pair = ParticlePair()

    pair.update_properties(config, current_radius=1000.0)
    # 60 * (1000/10000) * 2 = 12 px, speed 0.003 * sqrt(100)
    assert pair.current.radius == pytest.approx(12.0)
    assert pair.current.speed == pytest.approx(0.03)

    pair.update_properties(config, current_radius=1.0)
    assert pair.current.radius == pytest.approx(10.0)  # clamped
    assert pair.current.speed == pytest.approx(0.003 * math.sqrt(1e8))


def test_progress_wraps():
    particle = ParticleVisual(0.5, "#000000", radius=20.0, speed=0.4)
    particle.advance()
    particle.advance()
    assert particle.progress == pytest.approx(0.8)
    particle.advance()
    assert particle.progress == 0.0


def test_waves():
    particle = ParticleVisual(0.5, "#000000", radius=20.0, progress=0.1)
    waves = particle.waves()
    assert len(waves) == 3
    assert waves[0] == pytest.approx((30.0, 0.4))
    assert waves[1] == pytest.approx((60.0, 0.25))
    assert waves[2][0] == pytest.approx(90.0)
    assert waves[2][1] == pytest.approx(0.1)

    particle.progress = 0.9
    assert all(opacity == 0.0 for _, opacity in particle.waves())


def test_reset_progress():
    pair = ParticlePair()
    pair.baseline.progress = 0.5
    pair.current.progress = 0.7
    pair.reset_progress()
    assert pair.baseline.progress == pair.current.progress == 0.0
