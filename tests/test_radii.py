import numpy as np
import pytest

from diffusionscaling.model.radii import generate_radii, log_spaced


@pytest.mark.parametrize(
    "min_size,max_size",
    [(1.0, 1000.0), (0.1, 10.0), (0.1, 10000.0), (999.0, 1000.0), (3.7, 4321.0)],
)
def test_generate_radii_shape_and_endpoints(min_size, max_size):
    radii = generate_radii(min_size, max_size)

    assert len(radii) == 101
    assert radii[0] == min_size
    assert radii[100] == max_size
    assert all(b > a for a, b in zip(radii, radii[1:]))


def test_generate_radii_is_log_uniform():
    radii = np.array(generate_radii(1.0, 1000.0))
    ratios = radii[1:] / radii[:-1]
    assert ratios == pytest.approx(np.full(100, 10 ** (3 / 100)), rel=1e-12)
    # decade boundaries land on exact sample indices
    assert radii[33] == pytest.approx(10 ** 0.99)
    assert radii[50] == pytest.approx(10 ** 1.5)


def test_generate_radii_is_deterministic_and_immutable():
    first = generate_radii(1.0, 1000.0)
    assert first == generate_radii(1.0, 1000.0)
    assert isinstance(first, tuple)


def test_log_spaced_custom_steps():
    values = log_spaced(1.0, 100.0, steps=2)
    assert values.tolist() == pytest.approx([1.0, 10.0, 100.0])
