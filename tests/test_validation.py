import pytest

from diffusionscaling.errors import ConfigurationError
from diffusionscaling.model.state import SimulationConfig
from diffusionscaling.model.validation import (
    parse_float, validate_max_size, validate_min_size, validate_diffusion_coefficient, validate_baseline_size
)


def test_parse_float_accepts_scientific_and_thousands():
    assert parse_float(" 1e-13 ") == 1e-13
    assert parse_float("10,000") == 10000.0


@pytest.mark.parametrize("text", ["", "abc", "nan", "inf"])
def test_parse_float_rejects_garbage(text):
    with pytest.raises(ConfigurationError):
        parse_float(text)


@pytest.mark.parametrize("value", [10.0, 500.0, 10000.0])
def test_max_size_in_range(value):
    assert validate_max_size(value) == value


@pytest.mark.parametrize("value", [9.99, 10000.1, -5.0])
def test_max_size_out_of_range(value):
    with pytest.raises(ConfigurationError, match="between 10 and 10,000 nm"):
        validate_max_size(value)


def test_min_size_must_stay_below_max():
    assert validate_min_size(0.1, 1000.0) == 0.1
    assert validate_min_size(999.0, 1000.0) == 999.0
    with pytest.raises(ConfigurationError, match="less than max size"):
        validate_min_size(1000.0, 1000.0)
    with pytest.raises(ConfigurationError):
        validate_min_size(50.0, 20.0)
    with pytest.raises(ConfigurationError):
        validate_min_size(0.05, 1000.0)


@pytest.mark.parametrize("value,ok", [(1e-13, True), (0.999, True), (0.0, False), (1.0, False), (-1e-14, False)])
def test_custom_diffusion_coefficient(value, ok):
    if ok:
        assert validate_diffusion_coefficient(value) == value
    else:
        with pytest.raises(ConfigurationError):
            validate_diffusion_coefficient(value)


def test_baseline_must_be_positive():
    assert validate_baseline_size(10000) == 10000.0
    with pytest.raises(ConfigurationError):
        validate_baseline_size(0)


def test_configuration_error_is_a_value_error():
    with pytest.raises(ValueError):
        validate_max_size(1.0)


def test_simulation_config_requires_min_below_max():
    with pytest.raises(ConfigurationError):
        SimulationConfig(min_size=100.0, max_size=10.0)
    with pytest.raises(ConfigurationError):
        SimulationConfig(diffusion_coefficient=0.0)
    assert SimulationConfig().with_changes(max_size=500.0).max_size == 500.0
