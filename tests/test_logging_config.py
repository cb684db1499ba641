import logging

import pytest

from diffusionscaling.logging_config import setup_logging


def test_setup_logging_console_and_file(tmp_path):
    log_file = tmp_path / "sweep.log"
    logger = setup_logging(level="debug", log_file=str(log_file))

    assert logger.name == "diffusionscaling"
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 2

    logging.getLogger("diffusionscaling.controller.stepper").debug("step message")
    for handler in logger.handlers:
        handler.flush()
    assert "step message" in log_file.read_text(encoding="utf-8")

    # a second call replaces the handlers instead of stacking them
    logger = setup_logging(level=logging.INFO)
    assert len(logger.handlers) == 1
    assert logging.getLogger("matplotlib").level == logging.WARNING


def test_setup_logging_rejects_unknown_level():
    with pytest.raises(ValueError):
        setup_logging(level="chatty")
