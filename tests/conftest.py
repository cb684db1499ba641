from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Callable, Optional

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

# No display in CI; must be set before the first QApplication is created
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
os.environ.setdefault("MPLBACKEND", "Agg")


class ManualClock:
    """Frame clock driven by the test: call ``frame()`` to deliver one frame."""

    def __init__(self) -> None:
        self.on_frame: Optional[Callable[[], None]] = None
        self.active = False
        self.starts = 0

    def start(self) -> None:
        self.active = True
        self.starts += 1

    def stop(self) -> None:
        self.active = False

    def is_active(self) -> bool:
        return self.active

    def frame(self) -> None:
        if self.active and self.on_frame is not None:
            self.on_frame()

    def run_until_stopped(self, limit: int = 10_000) -> int:
        frames = 0
        while self.active and frames < limit:
            self.frame()
            frames += 1
        return frames


@pytest.fixture(scope="session")
def qapp():
    from PySide6.QtWidgets import QApplication

    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture
def clock() -> ManualClock:
    return ManualClock()


@pytest.fixture
def controller(qapp, clock):
    from diffusionscaling.controller.simulation import SimulationController

    return SimulationController(clock=clock)
