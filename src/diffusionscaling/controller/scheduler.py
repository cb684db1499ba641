"""
Frame Scheduling
================
Decouples *when* the sweep advances from *what* a step computes.

Why is this file needed?
------------------------
1. Testability: The controller talks to a :class:`FrameClock`, so tests can
   deliver frames by hand instead of waiting for a real timer.
2. Throttling: Repainting the chart on every frame is wasteful; the
   :class:`RefreshThrottle` policy decides which ticks also refresh the views.

Classes:
    FrameClock: Interface of a per-frame callback source.
    QtFrameClock: QTimer-based clock used by the application.
    RefreshThrottle: Every-Nth-tick refresh policy.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional, Protocol

from PySide6.QtCore import QObject, QTimer

from diffusionscaling.config import FRAME_INTERVAL_MS, REFRESH_EVERY_N_TICKS


class FrameClock(Protocol):
    """Source of frame callbacks. At most one callback per frame."""
    on_frame: Optional[Callable[[], None]]

    def start(self) -> None: ...
    def stop(self) -> None: ...
    def is_active(self) -> bool: ...


class QtFrameClock(QObject):
    """Frame clock backed by a repeating QTimer on the GUI event loop."""

    def __init__(self, interval_ms: int = FRAME_INTERVAL_MS, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self.on_frame: Optional[Callable[[], None]] = None

        self._timer = QTimer(self)
        self._timer.setInterval(interval_ms)
        self._timer.timeout.connect(self._on_timeout)

    def start(self) -> None:
        if not self._timer.isActive():
            self._timer.start()

    def stop(self) -> None:
        self._timer.stop()

    def is_active(self) -> bool:
        return self._timer.isActive()

    def _on_timeout(self) -> None:
        if self.on_frame is not None:
            self.on_frame()


@dataclass(frozen=True)
class RefreshThrottle:
    """Refresh on every ``every``-th step index and always on the last one."""
    every: int = REFRESH_EVERY_N_TICKS

    def __post_init__(self) -> None:
        if self.every < 1:
            raise ValueError(f"Refresh interval must be at least 1, got {self.every}.")

    def should_refresh(self, index: int, total: int) -> bool:
        return index % self.every == 0 or index == total - 1
