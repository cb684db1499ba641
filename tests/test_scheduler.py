import pytest

from diffusionscaling.controller.scheduler import RefreshThrottle, QtFrameClock


def test_refresh_every_third_and_last():
    throttle = RefreshThrottle(every=3)
    refreshed = [i for i in range(101) if throttle.should_refresh(i, 101)]
    assert refreshed[:4] == [0, 3, 6, 9]
    assert refreshed[-1] == 100
    assert 99 in refreshed
    assert 98 not in refreshed


def test_refresh_every_tick():
    throttle = RefreshThrottle(every=1)
    assert all(throttle.should_refresh(i, 10) for i in range(10))


def test_refresh_interval_validated():
    with pytest.raises(ValueError):
        RefreshThrottle(every=0)


def test_qt_frame_clock_start_stop(qapp):
    clock = QtFrameClock(interval_ms=16)
    assert not clock.is_active()
    clock.start()
    assert clock.is_active()
    clock.stop()
    assert not clock.is_active()


def test_qt_frame_clock_delivers_frames(qapp):
    from PySide6.QtCore import QEventLoop, QTimer

    clock = QtFrameClock(interval_ms=1)
    frames = []
    loop = QEventLoop()

    def on_frame():
        frames.append(1)
        if len(frames) >= 3:
            clock.stop()
            loop.quit()

    clock.on_frame = on_frame
    clock.start()
    QTimer.singleShot(2000, loop.quit)
    loop.exec()

    assert len(frames) == 3
    assert not clock.is_active()
