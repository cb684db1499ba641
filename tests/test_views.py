"""Offscreen smoke tests of the widgets."""
import numpy as np
import pytest

from diffusionscaling.view.widgets.chart import ChartMode, DiffusionChart, nearest_index, format_readout


def test_nearest_index_in_log_space():
    xs = np.array([1.0, 10.0, 100.0])
    assert nearest_index(xs, 2.0) == 0
    assert nearest_index(xs, 5.0) == 1
    assert nearest_index(xs, 1e6) == 2
    assert nearest_index(np.empty(0), 5.0) is None
    assert nearest_index(xs, 0.0) is None


def test_format_readout():
    assert format_readout(ChartMode.DIFFUSION, 100.0) == "Diffusion Time: 1.67 min"
    assert format_readout(ChartMode.IMPROVEMENT, 2.0) == "Improvement: 2.00x"


@pytest.fixture
def window(qapp, controller):
    from diffusionscaling.view.main_window import MainWindow

    win = MainWindow(controller)
    yield win
    win.close()


def test_chart_follows_series_and_mode(window, controller, clock):
    controller.start()
    clock.run_until_stopped()

    x, y = window.chart.data()
    assert len(x) == 101
    assert y[-1] == pytest.approx(100.0)  # diffusion time of 1000 nm at D=1e-14

    window.on_chart_mode_changed(ChartMode.IMPROVEMENT.value)
    x, y = window.chart.data()
    assert y[-1] == pytest.approx(100.0)
    assert y[0] == pytest.approx(1e8)
    assert "Improvement" in window.chart.readout_at(1.0)


def test_stats_panel_shows_latest_point(window, controller, clock):
    assert window.stats_panel.lbl_count.text() == "0"
    controller.start()
    clock.run_until_stopped()
    assert window.stats_panel.lbl_count.text() == "101"
    assert window.stats_panel.lbl_size.text() == "1000.00 nm"
    assert window.stats_panel.lbl_time.text() == "1.67 min"
    assert window.stats_panel.lbl_improvement.text() == "100.00x"


def test_toggle_button_reflects_state(window, controller):
    panel = window.control_panel
    assert panel.btn_toggle.text() == "Start"
    panel.btn_toggle.click()
    assert panel.btn_toggle.text() == "Pause"
    panel.btn_toggle.click()
    assert panel.btn_toggle.text() == "Start"


def test_invalid_input_warns_and_restores(window, controller, monkeypatch):
    from PySide6.QtWidgets import QMessageBox

    warnings = []
    monkeypatch.setattr(QMessageBox, "warning", lambda *args, **kwargs: warnings.append(args[2]))

    panel = window.control_panel
    panel.edit_min_size.setText("5000")
    panel.on_min_size_edited()

    assert len(warnings) == 1
    assert "less than max size" in warnings[0]
    assert panel.edit_min_size.text() == "1"
    assert controller.config.min_size == 1.0

    panel.edit_max_size.setText("not a number")
    panel.on_max_size_edited()
    assert len(warnings) == 2
    assert panel.edit_max_size.text() == "1000"


def test_valid_input_resets_sweep(window, controller):
    panel = window.control_panel
    panel.edit_max_size.setText("500")
    panel.on_max_size_edited()
    assert controller.config.max_size == 500.0
    assert controller.state.radii[-1] == 500.0


def test_diffusion_and_baseline_selectors(window, controller):
    panel = window.control_panel
    index = panel.combo_diffusion.findData(1e-12)
    panel.combo_diffusion.setCurrentIndex(index)
    assert controller.config.diffusion_coefficient == 1e-12

    panel.combo_diffusion.setCurrentIndex(panel.combo_diffusion.count() - 1)
    assert not panel.edit_custom_diffusion.isHidden()
    panel.edit_custom_diffusion.setText("3e-13")
    panel.on_custom_diffusion_edited()
    assert controller.config.diffusion_coefficient == 3e-13

    panel.combo_baseline.setCurrentIndex(panel.combo_baseline.findData(1000.0))
    assert controller.config.baseline_size == 1000.0


def test_custom_diffusion_field_shows_coefficient_in_effect(window, controller):
    panel = window.control_panel
    custom_index = panel.combo_diffusion.count() - 1

    panel.combo_diffusion.setCurrentIndex(custom_index)
    panel.edit_custom_diffusion.setText("3e-13")
    panel.on_custom_diffusion_edited()

    panel.combo_diffusion.setCurrentIndex(panel.combo_diffusion.findData(1e-15))
    assert controller.config.diffusion_coefficient == 1e-15

    panel.combo_diffusion.setCurrentIndex(custom_index)
    assert panel.edit_custom_diffusion.text() == "1e-15"
    assert controller.config.diffusion_coefficient == 1e-15


def test_size_change_while_running_hints_reset(window, controller, clock):
    controller.start()
    clock.frame()

    panel = window.control_panel
    panel.edit_max_size.setText("100")
    panel.on_max_size_edited()

    assert controller.is_running
    assert controller.state.radii[-1] == 1000.0
    assert "Reset" in window.statusBar().currentMessage()


def test_coefficient_change_while_running_has_no_hint(window, controller, clock):
    controller.start()
    clock.frame()
    controller.set_diffusion_coefficient(1e-12)
    assert window.statusBar().currentMessage() == ""


def test_canvas_paints_while_running(window, controller, clock):
    window.canvas.resize(800, 400)
    controller.start()
    clock.frame()
    pixmap = window.canvas.grab()
    assert not pixmap.isNull()
