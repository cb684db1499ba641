"""
Controls Panel
==============
Simulation settings (validated text inputs and selectors) and the
Start/Pause and Reset buttons.

Invalid input is reported with a message box and the previous valid value is
put back into the input; the controller never sees it.
"""
from __future__ import annotations

import logging
from typing import Callable

from PySide6.QtCore import Signal, Slot
from PySide6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QGroupBox, QFormLayout, QLineEdit, QComboBox,
    QPushButton, QMessageBox, QStyle
)

from diffusionscaling.config import (
    DIFFUSION_PRESETS, BASELINE_PRESETS, START_BUTTON_COLOR, PAUSE_BUTTON_COLOR
)
from diffusionscaling.controller.simulation import SimulationController
from diffusionscaling.errors import ConfigurationError
from diffusionscaling.model.validation import parse_float
from diffusionscaling.view.widgets.chart import ChartMode, CHART_MODE_LABELS

logger = logging.getLogger(__name__)

CUSTOM_KEY = "custom"


class ControlPanel(QWidget):
    chart_mode_changed = Signal(str)

    def __init__(self, controller: SimulationController, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.controller = controller

        layout = QVBoxLayout(self)

        # --- Run controls ---
        grp_run = QGroupBox("Simulation")
        hbox_run = QHBoxLayout(grp_run)

        self.btn_toggle = QPushButton("Start")
        self.btn_toggle.setMinimumHeight(40)
        self.btn_toggle.clicked.connect(self.controller.toggle)
        hbox_run.addWidget(self.btn_toggle)

        self.btn_reset = QPushButton("Reset")
        self.btn_reset.setMinimumHeight(40)
        self.btn_reset.setIcon(self.style().standardIcon(QStyle.SP_BrowserReload))
        self.btn_reset.clicked.connect(self.controller.reset)
        hbox_run.addWidget(self.btn_reset)

        layout.addWidget(grp_run)

        # --- Particle sizes ---
        grp_sizes = QGroupBox("Particle Size Range")
        form_sizes = QFormLayout(grp_sizes)

        self.edit_max_size = QLineEdit()
        self.edit_max_size.setToolTip("10 - 10,000 nm")
        self.edit_max_size.editingFinished.connect(self.on_max_size_edited)
        form_sizes.addRow("Max size [nm]:", self.edit_max_size)

        self.edit_min_size = QLineEdit()
        self.edit_min_size.setToolTip("0.1 - 1,000 nm, less than max size")
        self.edit_min_size.editingFinished.connect(self.on_min_size_edited)
        form_sizes.addRow("Min size [nm]:", self.edit_min_size)

        layout.addWidget(grp_sizes)

        # --- Medium ---
        grp_medium = QGroupBox("Medium")
        form_medium = QFormLayout(grp_medium)

        self.combo_diffusion = QComboBox()
        for label, value in DIFFUSION_PRESETS:
            self.combo_diffusion.addItem(label, userData=value)
        self.combo_diffusion.addItem("Custom...", userData=CUSTOM_KEY)
        self.combo_diffusion.currentIndexChanged.connect(self.on_diffusion_selected)
        form_medium.addRow("Diffusion coefficient:", self.combo_diffusion)

        self.edit_custom_diffusion = QLineEdit()
        self.edit_custom_diffusion.setPlaceholderText("e.g. 1e-13")
        self.edit_custom_diffusion.setToolTip("Custom D in m²/s, 0 < D < 1")
        self.edit_custom_diffusion.editingFinished.connect(self.on_custom_diffusion_edited)
        form_medium.addRow("Custom D [m²/s]:", self.edit_custom_diffusion)
        self._custom_row_label = form_medium.labelForField(self.edit_custom_diffusion)

        self.combo_baseline = QComboBox()
        for label, value in BASELINE_PRESETS:
            self.combo_baseline.addItem(label, userData=value)
        self.combo_baseline.currentIndexChanged.connect(self.on_baseline_selected)
        form_medium.addRow("Baseline particle:", self.combo_baseline)

        layout.addWidget(grp_medium)

        # --- Chart ---
        grp_chart = QGroupBox("Chart")
        form_chart = QFormLayout(grp_chart)

        self.combo_chart = QComboBox()
        for mode in ChartMode:
            self.combo_chart.addItem(CHART_MODE_LABELS[mode], userData=mode.value)
        self.combo_chart.currentIndexChanged.connect(
            lambda *_: self.chart_mode_changed.emit(self.combo_chart.currentData())
        )
        form_chart.addRow("Show:", self.combo_chart)

        layout.addWidget(grp_chart)
        layout.addStretch()

        self.controller.running_changed.connect(self.update_toggle_button)

        self.load_from_config()
        self.update_toggle_button(self.controller.is_running)

    def load_from_config(self) -> None:
        """Syncs the inputs from the controller's configuration."""
        config = self.controller.config
        self.edit_max_size.setText(f"{config.max_size:g}")
        self.edit_min_size.setText(f"{config.min_size:g}")

        self.combo_diffusion.blockSignals(True)
        self.combo_baseline.blockSignals(True)
        try:
            index = self.combo_diffusion.findData(config.diffusion_coefficient)
            self.combo_diffusion.setCurrentIndex(index if index >= 0 else self.combo_diffusion.count() - 1)
            self.edit_custom_diffusion.setText(f"{config.diffusion_coefficient:g}")
            self._set_custom_visible(index < 0)

            index = self.combo_baseline.findData(config.baseline_size)
            if index >= 0:
                self.combo_baseline.setCurrentIndex(index)
        finally:
            self.combo_diffusion.blockSignals(False)
            self.combo_baseline.blockSignals(False)

    # --- SLOTS ---

    @Slot()
    def on_max_size_edited(self) -> None:
        self._apply_text(self.edit_max_size, self.controller.set_max_size, "max_size")

    @Slot()
    def on_min_size_edited(self) -> None:
        self._apply_text(self.edit_min_size, self.controller.set_min_size, "min_size")

    @Slot()
    def on_custom_diffusion_edited(self) -> None:
        self._apply_text(
            self.edit_custom_diffusion, self.controller.set_diffusion_coefficient, "diffusion_coefficient"
        )

    @Slot(int)
    def on_diffusion_selected(self, index: int) -> None:
        value = self.combo_diffusion.itemData(index)
        if value == CUSTOM_KEY:
            # the field starts from the coefficient in effect, not a stale entry
            self.edit_custom_diffusion.setText(f"{self.controller.config.diffusion_coefficient:g}")
            self._set_custom_visible(True)
            self.edit_custom_diffusion.setFocus()
            return
        self._set_custom_visible(False)
        self.controller.set_diffusion_coefficient(value)

    @Slot(int)
    def on_baseline_selected(self, index: int) -> None:
        self.controller.set_baseline_size(self.combo_baseline.itemData(index))

    @Slot(bool)
    def update_toggle_button(self, running: bool) -> None:
        if running:
            self.btn_toggle.setText("Pause")
            self.btn_toggle.setIcon(self.style().standardIcon(QStyle.SP_MediaPause))
            self.btn_toggle.setStyleSheet(f"QPushButton {{ background: {PAUSE_BUTTON_COLOR}; color: white; }}")
        else:
            self.btn_toggle.setText("Start")
            self.btn_toggle.setIcon(self.style().standardIcon(QStyle.SP_MediaPlay))
            self.btn_toggle.setStyleSheet(f"QPushButton {{ background: {START_BUTTON_COLOR}; color: white; }}")

    # --- HELPERS ---

    def _apply_text(self, edit: QLineEdit, setter: Callable[[float], None], field_name: str) -> None:
        """Parse and apply the input, or warn and restore the last valid value."""
        try:
            setter(parse_float(edit.text()))
        except ConfigurationError as e:
            logger.warning(f"Rejected {field_name}={edit.text()!r}: {e}")
            previous = getattr(self.controller.config, field_name)
            edit.setText(f"{previous:g}")
            QMessageBox.warning(self, "Invalid Value", str(e))

    def _set_custom_visible(self, visible: bool) -> None:
        self.edit_custom_diffusion.setVisible(visible)
        if self._custom_row_label is not None:
            self._custom_row_label.setVisible(visible)
