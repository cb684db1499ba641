"""
Statistics Panel
"""
from __future__ import annotations

from PySide6.QtWidgets import QWidget, QVBoxLayout, QGroupBox, QFormLayout, QLabel

from diffusionscaling.controller.simulation import SimulationController
from diffusionscaling.utils import format_time, format_factor


class StatsPanel(QWidget):
    """Latest computed data point and the number of points so far."""

    def __init__(self, controller: SimulationController, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.controller = controller

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        group = QGroupBox("Current Data Point")
        form = QFormLayout(group)

        self.lbl_size = QLabel("-")
        form.addRow("Particle radius:", self.lbl_size)

        self.lbl_time = QLabel("-")
        form.addRow("Diffusion time:", self.lbl_time)

        self.lbl_improvement = QLabel("-")
        form.addRow("Improvement:", self.lbl_improvement)

        self.lbl_count = QLabel("0")
        form.addRow("Data points:", self.lbl_count)

        layout.addWidget(group)

        self.controller.refreshed.connect(self.refresh)
        self.refresh()

    def refresh(self) -> None:
        series = self.controller.series
        self.lbl_count.setText(str(len(series)))

        if not len(series):
            self.lbl_size.setText("-")
            self.lbl_time.setText("-")
            self.lbl_improvement.setText("-")
            return

        self.lbl_size.setText(f"{series.radii[-1]:.2f} nm")
        self.lbl_time.setText(format_time(series.diffusion_times[-1]))
        self.lbl_improvement.setText(format_factor(series.improvement_factors[-1]))
