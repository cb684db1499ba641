"""
Main Application Window
=======================
The primary GUI container: controls on the left, the particle animation and
the chart on the right.

Why is this file needed?
------------------------
1. Layout: It organizes the high-level visual structure of the application.
2. Routing: It connects the controller's signals to the widgets that repaint.
"""
from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtCore import Qt
from PySide6.QtGui import QAction
from PySide6.QtWidgets import QMainWindow, QWidget, QVBoxLayout, QSplitter, QMessageBox, QApplication

from diffusionscaling.application import VISIBLE_APP_NAME
from diffusionscaling.controller.simulation import SimulationController
from diffusionscaling.model.state import SimulationConfig
from diffusionscaling.view.panels.controls import ControlPanel
from diffusionscaling.view.panels.stats import StatsPanel
from diffusionscaling.view.widgets.animation_canvas import AnimationCanvas
from diffusionscaling.view.widgets.chart import DiffusionChart

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    def __init__(self, controller: Optional[SimulationController] = None) -> None:
        super().__init__()
        self.controller = controller or SimulationController(parent=self)

        self.setWindowTitle(VISIBLE_APP_NAME)
        self.resize(1400, 900)

        splitter = QSplitter(Qt.Horizontal)
        self.setCentralWidget(splitter)

        # --- LEFT SIDE: Controls + Stats ---
        left = QWidget()
        left_layout = QVBoxLayout(left)
        self.control_panel = ControlPanel(self.controller)
        self.stats_panel = StatsPanel(self.controller)
        left_layout.addWidget(self.control_panel)
        left_layout.addWidget(self.stats_panel)
        left_layout.addStretch()
        splitter.addWidget(left)

        # --- RIGHT SIDE: Animation above chart ---
        right = QWidget()
        right_layout = QVBoxLayout(right)
        self.canvas = AnimationCanvas(self.controller)
        self.chart = DiffusionChart()
        right_layout.addWidget(self.canvas, 0)
        right_layout.addWidget(self.chart, 1)
        splitter.addWidget(right)

        splitter.setSizes([350, 1050])

        # --- SIGNAL CONNECTIONS ---
        self.controller.refreshed.connect(self.refresh_chart)
        self.controller.config_changed.connect(self.on_config_changed)
        self.controller.completed.connect(self.on_completed)
        self.control_panel.chart_mode_changed.connect(self.on_chart_mode_changed)

        self._create_actions()
        self._create_menus()

        self.refresh_chart()

    def _create_actions(self) -> None:
        self.act_toggle = QAction("Start / Pause", self)
        self.act_toggle.setShortcut("Space")
        self.act_toggle.triggered.connect(self.controller.toggle)

        self.act_reset = QAction("Reset", self)
        self.act_reset.setShortcut("Ctrl+R")
        self.act_reset.triggered.connect(self.controller.reset)

        self.act_exit = QAction("Exit", self)
        self.act_exit.triggered.connect(self.close)

        self.act_about = QAction("About", self)
        self.act_about.triggered.connect(self.on_about)

    def _create_menus(self) -> None:
        menu_bar = self.menuBar()

        sim_menu = menu_bar.addMenu("&Simulation")
        sim_menu.addAction(self.act_toggle)
        sim_menu.addAction(self.act_reset)
        sim_menu.addSeparator()
        sim_menu.addAction(self.act_exit)

        help_menu = menu_bar.addMenu("&Help")
        help_menu.addAction(self.act_about)

    # --- SLOTS ---

    def refresh_chart(self) -> None:
        self.chart.update_from(self.controller.series, self.controller.config)

    def on_config_changed(self, config: SimulationConfig) -> None:
        self.refresh_chart()

        # a running sweep keeps its radii, the new range only takes effect on reset
        radii = self.controller.state.radii
        if self.controller.is_running and radii and (radii[0], radii[-1]) != (config.min_size, config.max_size):
            self.statusBar().showMessage(
                f"Size range {config.min_size:g} - {config.max_size:g} nm applies after Reset.", 8000
            )

    def on_chart_mode_changed(self, mode: str) -> None:
        self.chart.set_mode(mode)
        self.refresh_chart()

    def on_completed(self) -> None:
        logger.info("Sweep finished, chart and stats are final.")
        self.statusBar().showMessage(f"Sweep complete: {len(self.controller.series)} data points.", 5000)

    def on_about(self) -> None:
        QMessageBox.about(
            self,
            f"About {QApplication.applicationDisplayName() or VISIBLE_APP_NAME}",
            "Diffusion time t = L²/D as a function of particle radius.\n"
            "Smaller particles diffuse over their own size quadratically faster.",
        )

    def closeEvent(self, event, /) -> None:
        self.controller.pause()
        event.accept()
