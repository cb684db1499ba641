from __future__ import annotations

from typing import TYPE_CHECKING

from PySide6.QtCore import Qt, QPointF
from PySide6.QtGui import QPainter, QPen, QColor, QFont, QBrush
from PySide6.QtWidgets import QWidget

from diffusionscaling.config import (
    CANVAS_HEIGHT, CANVAS_GRID_SPACING, CANVAS_BACKGROUND, CANVAS_GRID_COLOR, CANVAS_TEXT_COLOR
)
from diffusionscaling.utils import format_micrometres

if TYPE_CHECKING:
    from diffusionscaling.controller.simulation import SimulationController
    from diffusionscaling.controller.particles import ParticleVisual


class AnimationCanvas(QWidget):
    """
    Side-by-side comparison of the baseline and the current particle.

    Reads the particle visuals from the controller on every paint; it never
    writes back.
    """
    def __init__(self, controller: SimulationController, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.controller = controller
        self.setFixedHeight(CANVAS_HEIGHT)

        self.controller.frame_advanced.connect(self.update)
        self.controller.running_changed.connect(lambda *_: self.update())

    def paintEvent(self, event) -> None:
        painter = QPainter(self)
        painter.setRenderHint(QPainter.Antialiasing)
        try:
            self._draw_background(painter)

            config = self.controller.config
            particles = self.controller.particles
            self._draw_particle(
                painter, particles.baseline, f"Baseline ({format_micrometres(config.baseline_size)})"
            )
            self._draw_particle(
                painter, particles.current, f"Current ({self.controller.current_radius:.1f} nm)"
            )
        finally:
            painter.end()

    def _draw_background(self, painter: QPainter) -> None:
        width, height = self.width(), self.height()
        painter.fillRect(0, 0, width, height, QColor(CANVAS_BACKGROUND))

        painter.setPen(QPen(QColor(CANVAS_GRID_COLOR), 1))
        for x in range(0, width, CANVAS_GRID_SPACING):
            painter.drawLine(x, 0, x, height)
        for y in range(0, height, CANVAS_GRID_SPACING):
            painter.drawLine(0, y, width, y)

    def _draw_particle(self, painter: QPainter, particle: ParticleVisual, label: str) -> None:
        center = QPointF(self.width() * particle.x_fraction, self.height() / 2)
        color = QColor(particle.color)

        # body
        painter.setPen(Qt.NoPen)
        painter.setOpacity(0.7)
        painter.setBrush(QBrush(color))
        painter.drawEllipse(center, particle.radius, particle.radius)
        painter.setOpacity(1.0)
        painter.setBrush(Qt.NoBrush)
        painter.setPen(QPen(color, 2))
        painter.drawEllipse(center, particle.radius, particle.radius)

        # diffusion waves
        if self.controller.is_running:
            for wave_radius, opacity in particle.waves():
                painter.setOpacity(opacity)
                painter.drawEllipse(center, wave_radius, wave_radius)
            painter.setOpacity(1.0)

        font = QFont()
        font.setBold(True)
        font.setPixelSize(14)
        painter.setFont(font)
        painter.setPen(QColor(CANVAS_TEXT_COLOR))
        metrics = painter.fontMetrics()
        text_width = metrics.horizontalAdvance(label)
        painter.drawText(
            QPointF(center.x() - text_width / 2, center.y() - particle.radius - 20),
            label,
        )
