"""Log-log chart of the sweep results."""
from __future__ import annotations

from enum import StrEnum
import logging
from typing import TYPE_CHECKING

import numpy as np
import pyqtgraph as pg
from PySide6.QtCore import Qt, QPointF
from PySide6.QtWidgets import QWidget, QVBoxLayout, QLabel

from diffusionscaling.config import DIFFUSION_CURVE_COLOR, IMPROVEMENT_CURVE_COLOR
from diffusionscaling.utils import format_time, format_factor, format_micrometres

if TYPE_CHECKING:
    import numpy.typing as npt
    from diffusionscaling.model.state import SimulationConfig, MetricSeries


logger = logging.getLogger(__name__)


class ChartMode(StrEnum):
    DIFFUSION = "diffusion"
    IMPROVEMENT = "improvement"


CHART_MODE_LABELS = {
    ChartMode.DIFFUSION: "Diffusion Time",
    ChartMode.IMPROVEMENT: "Improvement Factor",
}


def nearest_index(xs: npt.NDArray[np.float64], x: float) -> int | None:
    """Index of the sample closest to ``x`` in log space, None for no samples."""
    if xs.size == 0 or x <= 0:
        return None
    distances = np.abs(np.log10(xs) - np.log10(x))
    return int(np.argmin(distances))


def format_readout(mode: ChartMode, value: float) -> str:
    if mode is ChartMode.DIFFUSION:
        return f"Diffusion Time: {format_time(value)}"
    return f"Improvement: {format_factor(value)}"


class DiffusionChart(QWidget):
    """
    pyqtgraph plot on log-log axes showing either the diffusion times or the
    improvement factors of the sweep, plus a hover readout of the nearest point.
    """

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.mode = ChartMode.DIFFUSION
        self._radii: npt.NDArray[np.float64] = np.empty(0)
        self._values: npt.NDArray[np.float64] = np.empty(0)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        self.plot_widget = pg.PlotWidget()
        self.plot_widget.setBackground('w')
        self.plot_widget.showGrid(x=True, y=True, alpha=0.3)
        self.plot_widget.setLogMode(x=True, y=True)
        self.plot_widget.setLabel('bottom', 'Particle Radius (nm)', color='black')
        self.plot_widget.getAxis('bottom').setPen('k')
        self.plot_widget.getAxis('left').setPen('k')
        self.plot_widget.getAxis('bottom').setTextPen('k')
        self.plot_widget.getAxis('left').setTextPen('k')
        self.legend = self.plot_widget.addLegend(offset=(10, 10))

        self.curve = self.plot_widget.plot([], [], pen=pg.mkPen(color=DIFFUSION_CURVE_COLOR, width=2))
        layout.addWidget(self.plot_widget, 1)

        self.lbl_readout = QLabel(" ")
        self.lbl_readout.setAlignment(Qt.AlignRight)
        layout.addWidget(self.lbl_readout)

        self.plot_widget.scene().sigMouseMoved.connect(self._on_mouse_moved)

    # ------------------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------------------

    def set_mode(self, mode: ChartMode | str) -> None:
        self.mode = ChartMode(mode)
        logger.debug(f"Chart mode set to {self.mode}.")

    def update_from(self, series: MetricSeries, config: SimulationConfig) -> None:
        """Replot the dataset selected by the current mode."""
        radii, times, improvements = series.as_arrays()
        self._radii = radii

        if self.mode is ChartMode.DIFFUSION:
            self._values = times
            label = f"Diffusion Time (D = {config.diffusion_coefficient:.0e} m²/s)"
            pen = pg.mkPen(color=DIFFUSION_CURVE_COLOR, width=2)
            y_title = "Diffusion Time (s)"
        else:
            self._values = improvements
            label = f"Improvement vs {format_micrometres(config.baseline_size)} Baseline"
            pen = pg.mkPen(color=IMPROVEMENT_CURVE_COLOR, width=3)
            y_title = "Improvement Factor"

        self.curve.setData(self._radii, self._values)
        self.curve.setPen(pen)

        # legend entry follows the dataset label
        self.legend.clear()
        self.legend.addItem(self.curve, label)
        self.plot_widget.setLabel('left', y_title, color='black')

        if self._radii.size:
            self.plot_widget.autoRange()
        else:
            self.lbl_readout.setText(" ")

    def data(self) -> tuple[npt.NDArray[np.float64], npt.NDArray[np.float64]]:
        """The currently plotted (x, y) arrays."""
        return self._radii, self._values

    def readout_at(self, radius: float) -> str:
        """Readout text of the point nearest to ``radius`` (nm)."""
        index = nearest_index(self._radii, radius)
        if index is None:
            return " "
        return f"r = {self._radii[index]:.2f} nm   {format_readout(self.mode, self._values[index])}"

    # ------------------------------------------------------------------------------
    # Internal methods
    # ------------------------------------------------------------------------------

    def _on_mouse_moved(self, pos: QPointF) -> None:
        view_box = self.plot_widget.getPlotItem().getViewBox()
        if not view_box.sceneBoundingRect().contains(pos):
            return
        # view coordinates are log10 values in log mode
        point = view_box.mapSceneToView(pos)
        self.lbl_readout.setText(self.readout_at(10 ** point.x()))
