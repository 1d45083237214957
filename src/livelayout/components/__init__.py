"""Concrete elements: text panels, line plots and bar plots."""

from livelayout.components.bar_plot import BarPlot
from livelayout.components.line_plot import BrailleCanvas, LinePlot
from livelayout.components.text_panel import TextPanel

__all__ = [
    "BarPlot",
    "BrailleCanvas",
    "LinePlot",
    "TextPanel",
]
