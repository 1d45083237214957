"""LinePlot element - a series drawn on a braille canvas.

Each character cell holds a 2x4 block of braille dots, so the canvas is
addressed in half-columns horizontally and quarter-lines vertically.
"""

from __future__ import annotations

from typing import Any, Sequence

from livelayout.components.frame import center, render_frame
from livelayout.types import HalfColumn

DEFAULT_HEIGHT = 15

# Bit for the dot at (x & 1, y & 3) inside a cell:
#  1 4
#  2 5
#  3 6
#  7 8
_BRAILLE_BITS = ((0x01, 0x08), (0x02, 0x10), (0x04, 0x20), (0x40, 0x80))
_BRAILLE_BASE = 0x2800

Limits = tuple[float, float]


def format_tick(value: float) -> str:
    text = f"{value:.3g}"
    return "0" if text == "-0" else text


def _extent(values: Sequence[float], limits: Limits | None) -> Limits:
    if limits is not None:
        low, high = limits
    elif values:
        low, high = min(values), max(values)
    else:
        low, high = 0.0, 1.0
    if low == high:
        low, high = low - 1, high + 1
    return float(low), float(high)


class BrailleCanvas:
    """Dot grid of ``width`` x ``height`` cells."""

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self.pixel_width = width * 2
        self.pixel_height = height * 4
        self._cells = [[0] * width for _ in range(height)]

    def set_pixel(self, x: int, y: int) -> None:
        if 0 <= x < self.pixel_width and 0 <= y < self.pixel_height:
            self._cells[y >> 2][x >> 1] |= _BRAILLE_BITS[y & 3][x & 1]

    def line(self, x0: int, y0: int, x1: int, y1: int) -> None:
        steps = max(abs(x1 - x0), abs(y1 - y0), 1)
        for step in range(steps + 1):
            self.set_pixel(
                round(x0 + (x1 - x0) * step / steps),
                round(y0 + (y1 - y0) * step / steps),
            )

    def rows(self, color: int | None = None) -> list[str]:
        rendered = []
        for cells in self._cells:
            text = "".join(chr(_BRAILLE_BASE + c) if c else " " for c in cells)
            if color is not None and text.strip():
                text = f"\x1b[{color}m{text}\x1b[0m"
            rendered.append(text)
        return rendered


class LinePlot:
    """Line chart of ``ys`` against ``xs`` with ticks and axis labels."""

    def __init__(
        self,
        xs: Sequence[float],
        ys: Sequence[float],
        width: int = 40,
        height: int | None = DEFAULT_HEIGHT,
        title: str = "",
        xlabel: str = "",
        ylabel: str = "",
        xlim: Limits | None = None,
        ylim: Limits | None = None,
        color: int | None = None,
    ) -> None:
        if len(xs) != len(ys):
            raise ValueError(f"xs and ys differ in length: {len(xs)} != {len(ys)}")
        self._xs = list(xs)
        self._ys = list(ys)
        self._title = title
        self._xlabel = xlabel
        self._ylabel = ylabel
        self._xlim = xlim
        self._ylim = ylim
        self._color = color
        self.canvas = BrailleCanvas(width, DEFAULT_HEIGHT if height is None else height)
        self._plot()

    def _plot(self) -> None:
        canvas = self.canvas
        x_low, x_high = _extent(self._xs, self._xlim)
        y_low, y_high = _extent(self._ys, self._ylim)

        def to_pixel(x: float, y: float) -> tuple[int, int]:
            px = round((x - x_low) / (x_high - x_low) * (canvas.pixel_width - 1))
            py = round((y_high - y) / (y_high - y_low) * (canvas.pixel_height - 1))
            return px, py

        points = [to_pixel(x, y) for x, y in zip(self._xs, self._ys)]
        if len(points) == 1:
            canvas.set_pixel(*points[0])
        for (x0, y0), (x1, y1) in zip(points, points[1:]):
            canvas.line(x0, y0, x1, y1)

    def canvas_width(self) -> HalfColumn:
        return HalfColumn(self.canvas.pixel_width)

    def decorations(self) -> dict[str, Any]:
        return {
            "title": self._title,
            "xlabel": self._xlabel,
            "ylabel": self._ylabel,
            "xlim": self._xlim,
            "ylim": self._ylim,
        }

    def _gutter(self) -> list[str]:
        height = self.canvas.height
        y_low, y_high = _extent(self._ys, self._ylim)
        top, bottom = format_tick(y_high), format_tick(y_low)
        tick_width = max(len(top), len(bottom))
        label_width = len(self._ylabel) + 1 if self._ylabel else 0

        gutter = []
        for row in range(height):
            label = self._ylabel if self._ylabel and row == height // 2 else ""
            if row == 0:
                tick = top
            elif row == height - 1:
                tick = bottom
            else:
                tick = ""
            gutter.append(label.ljust(label_width) + tick.rjust(tick_width) + " ")
        return gutter

    def _footer(self) -> list[str]:
        outer = self.canvas.width + 2
        x_low, x_high = _extent(self._xs, self._xlim)
        left, right = format_tick(x_low), format_tick(x_high)
        space = max(outer - len(left) - len(right), 1)
        return [left + " " * space + right, center(self._xlabel, outer)]

    def render(self) -> str:
        return render_frame(
            self.canvas.rows(self._color),
            self.canvas.width,
            title=self._title,
            gutter=self._gutter(),
            footer=self._footer(),
        )

    def __str__(self) -> str:
        return self.render()
