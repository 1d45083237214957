"""BarPlot element - horizontal bars with their values."""

from __future__ import annotations

from typing import Any, Sequence

from livelayout.components.frame import center, render_frame
from livelayout.components.line_plot import format_tick
from livelayout.types import Column

BAR = "■"


class BarPlot:
    """One labelled horizontal bar per value, scaled to the largest value."""

    def __init__(
        self,
        labels: Sequence[str],
        values: Sequence[float],
        width: int = 40,
        height: int | None = None,
        title: str = "",
        xlabel: str = "",
        color: int | None = None,
    ) -> None:
        if len(labels) != len(values):
            raise ValueError(f"labels and values differ in length: {len(labels)} != {len(values)}")
        self._labels = [str(label) for label in labels]
        self._values = list(values)
        self._width = width
        self._height = len(self._values) if height is None else height
        self._title = title
        self._xlabel = xlabel
        self._color = color

    def canvas_width(self) -> Column:
        return Column(self._width)

    def decorations(self) -> dict[str, Any]:
        return {"title": self._title, "xlabel": self._xlabel, "labels": tuple(self._labels)}

    def _bars(self) -> list[str]:
        texts = [format_tick(value) for value in self._values]
        longest = max((len(text) for text in texts), default=0)
        room = max(self._width - longest - 1, 0)
        peak = max((value for value in self._values if value > 0), default=0)

        bars = []
        for value, text in zip(self._values, texts):
            length = round(value / peak * room) if peak and value > 0 else 0
            bar = BAR * length
            if self._color is not None and bar:
                bar = f"\x1b[{self._color}m{bar}\x1b[0m"
            bars.append(f"{bar} {text}" if bar else text)
        return bars

    def render(self) -> str:
        bars = self._bars()[: self._height]
        labels = self._labels[: self._height]
        margin = max((len(label) for label in labels), default=0)
        gutter = [label.rjust(margin) + " " for label in labels]
        missing = self._height - len(bars)
        bars += [""] * missing
        gutter += [" " * (margin + 1)] * missing
        return render_frame(
            bars,
            self._width,
            title=self._title,
            gutter=gutter,
            footer=[center(self._xlabel, self._width + 2)],
        )

    def __str__(self) -> str:
        return self.render()
