"""TextPanel element - bordered block of wrapped or truncated text."""

from __future__ import annotations

from typing import Any

from livelayout.components.frame import render_frame
from livelayout.types import Column
from livelayout.utils import truncate_to_width, visible_width, wrap_text_with_ansi

MIN_WIDTH = 5


def process_text(content: str, width: int, height: int | None = None, wrap: bool = True) -> list[str]:
    """Split *content* into lines no wider than *width*.

    Long lines are word-wrapped, or cut with ``...`` when *wrap* is off.  A
    *height* limits the number of lines kept.
    """
    lines: list[str] = []
    for line in content.replace("\t", "   ").split("\n"):
        line = line.rstrip()
        if wrap:
            lines.extend(wrapped.rstrip() for wrapped in wrap_text_with_ansi(line, width))
        else:
            lines.append(truncate_to_width(line, width))
    if height is not None:
        lines = lines[:height]
    return lines


class TextPanel:
    """Text content with a border, sized like any other element."""

    def __init__(
        self,
        content: str,
        width: int | None = None,
        height: int | None = None,
        title: str = "",
        wrap: bool = True,
    ) -> None:
        self._content = content
        self._title = title
        self._wrap = wrap

        if width is None:
            longest = max(visible_width(line.rstrip()) for line in content.split("\n"))
            width = max(longest, MIN_WIDTH)
        self._width = width

        self._lines = process_text(content, width, height, wrap)
        self._height = len(self._lines) if height is None else height

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def canvas_width(self) -> Column:
        return Column(self._width)

    def decorations(self) -> dict[str, Any]:
        return {"title": self._title, "wrap": self._wrap}

    def render(self) -> str:
        body = self._lines + [""] * (self._height - len(self._lines))
        return render_frame(body, self._width, title=self._title, title_inside=True)

    def __str__(self) -> str:
        return self.render()
