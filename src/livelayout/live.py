"""In-place redraw of animated layouts."""

from __future__ import annotations

import os
import sys
from typing import Callable

from livelayout.cache import RenderCache
from livelayout.config import DEFAULT_CONFIG, LayoutConfig
from livelayout.engine import TerminalSize, render_cached
from livelayout.types import LayoutSpecification

_CURSOR_UP_FMT = "\x1b[{}A"
_CLEAR_FROM_CURSOR = "\x1b[0J"


def terminal_size(fallback: TerminalSize = (80, 24)) -> TerminalSize:
    """``(columns, rows)`` of the terminal on stdout."""
    try:
        size = os.get_terminal_size(sys.stdout.fileno())
    except (ValueError, OSError):
        return fallback
    return (size.columns, size.lines)


class LiveDisplay:
    """Redraws successive frames over the previous one.

    Owns the :class:`RenderCache` for its animation loop, so one display
    must not be shared between loops.
    """

    def __init__(
        self,
        cache: RenderCache | None = None,
        write: Callable[[str], object] | None = None,
        flush: Callable[[], object] | None = None,
        config: LayoutConfig = DEFAULT_CONFIG,
    ) -> None:
        self.cache = cache if cache is not None else RenderCache()
        self._write = write if write is not None else sys.stdout.write
        if flush is None and write is None:
            flush = sys.stdout.flush
        self._flush = flush
        self._config = config

    def show(self, frame: str) -> None:
        """Replace the previously shown frame with *frame*."""
        cache = self.cache
        if not cache.first_iteration and cache.num_lines > 0:
            self._write(_CURSOR_UP_FMT.format(cache.num_lines))
            self._write(_CLEAR_FROM_CURSOR)

        cache.num_lines = frame.count("\n") + 1
        self._write(frame + "\n")
        if self._flush is not None:
            self._flush()
        cache.first_iteration = False

    def update(self, spec: LayoutSpecification, size: TerminalSize | None = None) -> str:
        """Render *spec* through the cache and show it; returns the frame."""
        frame = render_cached(self.cache, spec, size or terminal_size(), config=self._config)
        self.show(frame)
        return frame
