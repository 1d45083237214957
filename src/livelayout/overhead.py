"""Overhead estimation by rendering disposable probe elements."""

from __future__ import annotations

import logging
from typing import Sequence

from livelayout.config import DEFAULT_CONFIG, LayoutConfig
from livelayout.types import AUTO, ConfigurationError, ElementRequest, canvas_columns
from livelayout.utils import strip_ansi, visible_width

logger = logging.getLogger(__name__)


def measure_overhead(request: ElementRequest, *, config: LayoutConfig = DEFAULT_CONFIG) -> int:
    """Columns *request*'s element draws beyond its canvas.

    The probe is built at ``config.probe_width`` with an empty title, since
    some elements print the title on its own line and a long title would
    otherwise leak into the measurement.  The second output line is the
    first content line below the top border.
    """
    probe = request.factory(width=config.probe_width, height=None, title="")
    lines = probe.render().split("\n")
    if len(lines) < 2:
        raise ConfigurationError(
            f"{type(probe).__name__} rendered {len(lines)} line(s); cannot measure overhead"
        )
    line_length = visible_width(strip_ansi(lines[1]))
    return max(line_length - canvas_columns(probe.canvas_width()), 0)


def measure_row_overheads(
    row: Sequence[ElementRequest],
    *,
    config: LayoutConfig = DEFAULT_CONFIG,
) -> list[int]:
    """Overheads for every element in *row*, in request order.

    A row without auto-width elements never uses its overheads, so nothing is
    probed and zeros are returned.
    """
    if not any(request.width is AUTO for request in row):
        return [0] * len(row)
    overheads = [measure_overhead(request, config=config) for request in row]
    logger.debug("Measured row overheads: %s", overheads)
    return overheads
