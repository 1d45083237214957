"""Width and height budget allocation across a layout."""

from __future__ import annotations

import logging
from typing import Sequence

from livelayout.config import DEFAULT_CONFIG, LayoutConfig
from livelayout.types import Fixed, Row

logger = logging.getLogger(__name__)


def negotiate_row_width(
    row: Row,
    overheads: Sequence[int],
    terminal_width: int,
    *,
    config: LayoutConfig = DEFAULT_CONFIG,
) -> int:
    """Shared canvas width for the auto-width elements of *row*.

    Fixed elements take their width plus overhead, every element's overhead
    and the gaps between elements come off the top, and what is left is split
    evenly.  The share never drops below ``config.min_auto_width``: a terminal
    too narrow for the row overflows instead of failing.  Returns 0 when the
    row has no auto-width element.
    """
    padding_between = config.element_gap * (len(row) - 1)
    total_fixed = 0
    total_auto_overhead = 0
    auto_count = 0
    for request, overhead in zip(row, overheads):
        if isinstance(request.width, Fixed):
            total_fixed += request.width.value + overhead
        else:
            total_auto_overhead += overhead
            auto_count += 1

    if auto_count == 0:
        return 0

    available = terminal_width - total_fixed - total_auto_overhead - padding_between
    width = max(available // auto_count, config.min_auto_width)
    logger.debug(
        "Row width: available=%d auto=%d -> %d", available, auto_count, width
    )
    return width


def row_height_overhead(row: Row, *, config: LayoutConfig = DEFAULT_CONFIG) -> int:
    """Lines a row spends on borders and labels; any title adds one."""
    overhead = config.base_height_overhead
    if any(request.title for request in row):
        overhead += config.title_height_overhead
    return overhead


def negotiate_heights(
    rows: Sequence[Row],
    terminal_height: int,
    *,
    config: LayoutConfig = DEFAULT_CONFIG,
) -> list[int]:
    """Canvas height for every row of a grid.

    Rows with any fixed height are resolved first and take the tallest fixed
    height in the row.  Rows that are entirely auto then split what remains
    after the fixed rows (with their overhead) and the spacing between rows.
    """
    heights: list[int | None] = []
    overheads: list[int] = []
    total_fixed_height = 0

    for row in rows:
        overhead = row_height_overhead(row, config=config)
        overheads.append(overhead)
        fixed = [r.height.value for r in row if isinstance(r.height, Fixed)]
        if fixed:
            heights.append(max(fixed))
            total_fixed_height += max(fixed) + overhead
        else:
            heights.append(None)

    deferred = [index for index, height in enumerate(heights) if height is None]
    if deferred:
        available = terminal_height - total_fixed_height - config.row_spacing * (len(rows) - 1)
        share = available // len(deferred)
        for index in deferred:
            heights[index] = max(share - overheads[index], config.min_auto_height)

    logger.debug("Grid heights for terminal height %d: %s", terminal_height, heights)
    return [h for h in heights if h is not None]
