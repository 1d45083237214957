"""Render entry points: one-shot and cached layouts."""

from __future__ import annotations

from livelayout.cache import RenderCache, instantiate_row
from livelayout.compositor import merge_horizontal, merge_vertical, truncate_frame
from livelayout.config import DEFAULT_CONFIG, LayoutConfig
from livelayout.negotiate import negotiate_heights, negotiate_row_width
from livelayout.overhead import measure_row_overheads
from livelayout.types import LayoutSpecification

TerminalSize = tuple[int, int]


def _row_heights(
    spec: LayoutSpecification,
    terminal_height: int,
    config: LayoutConfig,
) -> list[int | None]:
    if not spec.grid:
        return [None] * len(spec.rows)
    return list(negotiate_heights(spec.rows, terminal_height, config=config))


def render(
    spec: LayoutSpecification,
    terminal_size: TerminalSize,
    *,
    config: LayoutConfig = DEFAULT_CONFIG,
) -> str:
    """Negotiate and render *spec* from scratch.

    Every call probes every row with an auto-width element; use
    :func:`render_cached` inside animation loops.
    """
    columns, lines = terminal_size
    heights = _row_heights(spec, lines, config)

    rendered_rows = []
    for row, height in zip(spec.rows, heights):
        overheads = measure_row_overheads(row, config=config)
        width = negotiate_row_width(row, overheads, columns, config=config)
        elements = instantiate_row(row, width, height)
        rendered_rows.append(
            merge_horizontal([e.render() for e in elements], gap=config.element_gap)
        )
    return merge_vertical(rendered_rows)


def render_cached(
    cache: RenderCache,
    spec: LayoutSpecification,
    terminal_size: TerminalSize,
    *,
    config: LayoutConfig = DEFAULT_CONFIG,
) -> str:
    """Render *spec* reusing the allocations held by *cache*.

    Rows whose signatures match their cached slot skip negotiation entirely.
    A terminal that shrank since a row was cached does not trigger a new
    negotiation; over-wide lines are cut to the current width instead.
    """
    columns, lines = terminal_size
    heights = _row_heights(spec, lines, config)
    cache.row_count = len(spec.rows)

    rendered_rows = []
    for index, (row, height) in enumerate(zip(spec.rows, heights)):
        _, elements = cache.resolve_row(index, row, columns, height, config=config)
        rendered_rows.append(
            merge_horizontal([e.render() for e in elements], gap=config.element_gap)
        )
    return truncate_frame(merge_vertical(rendered_rows), columns)
