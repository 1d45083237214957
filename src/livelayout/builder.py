"""Declarative layout construction.

``layout([a, b])`` is a single horizontal row; ``layout([[a, b], [c]])`` is
a grid whose rows share the terminal height::

    spec = layout([
        [element(LinePlot, xs, ys, title="sin"), element(TextPanel, "ok", width=20)],
        [element(BarPlot, labels, counts, height=6)],
    ])
"""

from __future__ import annotations

import functools
from typing import Any, Callable, Sequence

from livelayout.types import (
    ConfigurationError,
    ElementRequest,
    LayoutSpecification,
    parse_size_policy,
)


def element(
    factory: Callable[..., Any],
    *args: Any,
    width: object = "auto",
    height: object = "auto",
    title: str = "",
    **decorations: Any,
) -> ElementRequest:
    """Request an element built as ``factory(*args, **decorations)``.

    ``width``, ``height`` and ``title`` are supplied by the engine at render
    time, so they are held on the request rather than bound into the call.
    """
    return ElementRequest(
        factory=functools.partial(factory, *args, **decorations),
        width=parse_size_policy(width),
        height=parse_size_policy(height),
        title=title,
    )


def _check_row(row: Sequence[object], row_index: int) -> tuple[ElementRequest, ...]:
    if not row:
        raise ConfigurationError(f"row {row_index} is empty")
    for col_index, item in enumerate(row):
        if not isinstance(item, ElementRequest):
            raise ConfigurationError(
                f"row {row_index}, item {col_index}: expected ElementRequest, got {type(item).__name__}"
            )
    return tuple(row)  # type: ignore[arg-type]


def layout(items: Sequence[Any]) -> LayoutSpecification:
    """Build a :class:`LayoutSpecification` from a flat or nested list."""
    if not items:
        raise ConfigurationError("layout has no elements")

    nested = [isinstance(item, (list, tuple)) for item in items]
    if all(nested):
        return LayoutSpecification.from_rows(
            [_check_row(row, index) for index, row in enumerate(items)]
        )
    if any(nested):
        raise ConfigurationError("layout mixes rows and bare elements")
    return LayoutSpecification.horizontal(_check_row(items, 0))
