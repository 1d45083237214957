"""Bordered frame shared by every element."""

from __future__ import annotations

from typing import Sequence

from livelayout.utils import pad_to_width, truncate_to_width, visible_width

TOP_LEFT, TOP_RIGHT = "┌", "┐"
BOTTOM_LEFT, BOTTOM_RIGHT = "└", "┘"
HORIZONTAL, VERTICAL = "─", "│"


def center(text: str, width: int) -> str:
    """Center *text* in *width* columns, truncating when it does not fit."""
    text = truncate_to_width(text, width)
    free = width - visible_width(text)
    left = free // 2
    return " " * left + text + " " * (free - left)


def top_border(width: int, title: str = "") -> str:
    """Top border, optionally carrying *title* as ``┌─ Title ───┐``."""
    if not title:
        return TOP_LEFT + HORIZONTAL * width + TOP_RIGHT
    label = f" {title} "
    if visible_width(label) + 2 > width:
        label = truncate_to_width(title, max(width - 4, 0), ellipsis="") + " "
    remaining = max(width - visible_width(label) - 1, 0)
    return TOP_LEFT + HORIZONTAL + label + HORIZONTAL * remaining + TOP_RIGHT


def render_frame(
    body: Sequence[str],
    width: int,
    *,
    title: str = "",
    title_inside: bool = False,
    gutter: Sequence[str] | None = None,
    footer: Sequence[str] = (),
) -> str:
    """Draw *body* inside a border *width* columns wide.

    *gutter* holds one left-margin string per body line (tick or bar labels);
    its widest entry sets the margin for the whole frame.  Footer lines are
    laid out under the bottom border, aligned with it.  A title either sits
    centered on its own line above the frame or inside the top border.
    """
    if gutter is None:
        gutter = [""] * len(body)
    margin = max((visible_width(g) for g in gutter), default=0)
    indent = " " * margin
    outer = width + 2

    lines: list[str] = []
    if title and not title_inside:
        lines.append(indent + center(title, outer))
    lines.append(indent + top_border(width, title if title_inside else ""))
    for label, row in zip(gutter, body):
        content = pad_to_width(truncate_to_width(row, width, ellipsis=""), width)
        lines.append(pad_to_width(label, margin) + VERTICAL + content + VERTICAL)
    lines.append(indent + BOTTOM_LEFT + HORIZONTAL * width + BOTTOM_RIGHT)
    for extra in footer:
        lines.append(indent + pad_to_width(truncate_to_width(extra, outer, ellipsis=""), outer))
    return "\n".join(lines)
