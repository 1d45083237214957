"""Merge rendered element blocks into a single frame."""

from __future__ import annotations

from typing import Sequence

from livelayout.utils import pad_to_width, truncate_display, visible_width


def merge_horizontal(blocks: Sequence[str], *, gap: int = 2) -> str:
    """Place multi-line *blocks* side by side.

    Each block is padded to its own widest line; blocks shorter than the
    tallest one get blank lines of matching width underneath.
    """
    if not blocks:
        return ""

    split = [block.split("\n") for block in blocks]
    widths = [max(visible_width(line) for line in lines) for lines in split]
    height = max(len(lines) for lines in split)
    separator = " " * gap

    merged: list[str] = []
    for index in range(height):
        parts = []
        for lines, width in zip(split, widths):
            line = lines[index] if index < len(lines) else ""
            parts.append(pad_to_width(line, width))
        merged.append(separator.join(parts))
    return "\n".join(merged)


def merge_vertical(rows: Sequence[str]) -> str:
    return "\n".join(rows)


def truncate_frame(frame: str, max_columns: int) -> str:
    """Cut every line of *frame* wider than *max_columns*."""
    return "\n".join(truncate_display(line, max_columns) for line in frame.split("\n"))
