"""Engine constants for layout negotiation and compositing."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class LayoutConfig:
    """Negotiation configuration.

    The defaults reproduce the layout the engine was tuned for: a 10-column
    probe, a 5-cell floor on every negotiated dimension and a 2-column gap
    between elements.
    """

    probe_width: int = 10
    min_auto_width: int = 5
    min_auto_height: int = 5
    element_gap: int = 2
    # Reserved per gap between grid rows when sharing height; rows are
    # still stacked without blank lines
    row_spacing: int = 1
    # Top border + bottom border + two axis-label lines
    base_height_overhead: int = 4
    title_height_overhead: int = 1


DEFAULT_CONFIG = LayoutConfig()
