"""livelayout: terminal layout negotiation with a per-row render cache."""

# Declarative construction
from livelayout.builder import element, layout

# Render cache
from livelayout.cache import RenderCache, RowAllocation

# Compositing
from livelayout.compositor import merge_horizontal, merge_vertical, truncate_frame

# Concrete elements
from livelayout.components import BarPlot, LinePlot, TextPanel

# Configuration
from livelayout.config import DEFAULT_CONFIG, LayoutConfig

# Render entry points
from livelayout.engine import render, render_cached

# Live redraw
from livelayout.live import LiveDisplay, terminal_size

# Negotiation
from livelayout.negotiate import negotiate_heights, negotiate_row_width
from livelayout.overhead import measure_overhead, measure_row_overheads
from livelayout.signature import row_signature, signature

# Types
from livelayout.types import (
    AUTO,
    Auto,
    CanvasWidth,
    Column,
    ConfigurationError,
    Element,
    ElementRequest,
    Fixed,
    HalfColumn,
    LayoutSpecification,
    SizePolicy,
    parse_size_policy,
)

# Utilities
from livelayout.utils import strip_ansi, truncate_display, visible_width

__all__ = [
    "AUTO",
    "Auto",
    "BarPlot",
    "CanvasWidth",
    "Column",
    "ConfigurationError",
    "DEFAULT_CONFIG",
    "Element",
    "ElementRequest",
    "Fixed",
    "HalfColumn",
    "LayoutConfig",
    "LayoutSpecification",
    "LinePlot",
    "LiveDisplay",
    "RenderCache",
    "RowAllocation",
    "SizePolicy",
    "TextPanel",
    "element",
    "layout",
    "measure_overhead",
    "measure_row_overheads",
    "merge_horizontal",
    "merge_vertical",
    "negotiate_heights",
    "negotiate_row_width",
    "parse_size_policy",
    "render",
    "render_cached",
    "row_signature",
    "signature",
    "strip_ansi",
    "terminal_size",
    "truncate_display",
    "truncate_frame",
    "visible_width",
]
