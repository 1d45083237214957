"""Core type definitions: size policies, canvas metrics, layout requests."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Mapping, Protocol, Union


class ConfigurationError(ValueError):
    """A layout or element is malformed and cannot be negotiated."""


# ---------------------------------------------------------------------------
# Size policies
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Fixed:
    value: int


class Auto:
    """Dimension solved by negotiation.  Use the ``AUTO`` singleton."""

    _instance: Auto | None = None

    def __new__(cls) -> Auto:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "AUTO"


AUTO = Auto()

SizePolicy = Union[Fixed, Auto]


def parse_size_policy(value: object) -> SizePolicy:
    """Resolve a user-facing size into a policy.

    * ``None`` / ``"auto"`` -> ``AUTO``
    * non-negative ``int``  -> ``Fixed(value)``
    * an existing policy    -> returned as-is
    """
    if value is None or value == "auto":
        return AUTO
    if isinstance(value, (Fixed, Auto)):
        return value
    if isinstance(value, int) and not isinstance(value, bool) and value >= 0:
        return Fixed(value)
    raise ConfigurationError(f"invalid size {value!r}: expected 'auto' or a non-negative int")


# ---------------------------------------------------------------------------
# Canvas width metric
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class HalfColumn:
    """Sub-character metric, e.g. braille dots (two per column)."""

    value: int

    @property
    def columns(self) -> int:
        return self.value // 2


@dataclass(frozen=True)
class Column:
    value: int

    @property
    def columns(self) -> int:
        return self.value


CanvasWidth = Union[HalfColumn, Column]


def canvas_columns(metric: object) -> int:
    """Whole columns of a canvas metric; anything else is a configuration error."""
    if isinstance(metric, (HalfColumn, Column)):
        return metric.columns
    raise ConfigurationError(f"unknown canvas width metric: {type(metric).__name__}")


# ---------------------------------------------------------------------------
# Element contract
# ---------------------------------------------------------------------------


class Element(Protocol):
    """A renderable terminal graphic at a fixed size."""

    def render(self) -> str:
        """Render into a multi-line string."""
        ...

    def canvas_width(self) -> CanvasWidth:
        ...

    def decorations(self) -> Mapping[str, Any]:
        """Ordered title/label/limit metadata the element displays."""
        ...


# Called as ``factory(width=..., height=..., title=...)``; ``height`` may be
# ``None`` to let the element choose its natural height.
ElementFactory = Callable[..., Element]


# ---------------------------------------------------------------------------
# Layout requests
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ElementRequest:
    factory: ElementFactory
    width: SizePolicy = AUTO
    height: SizePolicy = AUTO
    title: str = ""

    def instantiate(
        self,
        width: int,
        height: int | None,
        title: str | None = None,
    ) -> Element:
        """Build the element; fixed policies override the negotiated values."""
        if isinstance(self.width, Fixed):
            width = self.width.value
        if isinstance(self.height, Fixed):
            height = self.height.value
        return self.factory(
            width=width,
            height=height,
            title=self.title if title is None else title,
        )


Row = tuple[ElementRequest, ...]


@dataclass(frozen=True)
class LayoutSpecification:
    """Ordered rows of element requests.

    ``grid`` is ``True`` for nested row-of-rows layouts; only grids take part
    in height negotiation.
    """

    rows: tuple[Row, ...]
    grid: bool = False

    def __post_init__(self) -> None:
        if not self.rows:
            raise ConfigurationError("layout has no rows")
        for index, row in enumerate(self.rows):
            if not row:
                raise ConfigurationError(f"row {index} is empty")

    @classmethod
    def horizontal(cls, requests: list[ElementRequest] | tuple[ElementRequest, ...]) -> LayoutSpecification:
        return cls(rows=(tuple(requests),), grid=False)

    @classmethod
    def from_rows(cls, rows: list[list[ElementRequest]] | tuple[Row, ...]) -> LayoutSpecification:
        return cls(rows=tuple(tuple(row) for row in rows), grid=True)
