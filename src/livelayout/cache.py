"""Per-row allocation cache for animated layouts."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from livelayout.config import DEFAULT_CONFIG, LayoutConfig
from livelayout.negotiate import negotiate_row_width
from livelayout.overhead import measure_row_overheads
from livelayout.signature import row_signature
from livelayout.types import Element, Row

logger = logging.getLogger(__name__)


@dataclass
class RowAllocation:
    """Negotiated dimensions of one row and the signatures they were solved for."""

    width: int
    height: int | None
    signatures: tuple[int, ...]


def instantiate_row(row: Row, width: int, height: int | None) -> list[Element]:
    return [request.instantiate(width, height) for request in row]


@dataclass
class RenderCache:
    """Caller-owned state for one animation loop.

    Holds one :class:`RowAllocation` per row index plus the line count of the
    last frame shown, which the redraw code needs to move the cursor back up.
    A slot, once created, lives as long as the cache; it is refreshed in place
    when the row's signatures change and never touched by other rows.

    ``row_count`` is the number of rows in the layout last rendered through
    the cache.  Slots past it stay stored, and are reused if the layout
    grows back, but ``widths`` and ``heights`` leave them out.
    """

    num_lines: int = 0
    first_iteration: bool = True
    allocations: dict[int, RowAllocation] = field(default_factory=dict)
    row_count: int | None = None

    def _current_slots(self) -> list[RowAllocation]:
        indices = sorted(self.allocations)
        if self.row_count is not None:
            indices = [i for i in indices if i < self.row_count]
        return [self.allocations[i] for i in indices]

    @property
    def widths(self) -> list[int]:
        return [slot.width for slot in self._current_slots()]

    @property
    def heights(self) -> list[int | None]:
        return [slot.height for slot in self._current_slots()]

    def allocation(self, row_index: int) -> RowAllocation | None:
        return self.allocations.get(row_index)

    def resolve_row(
        self,
        row_index: int,
        row: Row,
        terminal_width: int,
        height: int | None = None,
        *,
        config: LayoutConfig = DEFAULT_CONFIG,
    ) -> tuple[RowAllocation, list[Element]]:
        """Allocation and instantiated elements for *row*.

        With a slot present the row is built at the stored size and its
        signatures compared; a match returns those elements untouched.  An
        empty slot or a mismatch negotiates the width again, adopts *height*
        (the freshly negotiated height for this row) and overwrites the slot.
        """
        slot = self.allocations.get(row_index)
        if slot is not None:
            elements = instantiate_row(row, slot.width, slot.height)
            signatures = row_signature(elements)
            if signatures == slot.signatures:
                return slot, elements
            logger.debug("Row %d signature changed; renegotiating", row_index)

        overheads = measure_row_overheads(row, config=config)
        width = negotiate_row_width(row, overheads, terminal_width, config=config)
        elements = instantiate_row(row, width, height)
        slot = RowAllocation(width=width, height=height, signatures=row_signature(elements))
        self.allocations[row_index] = slot
        logger.debug("Row %d cached: width=%d height=%s", row_index, width, height)
        return slot, elements
