"""Tests for the per-row render cache."""

from __future__ import annotations

from livelayout.cache import RenderCache, RowAllocation
from livelayout.config import LayoutConfig
from livelayout.signature import row_signature
from livelayout.types import ElementRequest, Fixed

from .fakes import FakeFactory, OtherFakeElement

PROBE = (10, None, "")


def two_up(title: str = "T", **kwargs: object) -> tuple[tuple[ElementRequest, ...], FakeFactory, FakeFactory]:
    left = FakeFactory(overhead=6, **kwargs)
    right = FakeFactory(overhead=6)
    return (ElementRequest(left, title=title), ElementRequest(right)), left, right


class TestRenderCacheState:
    def test_starts_empty(self) -> None:
        cache = RenderCache()
        assert cache.num_lines == 0
        assert cache.first_iteration is True
        assert cache.allocations == {}
        assert cache.allocation(0) is None

    def test_widths_and_heights_in_row_order(self) -> None:
        cache = RenderCache()
        cache.allocations[1] = RowAllocation(width=20, height=None, signatures=())
        cache.allocations[0] = RowAllocation(width=34, height=7, signatures=())
        assert cache.widths == [34, 20]
        assert cache.heights == [7, None]


class TestResolveRow:
    def test_first_resolution_probes_and_stores(self) -> None:
        cache = RenderCache()
        row, left, _ = two_up()
        slot, elements = cache.resolve_row(0, row, 82)

        assert left.calls == [PROBE, (34, None, "T")]
        assert slot.width == 34
        assert slot.height is None
        assert slot.signatures == row_signature(elements)
        assert cache.allocation(0) is slot

    def test_hit_skips_probing(self) -> None:
        cache = RenderCache()
        row, left, right = two_up()
        cache.resolve_row(0, row, 82)
        left.calls.clear()
        right.calls.clear()

        slot, elements = cache.resolve_row(0, row, 82)
        assert left.calls == [(34, None, "T")]
        assert right.calls == [(34, None, "")]
        assert [e.width for e in elements] == [34, 34]

    def test_new_data_same_decorations_is_a_hit(self) -> None:
        cache = RenderCache()
        row, _, _ = two_up()
        cache.resolve_row(0, row, 82)

        fresh, left, _ = two_up()
        cache.resolve_row(0, fresh, 82)
        assert PROBE not in left.calls

    def test_terminal_resize_alone_does_not_renegotiate(self) -> None:
        cache = RenderCache()
        row, _, _ = two_up()
        cache.resolve_row(0, row, 82)
        slot, _ = cache.resolve_row(0, row, 40)
        assert slot.width == 34

    def test_title_change_renegotiates(self) -> None:
        cache = RenderCache()
        row, _, _ = two_up(title="T")
        first, _ = cache.resolve_row(0, row, 82)
        old_signatures = first.signatures

        changed, left, _ = two_up(title="Longer")
        slot, _ = cache.resolve_row(0, changed, 60)
        # rebuilt at the cached size for its signature, then probed
        assert left.calls[0] == (34, None, "Longer")
        assert left.calls[1] == PROBE
        # 60 - 12 - 2 = 46
        assert slot.width == 23
        assert slot.signatures != old_signatures

    def test_kind_change_renegotiates(self) -> None:
        cache = RenderCache()
        row, _, _ = two_up()
        cache.resolve_row(0, row, 82)

        changed, left, _ = two_up(kind=OtherFakeElement)
        cache.resolve_row(0, changed, 82)
        assert left.calls[1] == PROBE

    def test_refresh_is_row_scoped(self) -> None:
        cache = RenderCache()
        row0, _, _ = two_up(title="A")
        row1, _, _ = two_up(title="B")
        cache.resolve_row(0, row0, 82)
        cache.resolve_row(1, row1, 82)
        untouched = cache.allocation(0)

        # next frame: row 0 unchanged, row 1 retitled
        same, left0, right0 = two_up(title="A")
        changed, left1, _ = two_up(title="C")
        cache.resolve_row(0, same, 50)
        cache.resolve_row(1, changed, 50)
        assert PROBE not in left0.calls + right0.calls
        assert PROBE in left1.calls
        assert cache.allocation(0) is untouched
        assert cache.widths == [34, 18]

    def test_hit_keeps_cached_height(self) -> None:
        cache = RenderCache()
        row, left, _ = two_up()
        cache.resolve_row(0, row, 82, height=10)
        slot, elements = cache.resolve_row(0, row, 82, height=3)
        assert slot.height == 10
        assert [e.height for e in elements] == [10, 10]

    def test_refresh_adopts_new_height(self) -> None:
        cache = RenderCache()
        row, _, _ = two_up(title="A")
        cache.resolve_row(0, row, 82, height=10)
        changed, _, _ = two_up(title="B")
        slot, _ = cache.resolve_row(0, changed, 82, height=3)
        assert slot.height == 3

    def test_fixed_width_row_never_probed(self) -> None:
        cache = RenderCache()
        factory = FakeFactory(overhead=6)
        slot, _ = cache.resolve_row(0, (ElementRequest(factory, width=Fixed(12)),), 82)
        assert factory.calls == [(12, None, "")]
        assert slot.width == 0

    def test_config_is_applied(self) -> None:
        cache = RenderCache()
        row, left, _ = two_up()
        config = LayoutConfig(probe_width=4, element_gap=0)
        slot, _ = cache.resolve_row(0, row, 82, config=config)
        assert left.calls[0] == (4, None, "")
        assert slot.width == 35
