"""Tests for element signatures."""

from __future__ import annotations

from livelayout.components import BarPlot, LinePlot, TextPanel
from livelayout.signature import row_signature, signature

from .fakes import FakeElement, OtherFakeElement


def fake(title: str = "", kind: type[FakeElement] = FakeElement, **extra: object) -> FakeElement:
    return kind(10, 3, title, 0, extra=dict(extra))


class TestSignature:
    def test_equal_decorations_equal_signature(self) -> None:
        assert signature(fake("T")) == signature(fake("T"))

    def test_title_changes_signature(self) -> None:
        assert signature(fake("T")) != signature(fake("U"))

    def test_kind_changes_signature(self) -> None:
        assert signature(fake("T")) != signature(fake("T", kind=OtherFakeElement))

    def test_extra_decorations_change_signature(self) -> None:
        assert signature(fake(labels=("a",))) != signature(fake(labels=("b",)))

    def test_size_does_not_enter_signature(self) -> None:
        assert signature(FakeElement(10, 3, "T", 0)) == signature(FakeElement(40, 9, "T", 2))

    def test_is_64_bit_int(self) -> None:
        value = signature(fake("T"))
        assert isinstance(value, int)
        assert 0 <= value < 2**64


class TestConcreteSignatures:
    def test_line_plot_data_is_ignored(self) -> None:
        a = LinePlot([0, 1, 2], [0, 1, 4], title="sq")
        b = LinePlot([0, 1, 2], [9, 7, 3], title="sq")
        assert signature(a) == signature(b)

    def test_line_plot_limits_and_labels_count(self) -> None:
        base = LinePlot([0, 1], [0, 1], xlabel="t")
        assert signature(base) != signature(LinePlot([0, 1], [0, 1], xlabel="time"))
        assert signature(base) != signature(LinePlot([0, 1], [0, 1], xlabel="t", ylim=(0, 5)))

    def test_text_panel_content_is_ignored(self) -> None:
        assert signature(TextPanel("one", title="S")) == signature(TextPanel("two", title="S"))

    def test_bar_labels_count(self) -> None:
        assert signature(BarPlot(["a"], [1])) != signature(BarPlot(["ab"], [1]))
        assert signature(BarPlot(["a"], [1])) == signature(BarPlot(["a"], [7]))

    def test_different_kinds_with_same_title(self) -> None:
        assert signature(TextPanel("x", title="A")) != signature(BarPlot(["x"], [1], title="A"))


class TestRowSignature:
    def test_order_sensitive(self) -> None:
        a, b = fake("A"), fake("B")
        assert row_signature([a, b]) != row_signature([b, a])

    def test_one_per_element(self) -> None:
        assert len(row_signature([fake(), fake(), fake()])) == 3
