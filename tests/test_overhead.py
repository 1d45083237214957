"""Tests for overhead estimation."""

from __future__ import annotations

import pytest

from livelayout.builder import element
from livelayout.components import BarPlot, LinePlot, TextPanel
from livelayout.config import LayoutConfig
from livelayout.overhead import measure_overhead, measure_row_overheads
from livelayout.types import ConfigurationError, ElementRequest, Fixed

from .fakes import FakeElement, FakeFactory


class TestMeasureOverhead:
    def test_column_metric(self) -> None:
        assert measure_overhead(ElementRequest(FakeFactory(overhead=6))) == 6

    def test_half_column_metric_is_normalized(self) -> None:
        assert measure_overhead(ElementRequest(FakeFactory(overhead=4, half=True))) == 4

    def test_probe_uses_nominal_width_and_no_title(self) -> None:
        factory = FakeFactory(overhead=1)
        measure_overhead(ElementRequest(factory, title="A long title"))
        assert factory.calls == [(10, None, "")]

    def test_probe_width_from_config(self) -> None:
        factory = FakeFactory()
        measure_overhead(ElementRequest(factory), config=LayoutConfig(probe_width=7))
        assert factory.calls[0][0] == 7

    def test_unknown_metric_is_configuration_error(self) -> None:
        class Odd(FakeElement):
            def canvas_width(self) -> object:
                return 10

        def factory(*, width: int, height: int | None, title: str) -> Odd:
            return Odd(width, height, title, overhead=0)

        with pytest.raises(ConfigurationError):
            measure_overhead(ElementRequest(factory))

    def test_single_line_render_is_configuration_error(self) -> None:
        class Flat(FakeElement):
            def render(self) -> str:
                return "x" * self.width

        def factory(*, width: int, height: int | None, title: str) -> Flat:
            return Flat(width, height, title, overhead=0)

        with pytest.raises(ConfigurationError):
            measure_overhead(ElementRequest(factory))

    def test_ansi_does_not_count(self) -> None:
        class Colored(FakeElement):
            def render(self) -> str:
                return "\n".join(
                    f"\x1b[31m{line}\x1b[0m" for line in super().render().split("\n")
                )

        def factory(*, width: int, height: int | None, title: str) -> Colored:
            return Colored(width, height, title, overhead=3)

        assert measure_overhead(ElementRequest(factory)) == 3


class TestConcreteElementOverheads:
    def test_text_panel_border_only(self) -> None:
        assert measure_overhead(element(TextPanel, "hello", title="Status")) == 2

    def test_line_plot_includes_tick_gutter(self) -> None:
        request = element(LinePlot, [0, 1], [0, 1], ylim=(-10, 10), title="T")
        # "-10" tick + one space of gutter, plus both borders
        assert measure_overhead(request) == 4 + 2

    def test_line_plot_ylabel_widens_gutter(self) -> None:
        plain = element(LinePlot, [0, 1], [0, 1], ylim=(0, 1))
        labelled = element(LinePlot, [0, 1], [0, 1], ylim=(0, 1), ylabel="amp")
        assert measure_overhead(labelled) == measure_overhead(plain) + 4

    def test_bar_plot_label_gutter(self) -> None:
        request = element(BarPlot, ["alpha", "b"], [1, 2])
        assert measure_overhead(request) == 6 + 2


class TestMeasureRowOverheads:
    def test_in_request_order(self) -> None:
        row = (ElementRequest(FakeFactory(overhead=1)), ElementRequest(FakeFactory(overhead=5)))
        assert measure_row_overheads(row) == [1, 5]

    def test_all_fixed_row_is_not_probed(self) -> None:
        factory = FakeFactory(overhead=3)
        row = (ElementRequest(factory, width=Fixed(20)),)
        assert measure_row_overheads(row) == [0]
        assert factory.calls == []
