import math
from datetime import date, timedelta

import pytest

from ohlc_viewer.chart.config import ChartConfig
from ohlc_viewer.chart.layout import NoDataError, layout
from ohlc_viewer.chart.types import Bar, Color, PriceRange, Size


def test_single_bullish_bar() -> None:
    bar = Bar(date=date(2024, 3, 1), open=100.1, high=100.3, low=99.0, close=100.5)
    scene = layout([bar], Size(200, 200))

    assert len(scene.candles) == 1
    candle = scene.candles[0]
    assert candle.color == Color(0x38, 0xc1, 0x72)
    assert scene.price_range == PriceRange(lowest=99.0, highest=100.3)
    assert scene.scale == pytest.approx(180 / 1.3)
    assert candle.wick.start.y == 0.0
    assert candle.wick.end.y == pytest.approx((100.3 - 99.0) * scene.scale)
    assert candle.wick.start.x == 10.0


def test_only_most_recent_bars_that_fit() -> None:
    highs = [100.3, 101.5, 102.7, 101.9, 104.1]
    chronological = [
        Bar(date=date(2024, 3, 1) + timedelta(days=i), open=h - 1.0, high=h, low=h - 2.0, close=h - 0.5)
        for i, h in enumerate(highs)
    ]
    newest_first = list(reversed(chronological))

    scene = layout(newest_first, Size(105, 200))

    assert [c.bar for c in scene.candles] == chronological[2:]
    assert [c.wick.start.x for c in scene.candles] == [10.0, 25.0, 40.0]
    assert scene.price_range.highest == 104.1
    assert scene.price_range.lowest == pytest.approx(99.9)
    assert [label.text for label in scene.date_labels] == ["3", "4", "5"]


def test_unit_range_scene_ticks() -> None:
    bars = [Bar(date=date(2024, 3, 1), open=100.2, high=101.0, low=100.0, close=100.8)]
    scene = layout(bars, Size(200, 200))
    assert scene.tick_increment == 0.5
    assert [tick.label.text for tick in scene.ticks] == ["101.0", "100.5"]


def test_empty_input_is_an_explicit_error() -> None:
    with pytest.raises(NoDataError):
        layout([], Size(200, 200))


@pytest.mark.parametrize("size", [Size(0, 200), Size(200, 0), Size(-10, 300), Size(300, -1)])
def test_degenerate_canvas_gives_empty_scene(daily_bars, size) -> None:
    scene = layout(daily_bars(5), size)
    assert scene.is_empty
    assert scene.size == size


def test_canvas_too_narrow_for_any_bar_draws_axes_only(daily_bars) -> None:
    scene = layout(daily_bars(5), Size(60, 200))
    assert len(scene.axes) == 2
    assert scene.candles == ()
    assert scene.ticks == ()
    assert scene.price_range is None


@pytest.mark.parametrize("size", [Size(1, 1), Size(50, 200), Size(200, 15)])
def test_canvas_smaller_than_the_gutters_is_empty(daily_bars, size) -> None:
    scene = layout(daily_bars(5), size)
    assert scene.is_empty
    assert scene.size == size
    assert scene.axes == ()


def test_flat_prices_do_not_divide_by_zero() -> None:
    bars = [Bar(date=date(2024, 3, d), open=50.0, high=50.0, low=50.0, close=50.0) for d in (3, 2, 1)]
    scene = layout(bars, Size(300, 200))
    assert scene.price_range.range() == pytest.approx(0.01)
    assert all(math.isfinite(v) for v in scene.coordinates())
    # flat candles sit in the middle of the plot
    assert scene.candles[0].wick.start.y == pytest.approx(90.0)


def test_date_labels_follow_config(daily_bars) -> None:
    scene = layout(daily_bars(3), Size(300, 200), ChartConfig(show_date_labels=False))
    assert scene.date_labels == ()
    assert len(scene.candles) == 3


def test_scene_carries_palette(daily_bars) -> None:
    scene = layout(daily_bars(3), Size(300, 200))
    assert scene.foreground.hex == "#eff8ff"
    assert scene.background.hex == "#212934"


def test_input_is_not_mutated(daily_bars) -> None:
    bars = daily_bars(10)
    snapshot = list(bars)
    layout(bars, Size(120, 200))
    assert bars == snapshot


def test_range_contains_every_visible_bar(daily_bars) -> None:
    for width in (80, 200, 500):
        scene = layout(daily_bars(40), Size(width, 300))
        for candle in scene.candles:
            assert candle.bar.high <= scene.price_range.highest
            assert candle.bar.low >= scene.price_range.lowest


def test_coordinates_are_finite() -> None:
    day = date(2024, 3, 1)
    inputs = [
        [Bar(day, 100.0 + i, 101.0 + i, 99.0 + i, 100.5 + i) for i in range(30)],
        [Bar(day, 7.0, 7.0, 7.0, 7.0)],
        [Bar(day, 100.0, 99.0, 101.0, 100.5)],  # low above high
        [Bar(day, 0.011, 0.012, 0.010, 0.0105), Bar(day, 0.02, 0.03, 0.01, 0.025)],
        [Bar(day, 25000.0, 26500.0, 24100.0, 26000.0)],
    ]
    sizes = [Size(1, 1), Size(65, 15), Size(70, 21), Size(200, 200), Size(1024, 768)]
    for bars in inputs:
        for size in sizes:
            scene = layout(bars, size)
            assert all(math.isfinite(v) for v in scene.coordinates())
