import pytest

from ohlc_viewer.chart.config import ChartConfig
from ohlc_viewer.chart.layout import (choose_tick_increment, compute_ticks, format_price,
                                      vertical_scale)
from ohlc_viewer.chart.types import PriceRange, Size


def test_unit_range_on_200px_picks_half() -> None:
    # 4 ticks wanted: 0.1 -> 10, 0.5 -> 2, 1.0 -> 1
    assert choose_tick_increment(1.0, 200) == 0.5


@pytest.mark.parametrize("span, height, expected", [
    (1.0, 500, 0.1),
    (50.0, 250, 10.0),
    (3000.0, 600, 100.0),
    (6.0, 300, 1.0),
])
def test_increment_closest_to_target_tick_count(span, height, expected) -> None:
    assert choose_tick_increment(span, height) == expected


def test_tie_keeps_smaller_increment() -> None:
    config = ChartConfig(tick_increments=(1.0, 2.0))
    # 3 ticks wanted: 1.0 -> 4 ticks, 2.0 -> 2 ticks
    assert choose_tick_increment(4.0, 150, config) == 1.0


def test_scale_uses_height_above_date_gutter() -> None:
    assert vertical_scale(PriceRange(100.0, 101.0), 200) == pytest.approx(180.0)


def test_scale_never_negative_on_tiny_canvas() -> None:
    assert vertical_scale(PriceRange(100.0, 101.0), 10) == 0.0


def test_scale_rejects_flat_range() -> None:
    with pytest.raises(ValueError):
        vertical_scale(PriceRange(100.0, 100.0), 200)


def test_ticks_for_unit_range() -> None:
    price_range = PriceRange(100.0, 101.0)
    ticks = compute_ticks(price_range, 0.5, 180.0, Size(200, 200))

    assert [tick.price for tick in ticks] == [101.0, 100.5]
    assert [tick.label.text for tick in ticks] == ["101.0", "100.5"]
    assert [tick.line.start.y for tick in ticks] == [0.0, 90.0]

    first = ticks[0]
    assert (first.line.start.x, first.line.end.x) == (160.0, 165.0)
    assert first.line.start.y == first.line.end.y
    assert first.label.position.x == 170.0
    assert first.label.position.y == first.line.start.y
    assert first.label.anchor == 'left'


def test_ticks_start_on_round_prices() -> None:
    price_range = PriceRange(98.9, 100.3)
    size = Size(300, 200)
    increment = choose_tick_increment(price_range.range(), size.height)
    scale = vertical_scale(price_range, size.height)
    ticks = compute_ticks(price_range, increment, scale, size)

    assert increment == 0.5
    assert [tick.price for tick in ticks] == pytest.approx([100.0, 99.5, 99.0])
    assert [tick.label.text for tick in ticks] == ["100.0", "99.5", "99.0"]
    assert ticks[0].line.start.y == pytest.approx(0.3 * scale)


def test_increment_that_is_not_exact_in_binary_still_aligns() -> None:
    price_range = PriceRange(100.55, 101.0)
    ticks = compute_ticks(price_range, 0.1, 400.0, Size(300, 200))
    assert [tick.label.text for tick in ticks] == ["101.0", "100.9", "100.8", "100.7", "100.6"]


def test_tick_prices_decrease_within_range() -> None:
    cases = [
        PriceRange(10.0, 10.7),
        PriceRange(99.0, 100.3),
        PriceRange(1234.5, 1302.25),
        PriceRange(-3.3, 2.2),
        PriceRange(0.01, 0.02),
    ]
    for price_range in cases:
        for height in (60, 200, 480, 1000):
            size = Size(400, height)
            increment = choose_tick_increment(price_range.range(), height)
            scale = vertical_scale(price_range, height)
            prices = [tick.price for tick in compute_ticks(price_range, increment, scale, size)]
            assert all(a > b for a, b in zip(prices, prices[1:]))
            assert all(price_range.lowest < p <= price_range.highest for p in prices)


def test_price_labels_follow_increment_precision() -> None:
    assert format_price(101.0, 1.0) == "101"
    assert format_price(1234.0, 100.0) == "1234"
    assert format_price(100.5, 0.5) == "100.5"
    assert format_price(99.99999999999997, 0.1) == "100.0"
