import pytest

from ohlc_viewer.chart.layout import NoDataError, compute_price_range
from ohlc_viewer.chart.types import PriceRange


def test_extremes_over_all_bars(make_bar) -> None:
    bars = [
        make_bar(high=101.0, low=99.5),
        make_bar(high=103.2, low=100.0),
        make_bar(high=102.0, low=98.7),
    ]
    price_range = compute_price_range(bars)
    assert price_range == PriceRange(lowest=98.7, highest=103.2)
    assert price_range.range() == pytest.approx(4.5)


def test_range_is_measured_over_the_given_subset(make_bar) -> None:
    bars = [
        make_bar(high=101.0, low=100.0),
        make_bar(high=102.0, low=100.5),
        make_bar(high=150.0, low=50.0),
    ]
    assert compute_price_range(bars[:2]) == PriceRange(lowest=100.0, highest=102.0)


def test_visible_bars_lie_inside_range(daily_bars) -> None:
    bars = daily_bars(30)
    price_range = compute_price_range(bars)
    for bar in bars:
        assert bar.high <= price_range.highest
        assert bar.low >= price_range.lowest


def test_empty_input_raises_no_data() -> None:
    with pytest.raises(NoDataError):
        compute_price_range([])


def test_no_data_is_a_value_error() -> None:
    assert issubclass(NoDataError, ValueError)


def test_flat_range_is_widened_around_price() -> None:
    widened = PriceRange(100.0, 100.0).widened(0.01)
    assert widened.lowest == pytest.approx(99.995)
    assert widened.highest == pytest.approx(100.005)
    assert widened.range() > 0


def test_wide_range_is_left_unchanged() -> None:
    price_range = PriceRange(90.0, 110.0)
    assert price_range.widened(0.01) is price_range

