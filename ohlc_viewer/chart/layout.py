"""
Chart Layout Engine

Turns a newest-first sequence of price bars and a canvas size into a Scene:
which bars fit, how prices map to pixels, where the price ticks go and the
wick/body/axis primitives to draw. Every function here is pure; the caller
owns redraw scheduling and the actual painting.

Pixel coordinates have their origin at the top-left corner of the canvas, so
``y(price) = (highest - price) * scale``.
"""

import math
from decimal import Decimal
from typing import List, Optional, Sequence, Tuple

from ohlc_viewer.chart.config import ChartConfig, DEFAULT_CONFIG
from ohlc_viewer.chart.types import (AxisLabel, AxisTick, Bar, Candle, Line, Point,
                                     PriceRange, Rect, Scene, Size)


class NoDataError(ValueError):
    """Raised when there are no bars to lay out."""


def select_visible_bars(bars: Sequence[Bar], width: float,
                        config: ChartConfig = DEFAULT_CONFIG) -> List[Bar]:
    """Return the most recent bars that fit into ``width``, newest first."""
    available = width - config.y_axis_padding - 2 * config.bar_spacing
    visible: List[Bar] = []
    for bar in bars:
        if (len(visible) + 1) * config.bar_pitch > available:
            break
        visible.append(bar)
    return visible


def oldest_first(bars: Sequence[Bar]) -> List[Bar]:
    return list(reversed(bars))


def compute_price_range(bars: Sequence[Bar]) -> PriceRange:
    """Lowest low and highest high of ``bars``."""
    if not bars:
        raise NoDataError("Cannot compute a price range without bars")
    lowest = bars[0].low
    highest = bars[0].high
    for bar in bars:
        if bar.high > highest:
            highest = bar.high
        if bar.low < lowest:
            lowest = bar.low
    return PriceRange(lowest, highest)


def choose_tick_increment(price_span: float, height: float,
                          config: ChartConfig = DEFAULT_CONFIG) -> float:
    """Pick the candidate increment giving closest to one tick per ``y_tick_spacing`` pixels.

    Candidates are scanned smallest first and only a strictly better match
    replaces the current one, so ties go to the smaller increment.
    """
    approx_num_of_ticks = height / config.y_tick_spacing
    increments = config.tick_increments

    closest_increment = increments[0]
    closest_num_ticks = price_span / closest_increment
    for increment in increments:
        num_ticks = price_span / increment
        if abs(num_ticks - approx_num_of_ticks) < abs(closest_num_ticks - approx_num_of_ticks):
            closest_increment = increment
            closest_num_ticks = num_ticks
    return closest_increment


def vertical_scale(price_range: PriceRange, height: float,
                   config: ChartConfig = DEFAULT_CONFIG) -> float:
    """Pixels per price unit.

    The plot height never goes below zero, so a canvas shorter than the
    date-label gutter collapses to a zero scale.
    """
    span = price_range.range()
    if span <= 0:
        raise ValueError(f"Price range must be positive to scale, got {span}")
    plot_height = max(height - config.x_axis_padding, 0.0)
    return plot_height / span


def _label_decimals(increment: float) -> int:
    exponent = Decimal(repr(increment)).normalize().as_tuple().exponent
    return max(0, -exponent)


def format_price(price: float, increment: float) -> str:
    """Format a tick price with as many decimals as its increment needs."""
    return f"{price:.{_label_decimals(increment)}f}"


def compute_ticks(price_range: PriceRange, increment: float, scale: float, size: Size,
                  config: ChartConfig = DEFAULT_CONFIG) -> List[AxisTick]:
    """Enumerate price ticks from ``highest`` down to (excluding) ``lowest``.

    The first tick sits ``highest mod increment`` below the top so that tick
    prices land on multiples of the increment.
    """
    axis_x = size.width - config.y_axis_padding
    highest = price_range.highest

    start = highest % increment
    if math.isclose(start, increment, rel_tol=1e-9):
        start = 0.0

    ticks: List[AxisTick] = []
    step = 0
    offset = start
    while highest - offset > price_range.lowest:
        y = offset * scale
        price = highest - offset
        ticks.append(AxisTick(
            price=price,
            line=Line(Point(axis_x, y), Point(axis_x + config.tick_length, y)),
            label=AxisLabel(format_price(price, increment), Point(axis_x + config.label_offset, y), 'left'),
        ))
        step += 1
        offset = start + step * increment
    return ticks


def build_axes(size: Size, config: ChartConfig = DEFAULT_CONFIG) -> Tuple[Line, Line]:
    """Price baseline along the bottom and the y axis along the right gutter."""
    baseline_y = size.height - config.x_axis_padding
    axis_x = size.width - config.y_axis_padding
    x_axis = Line(Point(config.bar_spacing, baseline_y), Point(axis_x, baseline_y))
    y_axis = Line(Point(axis_x, config.bar_spacing), Point(axis_x, size.height - config.bar_spacing))
    return x_axis, y_axis


def _bar_positions(count: int, config: ChartConfig) -> List[float]:
    first = 2 * config.bar_spacing
    return [first + index * config.bar_pitch for index in range(count)]


def build_candles(bars: Sequence[Bar], price_range: PriceRange, scale: float,
                  config: ChartConfig = DEFAULT_CONFIG) -> List[Candle]:
    """One candle per bar, left to right. ``bars`` must be oldest first."""
    highest = price_range.highest
    candles: List[Candle] = []
    for x, bar in zip(_bar_positions(len(bars), config), bars):
        wick = Line(Point(x, (highest - bar.high) * scale), Point(x, (highest - bar.low) * scale))

        higher_value = max(bar.open, bar.close)
        lower_value = min(bar.open, bar.close)
        body = Rect(
            x=x - config.bar_width / 2,
            y=(highest - higher_value) * scale,
            width=config.bar_width,
            height=(higher_value - lower_value) * scale,
        )

        color = config.bullish if bar.is_bullish else config.bearish
        candles.append(Candle(bar=bar, wick=wick, body=body, color=color))
    return candles


def build_date_labels(bars: Sequence[Bar], size: Size,
                      config: ChartConfig = DEFAULT_CONFIG) -> List[AxisLabel]:
    """Day-of-month under each candle, or nothing when date labels are off."""
    if not config.show_date_labels:
        return []
    y = size.height - config.x_axis_padding + config.date_label_offset
    return [
        AxisLabel(str(bar.date.day), Point(x, y), 'top_left')
        for x, bar in zip(_bar_positions(len(bars), config), bars)
    ]


def empty_scene(size: Size, config: ChartConfig = DEFAULT_CONFIG) -> Scene:
    return Scene(size=size, foreground=config.foreground, background=config.background)


def layout(bars: Sequence[Bar], size: Size, config: Optional[ChartConfig] = None) -> Scene:
    """Lay out one render pass.

    Raises:
        NoDataError: ``bars`` is empty.
    """
    config = config or DEFAULT_CONFIG
    if not bars:
        raise NoDataError("No price bars to render")
    if size.is_empty:
        return empty_scene(size, config)
    # Axes would sit outside the canvas
    if size.width <= config.y_axis_padding + 2 * config.bar_spacing or size.height < config.x_axis_padding:
        return empty_scene(size, config)

    axes = build_axes(size, config)
    visible = select_visible_bars(bars, size.width, config)
    if not visible:
        return Scene(size=size, foreground=config.foreground, background=config.background, axes=axes)

    price_range = compute_price_range(visible).widened(config.min_price_range)
    scale = vertical_scale(price_range, size.height, config)
    increment = choose_tick_increment(price_range.range(), size.height, config)
    ticks = compute_ticks(price_range, increment, scale, size, config)

    ordered = oldest_first(visible)
    return Scene(
        size=size,
        foreground=config.foreground,
        background=config.background,
        axes=axes,
        ticks=tuple(ticks),
        candles=tuple(build_candles(ordered, price_range, scale, config)),
        date_labels=tuple(build_date_labels(ordered, size, config)),
        price_range=price_range,
        tick_increment=increment,
        scale=scale,
    )
