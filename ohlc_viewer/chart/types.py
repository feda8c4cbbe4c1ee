"""
Chart data types

Price bars coming in, pixel-space primitives going out. All values are
immutable; a Scene is rebuilt from scratch on every render pass.
"""

from dataclasses import dataclass
from datetime import date
from typing import List, Optional, Tuple


@dataclass(frozen=True)
class Bar:
    """One trading period.

    Attributes:
        date:  Calendar day of the period (no time-of-day).
        open:  Opening price.
        high:  Highest price.
        low:   Lowest price.
        close: Closing price.

    ``low <= high`` is expected but not enforced; malformed bars are drawn
    as they are.
    """

    date: date
    open: float
    high: float
    low: float
    close: float

    @property
    def is_bullish(self) -> bool:
        return self.close >= self.open


@dataclass(frozen=True)
class Size:
    width: float
    height: float

    @property
    def is_empty(self) -> bool:
        return self.width <= 0 or self.height <= 0


@dataclass(frozen=True)
class Color:
    r: int
    g: int
    b: int

    @classmethod
    def from_hex(cls, value: str) -> 'Color':
        value = value.lstrip('#')
        if len(value) != 6:
            raise ValueError(f"Expected a #rrggbb colour, got {value!r}")
        return cls(int(value[0:2], 16), int(value[2:4], 16), int(value[4:6], 16))

    @property
    def hex(self) -> str:
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"


@dataclass(frozen=True)
class Point:
    x: float
    y: float


@dataclass(frozen=True)
class Line:
    start: Point
    end: Point


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle given by its top-left corner and extent."""

    x: float
    y: float
    width: float
    height: float


@dataclass(frozen=True)
class PriceRange:
    lowest: float
    highest: float

    def range(self) -> float:
        return self.highest - self.lowest

    def widened(self, min_range: float) -> 'PriceRange':
        """Return a range at least ``min_range`` tall, centred on this one."""
        span = self.range()
        if span >= min_range:
            return self
        pad = (min_range - span) / 2.0
        return PriceRange(self.lowest - pad, self.highest + pad)


@dataclass(frozen=True)
class AxisLabel:
    """Text anchored at a pixel position.

    ``anchor`` tells the renderer which point of the text box sits on
    ``position``: ``'left'`` centres the text vertically on it,
    ``'top_left'`` hangs the text below and to the right of it.
    """

    text: str
    position: Point
    anchor: str = 'left'


@dataclass(frozen=True)
class AxisTick:
    price: float
    line: Line
    label: AxisLabel


@dataclass(frozen=True)
class Candle:
    bar: Bar
    wick: Line
    body: Rect
    color: Color


@dataclass(frozen=True)
class Scene:
    """Everything a renderer needs to draw one pass of the chart."""

    size: Size
    foreground: Color
    background: Color
    axes: Tuple[Line, ...] = ()
    ticks: Tuple[AxisTick, ...] = ()
    candles: Tuple[Candle, ...] = ()
    date_labels: Tuple[AxisLabel, ...] = ()
    price_range: Optional[PriceRange] = None
    tick_increment: Optional[float] = None
    scale: Optional[float] = None

    @property
    def is_empty(self) -> bool:
        return not (self.axes or self.ticks or self.candles or self.date_labels)

    def labels(self) -> List[AxisLabel]:
        return [tick.label for tick in self.ticks] + list(self.date_labels)

    def coordinates(self) -> List[float]:
        """Flatten every pixel coordinate in the scene."""
        values: List[float] = []
        for line in self.axes:
            values.extend((line.start.x, line.start.y, line.end.x, line.end.y))
        for tick in self.ticks:
            values.extend((tick.line.start.x, tick.line.start.y, tick.line.end.x, tick.line.end.y,
                           tick.label.position.x, tick.label.position.y))
        for candle in self.candles:
            values.extend((candle.wick.start.x, candle.wick.start.y, candle.wick.end.x, candle.wick.end.y,
                           candle.body.x, candle.body.y, candle.body.width, candle.body.height))
        for label in self.date_labels:
            values.extend((label.position.x, label.position.y))
        return values
