"""Layout constants for the candlestick chart."""

from dataclasses import dataclass
from typing import Tuple

from ohlc_viewer.chart.types import Color


@dataclass(frozen=True)
class ChartConfig:
    """Fixed geometry and colours of the chart, in pixels and price units.

    Attributes:
        bar_width:         Width of a candle body.
        bar_spacing:       Gap between two candles; twice this pads the left edge.
        x_axis_padding:    Gutter under the plot reserved for the date labels.
        y_axis_padding:    Gutter right of the plot reserved for the price labels.
        y_tick_spacing:    Desired vertical distance between two price ticks.
        tick_increments:   Candidate tick steps, smallest first.
        tick_length:       Length of a tick mark right of the y axis.
        label_offset:      Distance from the y axis to a price label.
        date_label_offset: Distance from the baseline down to a date label.
        min_price_range:   Smallest price range used for scaling; flat
                           ranges are widened to it.
        show_date_labels:  Emit a day-of-month label under every candle.
    """

    bar_width: float = 10.0
    bar_spacing: float = 5.0
    x_axis_padding: float = 20.0
    y_axis_padding: float = 40.0
    y_tick_spacing: float = 50.0
    tick_increments: Tuple[float, ...] = (0.1, 0.5, 1.0, 10.0, 100.0)
    tick_length: float = 5.0
    label_offset: float = 10.0
    date_label_offset: float = 5.0
    min_price_range: float = 0.01
    bullish: Color = Color(0x38, 0xc1, 0x72)
    bearish: Color = Color(0xdc, 0x30, 0x30)
    foreground: Color = Color(0xef, 0xf8, 0xff)
    background: Color = Color(0x21, 0x29, 0x34)
    font_family: str = 'sans-serif'
    font_size: float = 14.0
    show_date_labels: bool = True

    def __post_init__(self):
        if self.bar_width <= 0 or self.bar_width + self.bar_spacing <= 0:
            raise ValueError(f"bar_width ({self.bar_width}) and bar pitch must be positive")
        if not self.tick_increments or any(step <= 0 for step in self.tick_increments):
            raise ValueError(f"tick_increments must be positive, got {self.tick_increments}")
        if self.y_tick_spacing <= 0:
            raise ValueError(f"y_tick_spacing must be positive, got {self.y_tick_spacing}")
        if self.min_price_range <= 0:
            raise ValueError(f"min_price_range must be positive, got {self.min_price_range}")

    @property
    def bar_pitch(self) -> float:
        """Horizontal distance from one candle centre to the next."""
        return self.bar_width + self.bar_spacing


DEFAULT_CONFIG = ChartConfig()
