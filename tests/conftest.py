import os
import tempfile
from datetime import date, timedelta

import pytest

os.environ.setdefault("LOG_DIR", tempfile.mkdtemp(prefix="ohlc_viewer_logs_"))
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from ohlc_viewer.chart.types import Bar


@pytest.fixture
def make_bar():
    def _make(open_=100.0, high=101.0, low=99.0, close=100.5, day=date(2024, 3, 1)):
        return Bar(date=day, open=open_, high=high, low=low, close=close)
    return _make


@pytest.fixture
def daily_bars():
    """``count`` bars ending on 2024-03-29, newest first, drifting upward over time."""
    def _make(count, last_day=date(2024, 3, 29)):
        bars = []
        for i in range(count):
            base = 100.0 - i * 0.5
            bars.append(Bar(date=last_day - timedelta(days=i), open=base, high=base + 1.0,
                            low=base - 1.0, close=base + (0.25 if i % 2 else -0.25)))
        return bars
    return _make
