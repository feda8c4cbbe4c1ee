"""
Price Data Service Layer

Loads daily bars from the database and converts them into chart Bars.
"""

import time
from typing import List, Optional

import pandas as pd

from ohlc_viewer.chart.types import Bar
from ohlc_viewer.utilities.data.db_manager import DatabaseManager, db_manager
from ohlc_viewer.utilities.logger import chart_logger

PRICE_COLUMNS = ('open', 'high', 'low', 'close')


class PriceService:
    """Service layer between the price tables and the chart"""

    def __init__(self, db: Optional[DatabaseManager] = None):
        self.db = db or db_manager

    @staticmethod
    def bars_from_frame(df: pd.DataFrame) -> List[Bar]:
        """Convert price rows into Bars, keeping row order.

        Numeric columns may hold ``Decimal`` values straight from NUMERIC
        columns; timestamps are reduced to their calendar date.
        """
        if df is None or len(df) == 0:
            return []

        missing = [c for c in ('timestamp',) + PRICE_COLUMNS if c not in df.columns]
        if missing:
            raise ValueError(f"Price data is missing columns: {', '.join(missing)}")

        prices = df.loc[:, list(PRICE_COLUMNS)].astype(float)
        incomplete = prices.isna().any(axis=1)
        if incomplete.any():
            skipped = [str(ts) for ts in df.loc[incomplete, 'timestamp']]
            chart_logger.warning(
                f"Skipping {len(skipped)} row(s) with missing prices: {', '.join(skipped)}", "DATA")
            prices = prices.loc[~incomplete]
        dates = pd.to_datetime(df.loc[prices.index, 'timestamp']).dt.date

        bars = [
            Bar(date=day, open=o, high=h, low=l, close=c)
            for day, o, h, l, c in zip(dates, prices['open'], prices['high'], prices['low'], prices['close'])
        ]

        malformed = sum(1 for bar in bars if bar.low > bar.high)
        if malformed:
            chart_logger.warning(f"{malformed} bar(s) have low above high; drawing them as-is", "DATA")
        return bars

    def load_daily_bars(self, symbol: str, limit: int = 100) -> List[Bar]:
        """Most recent ``limit`` daily bars for ``symbol``, newest first."""
        start_time = time.time()
        df = self.db.fetch_daily_prices(symbol, limit)
        bars = self.bars_from_frame(df)
        chart_logger.data_processing(f"Loaded daily bars for {symbol}", len(bars), time.time() - start_time)
        return bars


price_service = PriceService()
