"""OHLC Viewer: daily candlestick charts from a PostgreSQL price store."""

__version__ = "0.1.0"
