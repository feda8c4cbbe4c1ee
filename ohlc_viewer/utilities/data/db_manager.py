"""PostgreSQL Database Manager"""

from contextlib import contextmanager
from typing import Dict, Optional

import pandas as pd
from psycopg2.pool import ThreadedConnectionPool

from ohlc_viewer.utilities.config.app_config import app_config
from ohlc_viewer.utilities.logger import chart_logger, log_exception, log_performance


class DatabaseManager:
    MIN_CONNECTIONS = 1
    MAX_CONNECTIONS = 5

    def __init__(self, db_config: Optional[Dict[str, object]] = None, schema: Optional[str] = None):
        self._db_config = db_config
        self._schema = schema
        self.pool = None

    @property
    def schema(self) -> str:
        return self._schema or app_config.db_schema

    def _ensure_pool(self):
        if self.pool is None:
            params = self._db_config or app_config.get_database_config()
            chart_logger.database_operation(
                "Opening connection pool",
                f"{params.get('user')}@{params.get('host')}:{params.get('port')}/{params.get('database')}",
            )
            self.pool = ThreadedConnectionPool(self.MIN_CONNECTIONS, self.MAX_CONNECTIONS, **params)
        return self.pool

    @contextmanager
    def get_connection(self):
        pool = self._ensure_pool()
        conn = pool.getconn()
        try:
            yield conn
        finally:
            pool.putconn(conn)

    def daily_prices_query(self) -> str:
        return f"""
            SELECT ap.timestamp, ap.open, ap.high, ap.low, ap.close
            FROM {self.schema}.adjusted_prices AS ap
            JOIN {self.schema}.instruments AS instr ON ap.instrument_id = instr.id
            WHERE instr.symbol = %s
            ORDER BY ap.timestamp DESC
            LIMIT %s
        """

    @log_exception
    @log_performance
    def fetch_daily_prices(self, symbol: str, limit: int = 100) -> pd.DataFrame:
        """Most recent ``limit`` price rows for ``symbol``, newest first."""
        with self.get_connection() as conn:
            chart_logger.database_operation("Fetching daily prices", f"{symbol} (limit {limit})")
            return pd.read_sql_query(self.daily_prices_query(), conn, params=(symbol, limit))

    def close(self):
        if self.pool is not None:
            self.pool.closeall()
            self.pool = None
            chart_logger.database_operation("Connection pool closed")


# Singleton instance; the pool opens on first use
db_manager = DatabaseManager()
