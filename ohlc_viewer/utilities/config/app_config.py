"""
OHLC Viewer Configuration Management
"""

import os
from pathlib import Path
from typing import Dict, Optional

from ohlc_viewer.chart.config import ChartConfig, DEFAULT_CONFIG
from ohlc_viewer.chart.types import Color

TRUE_VALUES = frozenset(['1', 'true', 'yes', 'on'])
FALSE_VALUES = frozenset(['0', 'false', 'no', 'off'])


class AppConfig:
    """Database and chart settings read from the environment"""

    def __init__(self, env_file: Optional[Path] = None):
        self.env_file = Path(env_file) if env_file else Path('.env')
        self.load_environment()

    def load_environment(self):
        """Load environment variables from .env file if it exists"""
        if self.env_file.exists():
            with open(self.env_file, 'r') as f:
                for line in f:
                    line = line.strip()
                    if line and not line.startswith('#') and '=' in line:
                        key, value = line.split('=', 1)
                        os.environ[key.strip()] = value.strip()

    @staticmethod
    def _get_int(name: str, default: int) -> int:
        raw = os.getenv(name)
        if raw is None or raw.strip() == '':
            return default
        try:
            return int(raw)
        except ValueError:
            raise ValueError(f"{name} must be an integer, got {raw!r}") from None

    @staticmethod
    def _get_bool(name: str, default: bool) -> bool:
        raw = os.getenv(name)
        if raw is None or raw.strip() == '':
            return default
        value = raw.strip().lower()
        if value in TRUE_VALUES:
            return True
        if value in FALSE_VALUES:
            return False
        raise ValueError(f"{name} must be a boolean, got {raw!r}")

    @property
    def db_host(self) -> str:
        return os.getenv('DB_HOST', 'localhost')

    @property
    def db_port(self) -> int:
        return self._get_int('DB_PORT', 5432)

    @property
    def db_name(self) -> str:
        return os.getenv('DB_NAME', 'prices')

    @property
    def db_user(self) -> str:
        return os.getenv('DB_USER', 'postgres')

    @property
    def db_password(self) -> str:
        return os.getenv('DB_PASSWORD', 'postgres')

    @property
    def db_schema(self) -> str:
        schema = os.getenv('DB_SCHEMA', 'myschema')
        if not schema.isidentifier():
            raise ValueError(f"DB_SCHEMA must be a plain identifier, got {schema!r}")
        return schema

    @property
    def symbol(self) -> str:
        return os.getenv('CHART_SYMBOL', 'ES')

    @property
    def bar_limit(self) -> int:
        limit = self._get_int('CHART_BAR_LIMIT', 100)
        if limit <= 0:
            raise ValueError(f"CHART_BAR_LIMIT must be positive, got {limit}")
        return limit

    @property
    def show_date_labels(self) -> bool:
        return self._get_bool('CHART_DATE_LABELS', True)

    def get_database_config(self) -> Dict[str, object]:
        return {
            'host': self.db_host,
            'port': self.db_port,
            'database': self.db_name,
            'user': self.db_user,
            'password': self.db_password,
        }

    @staticmethod
    def _get_color(name: str, default: Color) -> Color:
        raw = os.getenv(name)
        if raw is None or raw.strip() == '':
            return default
        try:
            return Color.from_hex(raw.strip())
        except ValueError:
            raise ValueError(f"{name} must be a #rrggbb colour, got {raw!r}") from None

    @property
    def bullish_color(self) -> Color:
        return self._get_color('CHART_BULLISH_COLOR', DEFAULT_CONFIG.bullish)

    @property
    def bearish_color(self) -> Color:
        return self._get_color('CHART_BEARISH_COLOR', DEFAULT_CONFIG.bearish)

    def get_chart_config(self) -> ChartConfig:
        return ChartConfig(
            show_date_labels=self.show_date_labels,
            bullish=self.bullish_color,
            bearish=self.bearish_color,
        )


app_config = AppConfig()
