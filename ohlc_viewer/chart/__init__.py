"""Candlestick chart layout: bars in, drawable scene out."""

from .config import ChartConfig, DEFAULT_CONFIG
from .layout import NoDataError, layout
from .types import Bar, PriceRange, Scene, Size

__all__ = [
    'Bar',
    'ChartConfig',
    'DEFAULT_CONFIG',
    'NoDataError',
    'PriceRange',
    'Scene',
    'Size',
    'layout',
]
