"""OHLC Viewer Services"""

from .price_service import PriceService, price_service

__all__ = [
    'PriceService',
    'price_service',
]
