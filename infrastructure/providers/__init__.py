from .apilayer import ApiLayerProvider
from .base import ExchangeRateProvider

__all__ = ['ApiLayerProvider', 'ExchangeRateProvider']
