from .base import ExchangeRateProvider
from .rates_api import RatesAPIProvider

__all__ = ['ExchangeRateProvider', 'RatesAPIProvider']
