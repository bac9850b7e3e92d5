from .currency_service import CurrencyService
from .exchange_service import ExchangeService

__all__ = ['CurrencyService', 'ExchangeService']
