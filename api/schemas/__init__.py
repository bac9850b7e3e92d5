from .requests import ExchangeRequestBody
from .responses import ErrorResponse, ExchangeResponseBody, SupportedCurrenciesResponse

__all__ = [
	'ErrorResponse',
	'ExchangeRequestBody',
	'ExchangeResponseBody',
	'SupportedCurrenciesResponse',
]
