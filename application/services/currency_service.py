from decimal import Decimal

from domain.exceptions.currency import InvalidCurrencyError
from domain.models.currency import ExchangeRequest


class CurrencyService:
	"""Turns raw request fields into a validated ``ExchangeRequest``."""

	def __init__(self, supported_currencies: list[str]):
		self.supported_currencies = [c.upper() for c in supported_currencies]

	def get_supported_currencies(self) -> list[str]:
		return list(self.supported_currencies)

	def is_supported(self, code: str) -> bool:
		return code.upper() in self.supported_currencies

	def build_request(
		self, price: Decimal | None, source: str | None, target: str | None
	) -> ExchangeRequest:
		if price is None or price <= 0:
			raise InvalidCurrencyError('The price is missing or its not a value greater than 0')

		missing = [name for name, code in (('source', source), ('target', target)) if not code or not code.strip()]
		if missing:
			raise InvalidCurrencyError(
				f"The following currencies are missing from the input: '{','.join(missing)}'."
			)

		invalid = [name for name, code in (('source', source), ('target', target)) if not self.is_supported(code.strip())]
		if invalid:
			allowed = ', '.join(c.lower() for c in self.supported_currencies)
			raise InvalidCurrencyError(
				f"The following currencies are invalid: '{','.join(invalid)}'. "
				f'Please remember that the source or target currency has to be one of: {allowed}'
			)

		return ExchangeRequest(
			price=price,
			source_currency=source.strip().upper(),
			target_currency=target.strip().upper(),
		)
