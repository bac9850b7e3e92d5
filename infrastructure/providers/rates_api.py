import asyncio
import logging
from decimal import Decimal, InvalidOperation

import httpx

from domain.exceptions.currency import ProviderError
from domain.models.currency import RateNotFound, RateTable

logger = logging.getLogger(__name__)


class RatesAPIProvider:
	def __init__(
		self,
		base_url: str,
		currencies: list[str],
		client: httpx.AsyncClient | None = None,
		timeout: int = 10,
	):
		self.base_url = base_url.rstrip('/')
		self.currencies = [c.upper() for c in currencies]
		self._client = client or httpx.AsyncClient(timeout=timeout)

	@property
	def name(self) -> str:
		return 'ratesapi'

	async def _request(self, currency: str) -> dict | None:
		url = f'{self.base_url}/{currency}.json'

		try:
			response = await self._client.get(url)
		except httpx.RequestError as e:
			raise ProviderError(f'Rates API request failed: {e.__class__.__name__}') from e

		if not response.is_success:
			logger.info(f'Rates API has no data for {currency} (HTTP {response.status_code})')
			return None

		try:
			data = response.json()
		except ValueError as e:
			raise ProviderError(f'Rates API response parsing error: {str(e)}') from e

		if not isinstance(data, dict):
			raise ProviderError(f'Rates API response parsing error: unexpected payload for {currency}')

		return data

	def _build_table(self, currency: str, data: dict) -> RateTable:
		try:
			updated_at = int(data['time_last_updated'])
			raw_rates = data['rates']
			rates = {
				code: Decimal(str(raw_rates[code])) for code in self.currencies if code in raw_rates
			}
		except (KeyError, TypeError, ValueError, InvalidOperation) as e:
			raise ProviderError(f'Rates API response parsing error for {currency}: {e!r}') from e

		for code, rate in rates.items():
			if not rate.is_finite() or rate < 0:
				raise ProviderError(f'Rates API returned an invalid {code} rate for {currency}: {rate}')

		if currency in rates and rates[currency] != Decimal(1):
			raise ProviderError(
				f'Rates API table for {currency} quotes its own rate as {rates[currency]}, expected 1'
			)

		return RateTable(base_currency=currency, rates=rates, updated_at=updated_at)

	async def fetch_rates(self, currency: str) -> RateTable | RateNotFound:
		currency = currency.upper()
		data = await self._request(currency)
		if data is None:
			return RateNotFound(currency)
		return self._build_table(currency, data)

	async def fetch_all_rates(self) -> dict[str, RateTable]:
		# gather without return_exceptions: the first ProviderError aborts the whole load
		results = await asyncio.gather(*(self.fetch_rates(code) for code in self.currencies))

		tables = {
			table.base_currency: table for table in results if isinstance(table, RateTable)
		}
		logger.info(f'Fetched rate tables for {len(tables)}/{len(self.currencies)} currencies')
		return tables

	async def close(self) -> None:
		await self._client.aclose()
