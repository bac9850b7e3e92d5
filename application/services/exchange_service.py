import logging
from decimal import ROUND_HALF_EVEN, Decimal

from domain.exceptions.currency import CalculationError
from domain.models.currency import ExchangeNotFound, ExchangeRequest, ExchangeResponse
from infrastructure.cache.memory_cache import RateCache

logger = logging.getLogger(__name__)

CENTS = Decimal('0.01')


class ExchangeService:
	def __init__(self, rate_cache: RateCache, refresh_days: int):
		self.rate_cache = rate_cache
		self.refresh_days = refresh_days

	async def exchange(self, request: ExchangeRequest) -> ExchangeResponse | ExchangeNotFound:
		table = await self.rate_cache.lookup(request.source_currency, self.refresh_days)
		if table is None:
			logger.debug(f'No rates available for {request.source_currency}')
			return ExchangeNotFound(request.source_currency)

		# looked up rather than assumed to be 1 so a corrupted table fails loudly
		reference_rate = table.rate_for(request.source_currency)
		target_rate = table.rate_for(request.target_currency)

		try:
			amount = request.price * target_rate / reference_rate
			amount = amount.quantize(CENTS, rounding=ROUND_HALF_EVEN)
		except ArithmeticError as e:
			raise CalculationError(
				f'Cannot exchange {request.price} {request.source_currency} to '
				f'{request.target_currency}: {e.__class__.__name__}'
			) from e

		return ExchangeResponse(
			amount=amount,
			target_currency=request.target_currency,
			rate=target_rate,
		)
