import logging
from typing import Annotated

from fastapi import Depends

from application.services import CurrencyService, ExchangeService
from config.settings import Settings, get_settings
from infrastructure.cache.memory_cache import RateCache
from infrastructure.providers import ExchangeRateProvider, RatesAPIProvider

logger = logging.getLogger(__name__)


class AppDependencies:
	"""Container for application-wide singleton dependencies."""

	provider: ExchangeRateProvider | None = None
	rate_cache: RateCache | None = None


deps = AppDependencies()


def init_dependencies() -> None:
	"""Initialize all singleton dependencies. Called at app startup."""
	logger.info('Initializing dependencies...')
	settings = get_settings()

	deps.provider = RatesAPIProvider(
		base_url=settings.RATES_API_BASE_URL,
		currencies=settings.SUPPORTED_CURRENCIES,
		timeout=settings.REQUEST_TIMEOUT,
	)
	# lives for the whole process and starts empty; the first lookup loads it
	deps.rate_cache = RateCache(provider=deps.provider)
	logger.info('Dependencies initialized')


async def cleanup_dependencies() -> None:
	logger.info('Cleaning up dependencies...')

	if deps.provider:
		await deps.provider.close()
	deps.provider = None
	deps.rate_cache = None

	logger.info('Cleanup complete')


def get_rate_cache() -> RateCache:
	if deps.rate_cache is None:
		raise RuntimeError('Rate cache not initialized')
	return deps.rate_cache


def get_currency_service(
	settings: Annotated[Settings, Depends(get_settings)],
) -> CurrencyService:
	return CurrencyService(supported_currencies=settings.SUPPORTED_CURRENCIES)


def get_exchange_service(
	rate_cache: Annotated[RateCache, Depends(get_rate_cache)],
	settings: Annotated[Settings, Depends(get_settings)],
) -> ExchangeService:
	return ExchangeService(rate_cache=rate_cache, refresh_days=settings.CACHE_REFRESH_DAYS)
