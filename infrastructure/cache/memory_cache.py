import asyncio
import logging
import time
from collections import defaultdict
from collections.abc import Callable

from domain.models.currency import RateNotFound, RateTable
from infrastructure.providers.base import ExchangeRateProvider

logger = logging.getLogger(__name__)

SECONDS_PER_DAY = 24 * 60 * 60


class RateCache:
    """Process-wide store of one rate table per base currency.

    The cache starts empty and bulk-loads every configured currency on the
    first lookup. After that each entry is refreshed on its own once it is
    older than the refresh window. A currency the provider no longer knows
    about is evicted and stays absent while the cache holds anything else.
    """

    def __init__(
        self,
        provider: ExchangeRateProvider,
        clock: Callable[[], float] = time.time,
    ):
        self.provider = provider
        self._clock = clock
        self._tables: dict[str, RateTable] = {}
        self._load_lock = asyncio.Lock()
        self._currency_locks: defaultdict[str, asyncio.Lock] = defaultdict(asyncio.Lock)

    def __len__(self) -> int:
        return len(self._tables)

    def __contains__(self, currency: object) -> bool:
        return currency in self._tables

    def currencies(self) -> list[str]:
        return list(self._tables)

    async def lookup(self, currency: str, refresh_days: int) -> RateTable | None:
        if not self._tables:
            await self._load_all()

        async with self._currency_locks[currency]:
            table = self._tables.get(currency)
            if table is None:
                logger.debug(f"Cache MISS for {currency}")
                return None

            if not table.is_stale(self._freshness_boundary(refresh_days)):
                logger.debug(f"Cache HIT for {currency}")
                return table

            return await self._refresh(currency)

    def _freshness_boundary(self, refresh_days: int) -> int:
        return int(self._clock()) - refresh_days * SECONDS_PER_DAY

    async def _load_all(self) -> None:
        async with self._load_lock:
            # another caller may have finished loading while we waited
            if self._tables:
                return

            tables = await self.provider.fetch_all_rates()
            for table in tables.values():
                self._tables[table.base_currency] = table

            logger.info(f"Loaded rate tables for {sorted(self._tables)}")

    async def _refresh(self, currency: str) -> RateTable | None:
        logger.info(f"Rate table for {currency} is stale, refreshing from {self.provider.name}")
        fresh = await self.provider.fetch_rates(currency)

        if isinstance(fresh, RateNotFound):
            del self._tables[currency]
            logger.info(f"Evicted {currency}: {self.provider.name} has no fresher rates")
            return None

        self._tables[currency] = fresh
        return fresh
