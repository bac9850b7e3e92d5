from typing import Protocol

from domain.models.currency import RateNotFound, RateTable


class ExchangeRateProvider(Protocol):
    """Upstream source of rate tables. Implementations never cache."""

    @property
    def name(self) -> str:
        ...

    async def fetch_rates(self, currency: str) -> RateTable | RateNotFound:
        """Fetch the table whose base is ``currency``.

        Returns ``RateNotFound`` when upstream has no data for the currency.
        Transport and payload failures raise ``ProviderError``.
        """
        ...

    async def fetch_all_rates(self) -> dict[str, RateTable]:
        """Fetch one table per configured currency, skipping not-found ones."""
        ...

    async def close(self) -> None:
        ...
