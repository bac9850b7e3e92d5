from collections.abc import Mapping
from dataclasses import dataclass, field
from decimal import Decimal
from types import MappingProxyType

from domain.exceptions.currency import MissingRateError


@dataclass(frozen=True)
class RateTable:
    """Rates quoted against one base currency.

    ``rates[code]`` is how many units of ``code`` one unit of
    ``base_currency`` buys. ``updated_at`` is the upstream timestamp in
    seconds since epoch.
    """

    base_currency: str
    rates: Mapping[str, Decimal] = field(default_factory=dict)
    updated_at: int = 0

    def __post_init__(self):
        # read-only view over a private copy of the caller's mapping
        object.__setattr__(self, 'rates', MappingProxyType(dict(self.rates)))

    def rate_for(self, currency: str) -> Decimal:
        try:
            return self.rates[currency]
        except KeyError as e:
            raise MissingRateError(
                f"Rate table for {self.base_currency} has no rate for {currency}"
            ) from e

    def is_stale(self, freshness_boundary: int) -> bool:
        # an entry exactly on the boundary is still fresh
        return self.updated_at < freshness_boundary


@dataclass(frozen=True)
class RateNotFound:
    currency: str


@dataclass(frozen=True)
class ExchangeRequest:
    price: Decimal
    source_currency: str
    target_currency: str


@dataclass(frozen=True)
class ExchangeResponse:
    amount: Decimal
    target_currency: str
    rate: Decimal  # target rate applied


@dataclass(frozen=True)
class ExchangeNotFound:
    source_currency: str
