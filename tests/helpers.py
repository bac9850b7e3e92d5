"""
Rate tables and upstream payloads for EUR, GBP and USD shared by the tests.
"""

from decimal import Decimal

from domain.models.currency import RateTable

# Fixed "now" for cache tests, seconds since epoch
NOW = 1_700_000_000
DAY = 24 * 60 * 60

UPSTREAM_UPDATED_AT = 1617753602

EUR_PAYLOAD = {
    "base": "EUR",
    "date": "2021-04-07",
    "time_last_updated": UPSTREAM_UPDATED_AT,
    "rates": {"GBP": 0.855552, "EUR": 1, "USD": 1.183894},
}

GBP_PAYLOAD = {
    "base": "GBP",
    "date": "2021-04-07",
    "time_last_updated": UPSTREAM_UPDATED_AT,
    "rates": {"GBP": 1, "EUR": 1.168852, "USD": 1.384935},
}

USD_PAYLOAD = {
    "base": "USD",
    "date": "2021-04-07",
    "time_last_updated": UPSTREAM_UPDATED_AT,
    "rates": {"GBP": 0.722077, "EUR": 0.844712, "USD": 1},
}

PAYLOADS = {"EUR": EUR_PAYLOAD, "GBP": GBP_PAYLOAD, "USD": USD_PAYLOAD}


def make_table(base: str, updated_at: int = NOW, **rates: str) -> RateTable:
    """Build a table from ``CODE='rate'`` keyword arguments."""
    return RateTable(
        base_currency=base,
        rates={code: Decimal(value) for code, value in rates.items()},
        updated_at=updated_at,
    )
