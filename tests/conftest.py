"""
Shared test configuration and fixtures.
"""

import pytest

from helpers import make_table


@pytest.fixture
def eur_table():
    return make_table("EUR", EUR="1", GBP="0.855552", USD="1.183894")


@pytest.fixture
def gbp_table():
    return make_table("GBP", GBP="1", EUR="1.168852", USD="1.384935")


@pytest.fixture
def usd_table():
    return make_table("USD", USD="1", GBP="0.722077", EUR="0.844712")
