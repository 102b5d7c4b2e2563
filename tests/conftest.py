"""Shared test fixtures."""

from decimal import Decimal

import pytest

from cnbrates.models import ExchangeRate

HEADER = "03 Jan 2000 #1"
COLUMNS = "Country|Currency|Amount|Code|Rate"


@pytest.fixture
def sample_feed():
    """The two-row feed from the CNB documentation example."""
    return "\n".join(
        [
            HEADER,
            COLUMNS,
            "Australia|dollar|1|AUD|23.282",
            "USA|dollar|1|USD|25.347",
        ]
    )


@pytest.fixture
def make_feed():
    """Build a feed from data lines under the standard header."""

    def _make(*rows: str, header: str = HEADER) -> str:
        return "\n".join([header, COLUMNS, *rows]) + "\n"

    return _make


@pytest.fixture
def make_rate():
    def _make(code="USD", rate="25.347", amount=1, country="USA", currency="dollar"):
        return ExchangeRate(
            country=country,
            currency=currency,
            amount=amount,
            code=code,
            rate=Decimal(rate),
        )

    return _make
