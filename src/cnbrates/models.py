"""Exchange-rate value objects and their JSON / feed renderings."""

import json
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Any

from cnbrates.schema import CODE_LENGTH, COLUMN_HEADER_LINE, FIELD_SEPARATOR


@dataclass(frozen=True)
class ExchangeRate:
    """One row of the feed: CZK per ``amount`` units of ``code``."""

    country: str
    currency: str
    amount: int
    code: str
    rate: Decimal

    def to_dict(self) -> dict[str, Any]:
        return {
            "country": self.country,
            "currency": self.currency,
            "amount": self.amount,
            "code": self.code,
            "rate": float(self.rate),
        }

    def to_feed_line(self) -> str:
        fields = [self.country, self.currency, str(self.amount), self.code, format(self.rate, "f")]
        return FIELD_SEPARATOR.join(fields)


@dataclass(frozen=True)
class ExchangeRateResponse:
    """Snapshot of one feed publication.

    ``rates`` is always stored as a tuple so the snapshot cannot be mutated
    after construction.
    """

    date: date
    sequence_number: int
    rates: tuple[ExchangeRate, ...] = ()

    def __post_init__(self):
        if not isinstance(self.rates, tuple):
            object.__setattr__(self, "rates", tuple(self.rates))

    def to_dict(self) -> dict[str, Any]:
        """Serialize with the field names the frontend table expects."""
        return {
            "date": self.date.isoformat(),
            "sequenceNumber": self.sequence_number,
            "rates": [rate.to_dict() for rate in self.rates],
        }

    def to_json(self, indent: int | None = None) -> str:
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)

    def to_feed_text(self) -> str:
        """Render back into the pipe-delimited feed format."""
        header = f"{self.date:%d %b %Y} #{self.sequence_number}"
        lines = [header, COLUMN_HEADER_LINE]
        lines.extend(rate.to_feed_line() for rate in self.rates)
        return "\n".join(lines) + "\n"


def is_valid_for_display(rate: ExchangeRate) -> bool:
    """Return True if every field of the row is usable by the table view."""
    return (
        bool(rate.country.strip())
        and bool(rate.currency.strip())
        and bool(rate.code.strip())
        and len(rate.code) == CODE_LENGTH
        and rate.amount > 0
        and rate.rate > 0
    )
