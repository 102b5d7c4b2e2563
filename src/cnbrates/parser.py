"""Parser for the CNB daily exchange-rate feed.

A feed looks like::

    03 Jan 2000 #1
    Country|Currency|Amount|Code|Rate
    Australia|dollar|1|AUD|23.282
    USA|dollar|1|USD|25.347

A broken header fails the whole feed. A broken data row is skipped and
recorded; the feed only fails if no row survives.
"""

import logging
from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal, InvalidOperation

from cnbrates.errors import (
    EMPTY_INPUT,
    INVALID_HEADER,
    INVALID_SEQUENCE,
    NO_VALID_RATES,
    TOO_FEW_LINES,
    UNPARSEABLE_DATE,
    DataParsingError,
)
from cnbrates.models import ExchangeRate, ExchangeRateResponse, is_valid_for_display
from cnbrates.schema import (
    AMOUNT_PATTERN,
    DATE_FORMATS,
    FEED_COLUMNS,
    FIELD_SEPARATOR,
    HEADER_PATTERN,
    MAX_INT,
    RATE_PATTERN,
)

logger = logging.getLogger(__name__)

WRONG_FIELD_COUNT = "wrong field count"
INVALID_AMOUNT = "invalid amount"
INVALID_RATE = "invalid rate"
INVALID_RECORD = "invalid record"


class RowParseError(ValueError):
    """A single data line is malformed. Never escapes parse_feed."""

    def __init__(self, reason: str, value: str):
        self.reason = reason
        super().__init__(f"{reason}: {value!r}")


@dataclass(frozen=True)
class SkippedRow:
    line_number: int
    line: str
    reason: str

    def describe(self) -> str:
        return f"line {self.line_number}: {self.reason} ({self.line})"


@dataclass(frozen=True)
class ParseReport:
    response: ExchangeRateResponse
    skipped: tuple[SkippedRow, ...] = ()

    def __post_init__(self):
        if not isinstance(self.skipped, tuple):
            object.__setattr__(self, "skipped", tuple(self.skipped))


def parse_date(date_str: str) -> date:
    """Parse the header date, trying each accepted layout in order."""
    for fmt in DATE_FORMATS:
        try:
            return datetime.strptime(date_str, fmt).date()
        except ValueError:
            continue
    raise DataParsingError(UNPARSEABLE_DATE, date_str)


def parse_header(line: str) -> tuple[date, int]:
    """Parse ``"03 Jan 2000 #1"`` into ``(date(2000, 1, 3), 1)``."""
    match = HEADER_PATTERN.match(line.strip())
    if match is None:
        raise DataParsingError(INVALID_HEADER, line)

    date_str, sequence_str = match.groups()
    parsed_date = parse_date(date_str)

    sequence_number = int(sequence_str)
    if not 0 < sequence_number <= MAX_INT:
        raise DataParsingError(INVALID_SEQUENCE, sequence_str)
    return parsed_date, sequence_number


def parse_row(line: str) -> ExchangeRate:
    """Parse one ``country|currency|amount|code|rate`` line.

    Raises RowParseError on a wrong field count or a non-positive or
    non-numeric amount or rate. Blank text fields are left for
    is_valid_for_display to reject.
    """
    parts = [part.strip() for part in line.split(FIELD_SEPARATOR)]
    if len(parts) != len(FEED_COLUMNS):
        raise RowParseError(WRONG_FIELD_COUNT, line)

    country, currency, amount_str, code, rate_str = parts

    if not AMOUNT_PATTERN.match(amount_str) or not 0 < int(amount_str) <= MAX_INT:
        raise RowParseError(INVALID_AMOUNT, amount_str)

    if not RATE_PATTERN.match(rate_str):
        raise RowParseError(INVALID_RATE, rate_str)
    try:
        rate = Decimal(rate_str)
    except InvalidOperation as e:
        raise RowParseError(INVALID_RATE, rate_str) from e
    if rate <= 0:
        raise RowParseError(INVALID_RATE, rate_str)

    return ExchangeRate(
        country=country,
        currency=currency,
        amount=int(amount_str),
        code=code,
        rate=rate,
    )


def _split_lines(text: str) -> list[tuple[int, str]]:
    """Return non-blank, stripped lines with their 1-based line numbers."""
    return [
        (line_number, line.strip())
        for line_number, line in enumerate(text.split("\n"), start=1)
        if line.strip()
    ]


def parse_feed_report(text: str | None) -> ParseReport:
    """Parse a feed and report which data rows were skipped and why."""
    if text is None or not text.strip():
        logger.error("Feed text is null, empty or whitespace")
        raise DataParsingError(EMPTY_INPUT)

    lines = _split_lines(text)
    if len(lines) < 2:
        logger.error("Feed has %d non-blank lines, expected at least 2", len(lines))
        raise DataParsingError(TOO_FEW_LINES, f"expected at least 2 lines, got {len(lines)}")

    _, header = lines[0]
    logger.debug("Parsing feed header: %s", header)
    feed_date, sequence_number = parse_header(header)

    if len(lines) < 3:
        logger.error("Feed for %s has no data lines", feed_date)
        raise DataParsingError(
            TOO_FEW_LINES, "expected header, column header and at least one data line"
        )

    rates: list[ExchangeRate] = []
    skipped: list[SkippedRow] = []
    for line_number, line in lines[2:]:
        try:
            rate = parse_row(line)
        except RowParseError as e:
            skipped.append(SkippedRow(line_number, line, e.reason))
            logger.warning("Skipping malformed line %d: %s (%s)", line_number, line, e)
            continue

        if not is_valid_for_display(rate):
            skipped.append(SkippedRow(line_number, line, INVALID_RECORD))
            logger.warning("Skipping invalid record at line %d: %s", line_number, line)
            continue

        rates.append(rate)

    if not rates:
        row_errors = [row.describe() for row in skipped]
        logger.error("No valid exchange rates in feed for %s: %s", feed_date, "; ".join(row_errors))
        raise DataParsingError(NO_VALID_RATES, row_errors=row_errors)

    if skipped:
        logger.warning("Parsed %d rates, skipped %d malformed lines", len(rates), len(skipped))
    logger.info(
        "Parsed %d exchange rates for %s (sequence #%d)", len(rates), feed_date, sequence_number
    )
    return ParseReport(ExchangeRateResponse(feed_date, sequence_number, rates), skipped)


def parse_feed(text: str | None) -> ExchangeRateResponse:
    """Parse the raw feed text into a response.

    Raises DataParsingError for empty input, too few lines, a bad header or
    when no data row is valid.
    """
    return parse_feed_report(text).response
