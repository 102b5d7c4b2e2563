"""Error kinds raised by the feed client, parser and service."""

from datetime import date

EMPTY_INPUT = "empty input"
TOO_FEW_LINES = "too few lines"
INVALID_HEADER = "invalid header format"
UNPARSEABLE_DATE = "unparseable date"
INVALID_SEQUENCE = "invalid sequence number"
NO_VALID_RATES = "no valid rates found"


class CnbRatesError(Exception):
    """Base class for every error this package raises."""


class DataParsingError(CnbRatesError):
    """The feed text could not be turned into a response as a whole.

    Row-level problems never raise this; they are collected and only show up
    in ``row_errors`` when no row at all survived.
    """

    def __init__(self, reason: str, detail: str | None = None, row_errors: list[str] | None = None):
        self.reason = reason
        self.detail = detail
        self.row_errors = list(row_errors or [])
        message = reason if detail is None else f"{reason}: {detail}"
        if self.row_errors:
            message = f"{message} ({'; '.join(self.row_errors)})"
        super().__init__(message)


class DataNotFoundError(CnbRatesError):
    """The publisher has no feed for the requested historical date."""

    def __init__(self, requested: date):
        self.date = requested
        super().__init__(f"Exchange rates not found for date {requested:%d.%m.%Y}")


class FetchError(CnbRatesError):
    """The upstream feed could not be fetched after all retries."""


# Status codes for an HTTP layer built on top of this package.
HTTP_STATUS: dict[type[Exception], int] = {
    DataNotFoundError: 404,
    DataParsingError: 503,
    FetchError: 503,
    ValueError: 400,
}


def http_status_for(exc: BaseException) -> int:
    """Look up the HTTP status for an exception, most specific class first."""
    for cls in type(exc).__mro__:
        if cls in HTTP_STATUS:
            return HTTP_STATUS[cls]
    return 500
