"""Rate post-processing and the fetch -> parse -> process pipeline."""

import logging
from datetime import date

from cnbrates.client import RateFeedClient
from cnbrates.errors import DataNotFoundError, DataParsingError, FetchError
from cnbrates.models import ExchangeRateResponse, is_valid_for_display
from cnbrates.parser import parse_feed

logger = logging.getLogger(__name__)


def process_response(response: ExchangeRateResponse) -> ExchangeRateResponse:
    """Drop rows unfit for display and order the rest by currency code.

    Never fails; an emptied rate list is returned as-is.
    """
    rates = sorted(
        (rate for rate in response.rates if is_valid_for_display(rate)),
        key=lambda rate: rate.code,
    )
    return ExchangeRateResponse(response.date, response.sequence_number, rates)


class ExchangeRateService:
    """Fetch the feed, parse it and post-process the result.

    Errors from the client and the parser propagate unchanged so the caller
    can tell "no data for that date" apart from "service degraded".
    """

    def __init__(self, client: RateFeedClient):
        self._client = client

    def get_rates(self, rate_date: date | None = None) -> ExchangeRateResponse:
        """Return processed rates for ``rate_date``, or the latest feed if None."""
        if rate_date is not None and rate_date > date.today():
            raise ValueError(
                f"Exchange rates are not available for future date {rate_date.isoformat()}"
            )

        label = rate_date.isoformat() if rate_date is not None else "latest"
        try:
            text = self._client.fetch(rate_date)
            response = process_response(parse_feed(text))
        except DataNotFoundError:
            logger.warning("No exchange rates published for %s", label)
            raise
        except FetchError as e:
            logger.error("CNB feed unavailable (%s): %s", label, e)
            raise
        except DataParsingError as e:
            logger.error("CNB feed for %s could not be parsed: %s", label, e)
            raise

        logger.info(
            "Retrieved %d exchange rates for %s (requested %s)",
            len(response.rates),
            response.date,
            label,
        )
        return response
