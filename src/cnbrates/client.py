"""CNB daily feed client with retry and mock support."""

import logging
import time
from abc import ABC, abstractmethod
from datetime import date

import requests

from cnbrates.config import DEFAULT_BASE_URL, DEFAULT_DAILY_RATES_ENDPOINT
from cnbrates.errors import DataNotFoundError, FetchError

logger = logging.getLogger(__name__)


class RateFeedClient(ABC):
    """Abstract interface for fetching the raw exchange-rate feed."""

    @abstractmethod
    def fetch(self, date: date | None = None) -> str:
        """Fetch the feed text.

        Args:
            date: Publication date to fetch, or None for the latest feed.

        Returns:
            The raw pipe-delimited feed.

        Raises:
            DataNotFoundError: No feed exists for the requested date.
            FetchError: The feed could not be fetched.
        """


class CnbClient(RateFeedClient):
    """Real CNB client with exponential backoff retry.

    A failed attempt is retried ``max_retries`` times, waiting
    ``retry_delay * 2 ** (retry - 1)`` seconds before each retry.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        endpoint: str = DEFAULT_DAILY_RATES_ENDPOINT,
        timeout: float = 30.0,
        max_retries: int = 3,
        retry_delay: float = 1.0,
    ):
        self._url = base_url.rstrip("/") + endpoint
        self._timeout = timeout
        self._max_retries = max_retries
        self._retry_delay = retry_delay

    def fetch(self, date: date | None = None) -> str:
        params = {"date": date.strftime("%d.%m.%Y")} if date is not None else None

        for attempt in range(self._max_retries + 1):
            try:
                logger.info("Fetching CNB rates from %s, attempt %d", self._url, attempt + 1)
                resp = requests.get(self._url, params=params, timeout=self._timeout)

                if 200 <= resp.status_code < 300:
                    logger.info("Fetched CNB rates (%d bytes)", len(resp.text))
                    return resp.text

                if resp.status_code == 404 and date is not None:
                    logger.warning("CNB rates not found for %s", date)
                    raise DataNotFoundError(date)

                raise FetchError(f"CNB API returned {resp.status_code}: {resp.reason}")

            except (requests.RequestException, FetchError) as e:
                if attempt < self._max_retries:
                    delay = self._retry_delay * (2**attempt)
                    logger.warning(
                        "Attempt %d failed: %s. Retrying in %.1fs...",
                        attempt + 1,
                        e,
                        delay,
                    )
                    time.sleep(delay)
                elif isinstance(e, FetchError):
                    raise
                else:
                    raise FetchError(f"Failed to fetch CNB rates: {e}") from e

        # max_retries < 0 never enters the loop
        raise FetchError("No fetch attempt was made")


class MockCnbClient(RateFeedClient):
    """Mock client returning a fixed feed for testing and offline runs."""

    MOCK_FEED = (
        "03 Jan 2000 #1\n"
        "Country|Currency|Amount|Code|Rate\n"
        "Australia|dollar|1|AUD|23.282\n"
        "EMU|euro|1|EUR|36.135\n"
        "Japan|yen|100|JPY|35.213\n"
        "United Kingdom|pound|1|GBP|58.245\n"
        "USA|dollar|1|USD|35.979\n"
    )

    def __init__(self, text: str | None = None):
        self._text = self.MOCK_FEED if text is None else text

    def fetch(self, date: date | None = None) -> str:
        return self._text
