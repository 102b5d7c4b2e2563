"""CNB exchange rates: feed client, parser and public API."""

from cnbrates.client import CnbClient, MockCnbClient, RateFeedClient
from cnbrates.config import Settings, load_settings
from cnbrates.errors import CnbRatesError, DataNotFoundError, DataParsingError, FetchError
from cnbrates.models import ExchangeRate, ExchangeRateResponse, is_valid_for_display
from cnbrates.parser import parse_feed, parse_feed_report
from cnbrates.service import ExchangeRateService, process_response


def create_client(settings: Settings | None = None, mock: bool = False) -> RateFeedClient:
    """Create a feed client from settings.

    - mock=True: MockCnbClient serving a fixed sample feed
    - otherwise: CnbClient configured from ``settings`` (or the environment)
    """
    if mock:
        return MockCnbClient()
    if settings is None:
        settings = load_settings()
    return CnbClient(
        base_url=settings.base_url,
        endpoint=settings.daily_rates_endpoint,
        timeout=settings.timeout,
        max_retries=settings.max_retries,
        retry_delay=settings.retry_delay,
    )


__all__ = [
    "CnbClient",
    "CnbRatesError",
    "DataNotFoundError",
    "DataParsingError",
    "ExchangeRate",
    "ExchangeRateResponse",
    "ExchangeRateService",
    "FetchError",
    "MockCnbClient",
    "RateFeedClient",
    "Settings",
    "create_client",
    "is_valid_for_display",
    "load_settings",
    "parse_feed",
    "parse_feed_report",
    "process_response",
]
