"""Environment-driven settings for the CNB feed client."""

import os
from collections.abc import Mapping
from dataclasses import dataclass

DEFAULT_BASE_URL = "https://www.cnb.cz"
DEFAULT_DAILY_RATES_ENDPOINT = (
    "/en/financial-markets/foreign-exchange-market/"
    "central-bank-exchange-rate-fixing/central-bank-exchange-rate-fixing/daily.txt"
)


@dataclass(frozen=True)
class Settings:
    base_url: str = DEFAULT_BASE_URL
    daily_rates_endpoint: str = DEFAULT_DAILY_RATES_ENDPOINT
    timeout: float = 30.0
    max_retries: int = 3
    retry_delay: float = 1.0
    log_level: str = "INFO"


def _number(env: Mapping[str, str], name: str, default, cast):
    raw = env.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return cast(raw.strip())
    except ValueError as e:
        raise ValueError(f"{name} must be a number, got {raw!r}") from e


def load_settings(env: Mapping[str, str] | None = None) -> Settings:
    """Build Settings from environment variables, falling back to defaults.

    Recognised variables: CNB_BASE_URL, CNB_DAILY_RATES_ENDPOINT,
    CNB_TIMEOUT_SECONDS, CNB_MAX_RETRIES, CNB_RETRY_DELAY_SECONDS, LOG_LEVEL.
    """
    if env is None:
        env = os.environ

    settings = Settings(
        base_url=env.get("CNB_BASE_URL", DEFAULT_BASE_URL).rstrip("/"),
        daily_rates_endpoint=env.get("CNB_DAILY_RATES_ENDPOINT", DEFAULT_DAILY_RATES_ENDPOINT),
        timeout=_number(env, "CNB_TIMEOUT_SECONDS", 30.0, float),
        max_retries=_number(env, "CNB_MAX_RETRIES", 3, int),
        retry_delay=_number(env, "CNB_RETRY_DELAY_SECONDS", 1.0, float),
        log_level=env.get("LOG_LEVEL", "INFO").upper(),
    )

    if settings.timeout <= 0:
        raise ValueError("CNB_TIMEOUT_SECONDS must be positive")
    if settings.max_retries < 0:
        raise ValueError("CNB_MAX_RETRIES must not be negative")
    if settings.retry_delay < 0:
        raise ValueError("CNB_RETRY_DELAY_SECONDS must not be negative")
    return settings
