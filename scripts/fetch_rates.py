"""CLI entry point for fetching CNB exchange rates as JSON.

Usage:
    python -m scripts.fetch_rates [--date 2024-01-15] [--mock | --input daily.txt] [--indent 2]
"""

import argparse
import logging
import sys
from datetime import date
from pathlib import Path

from cnbrates import ExchangeRateService, MockCnbClient, create_client, load_settings
from cnbrates.errors import DataNotFoundError, DataParsingError, FetchError

logger = logging.getLogger(__name__)

# 2 is taken by argparse for usage errors.
EXIT_CODES: dict[type[Exception], int] = {
    DataParsingError: 3,
    FetchError: 4,
    ValueError: 5,
    DataNotFoundError: 6,
}


def _parse_date(value: str) -> date:
    try:
        return date.fromisoformat(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"invalid date {value!r}, expected YYYY-MM-DD") from e


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Fetch CNB exchange rates and print them as JSON")
    parser.add_argument("--date", type=_parse_date, help="Date in YYYY-MM-DD format (default: latest)")
    source = parser.add_mutually_exclusive_group()
    source.add_argument("--mock", action="store_true", help="Use mock CNB client (for testing)")
    source.add_argument("--input", type=Path, help="Parse a saved feed file instead of fetching")
    parser.add_argument("--indent", type=int, default=None, help="JSON indentation")
    parser.add_argument("--log-level", default=None, help="Logging level (default: LOG_LEVEL or INFO)")
    args = parser.parse_args(argv)

    try:
        settings = load_settings()
    except ValueError as e:
        parser.error(str(e))

    logging.basicConfig(
        level=(args.log_level or settings.log_level).upper(),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if args.input is not None:
        try:
            text = args.input.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            parser.error(f"cannot read {args.input}: {e}")
        client = MockCnbClient(text)
    else:
        client = create_client(settings, mock=args.mock)

    try:
        response = ExchangeRateService(client).get_rates(args.date)
    except (DataNotFoundError, DataParsingError, FetchError, ValueError) as e:
        logger.error("%s", e)
        sys.exit(_exit_code_for(e))

    print(response.to_json(indent=args.indent))


def _exit_code_for(exc: Exception) -> int:
    for cls in type(exc).__mro__:
        if cls in EXIT_CODES:
            return EXIT_CODES[cls]
    return 1


if __name__ == "__main__":
    main()
