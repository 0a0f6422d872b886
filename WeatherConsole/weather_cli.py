"""Interactive console for current weather and a short forecast."""
import argparse
import logging
import os
import sys
from typing import List, Optional, Tuple

from dotenv import load_dotenv

from menu import WeatherMenu
from weatherapi_provider import WeatherApiProvider
from weather_service import WeatherService

DEFAULT_DAYS = 3
DEFAULT_TIMEOUT = 10.0


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser("Console weather information system")
    parser.add_argument("--log-file", default=None, help="Also write log records to this file")
    parser.add_argument("--days", type=int, default=DEFAULT_DAYS, help="Forecast days to request")
    parser.add_argument("--timeout", type=float, default=DEFAULT_TIMEOUT, help="HTTP timeout in seconds")
    parser.add_argument("--verbose", action="store_true")
    return parser.parse_args(argv)


def setup_logging(log_file: Optional[str], verbose: bool) -> None:
    log_level = logging.DEBUG if verbose else logging.INFO
    # stdout belongs to the menu; the terminal only gets warnings unless verbose
    console = logging.StreamHandler(sys.stderr)
    console.setLevel(logging.DEBUG if verbose else logging.WARNING)
    handlers = [console]
    if log_file:
        handlers.append(logging.FileHandler(log_file))
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(levelname)s - %(message)s",
        handlers=handlers
    )


def load_config() -> Tuple[str, Optional[str]]:
    load_dotenv()
    api_key = os.getenv("WEATHER_API_KEY")
    base_url = os.getenv("WEATHER_API_URL") or None

    if not api_key:
        raise SystemExit("Missing WEATHER_API_KEY in environment")

    logging.info("Configuration loaded: url=%s", base_url or WeatherApiProvider.BASE_URL)
    return api_key, base_url


def build_weather_service(api_key: str, base_url: Optional[str], args: argparse.Namespace) -> WeatherService:
    if args.days < 1:
        raise SystemExit(f"Invalid --days value: {args.days}")

    provider = WeatherApiProvider(
        api_key=api_key,
        base_url=base_url,
        timeout=args.timeout,
    )
    service = WeatherService(provider=provider, days=args.days)
    logging.info("Weather service ready (days=%s, timeout=%ss)", args.days, args.timeout)
    return service


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    setup_logging(args.log_file, args.verbose)
    api_key, base_url = load_config()
    service = build_weather_service(api_key, base_url, args)

    menu = WeatherMenu(service)
    try:
        menu.run()
    except (KeyboardInterrupt, EOFError):
        print()
        logging.info("Input closed, stopping")


if __name__ == "__main__":
    main()
