"""Command line front end: ``python -m metaweather search London``."""
from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import fields, is_dataclass
from datetime import date, datetime
from typing import Any, List, Optional, TextIO

from .base import MetaWeatherError
from .client import WeatherClient
from .config import ClientConfig, parse_timeout

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_NOT_FOUND = 2

logger = logging.getLogger(__name__)


def _timeout(value: str) -> float:
    return parse_timeout(value, "--timeout")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="metaweather", description="Query the MetaWeather API")
    parser.add_argument("--base-url", help="Service root (default: $METAWEATHER_BASE_URL or the public API)")
    parser.add_argument(
        "--timeout",
        type=_timeout,
        help="Request timeout in seconds (default: $METAWEATHER_TIMEOUT or 30)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log requests to stderr")

    commands = parser.add_subparsers(dest="command", required=True)

    search = commands.add_parser("search", help="Find locations by name")
    search.add_argument("query")

    coords = commands.add_parser("coords", help="Find locations near a latitude/longitude")
    coords.add_argument("latitude")
    coords.add_argument("longitude")

    weather = commands.add_parser("weather", help="Current weather for a woeid")
    weather.add_argument("woeid")

    history = commands.add_parser("history", help="Weather samples for a woeid on a given day")
    history.add_argument("woeid")
    history.add_argument("day", type=date.fromisoformat, help="Date as YYYY-MM-DD")

    return parser


def _to_json(value: Any) -> Any:
    if is_dataclass(value):
        return {field.name: _to_json(getattr(value, field.name)) for field in fields(value)}
    if isinstance(value, (list, tuple)):
        return [_to_json(item) for item in value]
    if isinstance(value, (date, datetime)):
        return value.isoformat()
    return value


def run(args: argparse.Namespace, client: WeatherClient, stdout: TextIO) -> int:
    status = EXIT_OK
    if args.command == "search":
        result: Any = client.search_by_name(args.query)
    elif args.command == "coords":
        result = client.search_by_coordinates(args.latitude, args.longitude)
    elif args.command == "weather":
        result = client.get_weather(args.woeid)
        if not result.found:
            status = EXIT_NOT_FOUND
    else:
        result = client.get_weather_for_date(args.woeid, args.day)
    stdout.write(json.dumps(_to_json(result), indent=2))
    stdout.write("\n")
    return status


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO if args.verbose else logging.WARNING)
    if args.verbose:
        logging.getLogger("metaweather").setLevel(logging.DEBUG)

    try:
        config = ClientConfig.from_env()
    except MetaWeatherError as exc:
        parser.error(str(exc))

    with WeatherClient(config, base_url=args.base_url, request_timeout=args.timeout) as client:
        try:
            return run(args, client, sys.stdout)
        except MetaWeatherError as exc:
            logger.debug("Command %s failed", args.command, exc_info=exc)
            sys.stderr.write(f"metaweather: {exc}\n")
            return EXIT_ERROR


__all__ = ["build_parser", "main", "run"]
