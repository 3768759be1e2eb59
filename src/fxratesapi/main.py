"""
fxratesapi Command Line Entry Point

    fxratesapi url --base usd --symbols EUR,GBP
    fxratesapi fetch --at 2022-11-12 --symbols EUR
    fxratesapi avg --from 2018-06-01 --to 2018-06-21 --decimal-places 4
"""

import argparse
import asyncio
import json
import logging
import sys
from decimal import Decimal
from typing import Any

from fxratesapi import __version__
from fxratesapi.client import ExchangeRates, ExchangeRatesError
from fxratesapi.config import get_settings

logger = logging.getLogger(__name__)


def _json_default(value: Any) -> Any:
    if isinstance(value, Decimal):
        return str(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fxratesapi",
        description="Query the FX Rates API"
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--api-key", type=str, default=None, help="API key (default: FX_RATES_API_KEY)")
    common.add_argument("--base", "-b", type=str, help="Base currency, e.g. USD")
    common.add_argument("--symbols", "-s", type=str, help="Comma separated currencies, e.g. EUR,GBP")
    common.add_argument("--at", type=str, help="Historical date")
    common.add_argument("--from", dest="start", type=str, help="Timeseries start date")
    common.add_argument("--to", dest="end", type=str, help="Timeseries end date")
    common.add_argument("--amount", type=str, help="Amount to convert")
    common.add_argument("--places", type=int, help="Decimal places returned by the service")
    common.add_argument("--format", type=str, help="Output format hint")
    common.add_argument("--accuracy", type=str, help="Timeseries accuracy")
    common.add_argument("--resolution", type=str, help="Latest rates resolution")

    subparsers = parser.add_subparsers(dest="command", required=True)
    subparsers.add_parser("url", parents=[common], help="Print the request URL")
    subparsers.add_parser("fetch", parents=[common], help="Fetch rates")
    avg_parser = subparsers.add_parser("avg", parents=[common], help="Fetch and average rates")
    avg_parser.add_argument("--decimal-places", "-d", type=int, default=None, help="Round averages")

    return parser


def build_request(args: argparse.Namespace) -> ExchangeRates:
    """Apply parsed options to a fresh ExchangeRates."""
    request = ExchangeRates(args.api_key)

    if args.at:
        request = request.at(args.at)
    if args.start:
        request = request.from_(args.start)
    if args.end:
        request = request.to(args.end)
    if args.base:
        request = request.base(args.base)
    if args.symbols:
        request = request.symbols([s.strip() for s in args.symbols.split(",") if s.strip()])
    if args.amount is not None:
        request = request.amount(args.amount)
    if args.places is not None:
        request = request.places(args.places)
    if args.format:
        request = request.format(args.format)
    if args.accuracy:
        request = request.accuracy(args.accuracy)
    if args.resolution:
        request = request.resolution(args.resolution)

    return request


async def run(args: argparse.Namespace) -> Any:
    request = build_request(args)

    if args.command == "url":
        return request.url()
    if args.command == "fetch":
        return await request.fetch()
    return await request.average(args.decimal_places)


def main(argv: list[str] | None = None) -> int:
    settings = get_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)]
    )

    args = build_parser().parse_args(argv)

    try:
        result = asyncio.run(run(args))
    except ExchangeRatesError as e:
        logger.debug(f"{args.command} failed", exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return 1

    if isinstance(result, (str, Decimal)):
        print(result)
    else:
        print(json.dumps(result, indent=2, default=_json_default))
    return 0


if __name__ == "__main__":
    sys.exit(main())
