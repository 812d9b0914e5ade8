"""Command line entry point.

Usage:
    bitvavo time
    bitvavo book BTC-EUR --depth 5
    bitvavo candles BTC-EUR --interval 1h --limit 24
    bitvavo balance --symbol EUR

Results are printed as JSON. Any client error is reported on stderr and the
process exits with status 1.
"""

import argparse
import asyncio
import dataclasses
import json
import sys
from typing import Any

from pydantic import ValidationError

from bitvavo_api.clients import BitvavoClient
from bitvavo_api.config import Settings
from bitvavo_api.errors import BitvavoError
from bitvavo_api.logger import log_manager
from bitvavo_api.types import CandleInterval


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="bitvavo", description="Query the Bitvavo REST API")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Override LOG_LEVEL",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("time", help="Exchange server time in milliseconds")
    sub.add_parser("assets", help="All assets")

    markets = sub.add_parser("markets", help="All markets, or one market")
    markets.add_argument("market", nargs="?")

    book = sub.add_parser("book", help="Order book for a market")
    book.add_argument("market")
    book.add_argument("--depth", type=int)

    trades = sub.add_parser("trades", help="Public trades for a market")
    trades.add_argument("market")
    trades.add_argument("--limit", type=int)

    candles = sub.add_parser("candles", help="Candles for a market")
    candles.add_argument("market")
    candles.add_argument(
        "--interval",
        default=CandleInterval.ONE_HOUR.value,
        choices=[i.value for i in CandleInterval],
    )
    candles.add_argument("--limit", type=int)

    ticker = sub.add_parser("ticker", help="Last price for all markets, or one market")
    ticker.add_argument("market", nargs="?")

    balance = sub.add_parser("balance", help="Account balance (authenticated)")
    balance.add_argument("--symbol")

    return parser


async def run(client: BitvavoClient, args: argparse.Namespace) -> Any:
    """Dispatch a parsed command to the client."""
    command = args.command

    if command == "time":
        return await client.time()
    if command == "assets":
        return await client.assets()
    if command == "markets":
        if args.market:
            return await client.market(args.market)
        return await client.markets()
    if command == "book":
        return await client.order_book(args.market, args.depth)
    if command == "trades":
        return await client.trades(args.market, limit=args.limit)
    if command == "candles":
        return await client.candles(
            args.market, CandleInterval(args.interval), limit=args.limit
        )
    if command == "ticker":
        if args.market:
            return await client.ticker_price(args.market)
        return await client.ticker_prices()
    if command == "balance":
        return await client.balance(args.symbol)

    raise ValueError(f"Unknown command: {command}")


def to_jsonable(result: Any) -> Any:
    """Convert dataclass results (or lists of them) into plain JSON values."""
    if isinstance(result, list):
        return [to_jsonable(item) for item in result]
    if dataclasses.is_dataclass(result):
        return dataclasses.asdict(result)
    return result


async def main(argv: list[str] | None = None) -> int:
    """Main entry point. Returns the process exit status."""
    args = build_parser().parse_args(argv)

    try:
        settings = Settings(log_level=args.log_level) if args.log_level else Settings()
    except ValidationError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 1

    log_manager.configure(settings)
    logger = log_manager.component("cli")
    logger.debug(f"Running command {args.command!r}")

    try:
        async with BitvavoClient(settings) as client:
            result = await run(client, args)
    except (BitvavoError, ValueError) as e:
        logger.error(f"{args.command} failed: {e}")
        print(f"error: {e}", file=sys.stderr)
        return 1

    print(json.dumps(to_jsonable(result), indent=2, default=str))
    return 0


def cli() -> None:
    """Console script entry point."""
    sys.exit(asyncio.run(main()))


if __name__ == "__main__":
    cli()
