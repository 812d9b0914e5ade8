"""Module-level functions for the public market data endpoints.

Each call opens a short-lived ``BitvavoClient``, performs one request and
closes it again. Use ``BitvavoClient`` directly to reuse a session across
calls or to reach the authenticated endpoints.

Example:
    import asyncio
    import bitvavo_api as bitvavo

    print(asyncio.run(bitvavo.time()))
"""

from bitvavo_api.clients import BitvavoClient
from bitvavo_api.types import (
    OHLCV,
    Asset,
    CandleInterval,
    Market,
    OrderBook,
    Ticker24h,
    TickerBook,
    TickerPrice,
    Trade,
)


async def time() -> int:
    """Get the current exchange time in Unix milliseconds."""
    async with BitvavoClient() as client:
        return await client.time()


async def assets() -> list[Asset]:
    """Get all the assets listed on the exchange."""
    async with BitvavoClient() as client:
        return await client.assets()


async def asset(symbol: str) -> Asset:
    """Get the info of a particular asset.

    Args:
        symbol: Asset symbol, e.g. ``"BTC"``
    """
    async with BitvavoClient() as client:
        return await client.asset(symbol)


async def markets() -> list[Market]:
    """Get all the markets."""
    async with BitvavoClient() as client:
        return await client.markets()


async def market(pair: str) -> Market:
    """Get market information for a specific pair, e.g. ``"BTC-EUR"``."""
    async with BitvavoClient() as client:
        return await client.market(pair)


async def order_book(market: str, depth: int | None = None) -> OrderBook:
    """Get the bids and asks for a market.

    Args:
        market: Market pair (e.g., "BTC-EUR")
        depth: Number of price levels per side; the full book when omitted

    Raises:
        ValueError: depth is not positive
    """
    async with BitvavoClient() as client:
        return await client.order_book(market, depth)


async def trades(
    market: str,
    limit: int | None = None,
    start: int | None = None,
    end: int | None = None,
    trade_id_from: str | None = None,
    trade_id_to: str | None = None,
) -> list[Trade]:
    """Get the most recent trades for a market.

    Args:
        market: Market pair (e.g., "BTC-EUR")
        limit: Maximum number of trades, 1..1000
        start: Unix timestamp in milliseconds to start from
        end: Unix timestamp in milliseconds to stop at
        trade_id_from: Only trades after this trade id
        trade_id_to: Only trades before this trade id

    Raises:
        ValueError: limit is out of range
    """
    async with BitvavoClient() as client:
        return await client.trades(market, limit, start, end, trade_id_from, trade_id_to)


async def candles(
    market: str,
    interval: CandleInterval,
    limit: int | None = None,
    start: int | None = None,
    end: int | None = None,
) -> list[OHLCV]:
    """Get OHLCV candles for a market, newest first.

    Args:
        market: Market pair (e.g., "BTC-EUR")
        interval: Candle width
        limit: Maximum number of candles, 1..1440
        start: Unix timestamp in milliseconds to start from
        end: Unix timestamp in milliseconds to stop at
    """
    async with BitvavoClient() as client:
        return await client.candles(market, interval, limit, start, end)


async def ticker_prices() -> list[TickerPrice]:
    """Get the last traded price of every market."""
    async with BitvavoClient() as client:
        return await client.ticker_prices()


async def ticker_price(market: str) -> TickerPrice:
    """Get the last traded price of one market."""
    async with BitvavoClient() as client:
        return await client.ticker_price(market)


async def ticker_books() -> list[TickerBook]:
    """Get the best bid and ask of every market."""
    async with BitvavoClient() as client:
        return await client.ticker_books()


async def ticker_book(market: str) -> TickerBook:
    """Get the best bid and ask of one market."""
    async with BitvavoClient() as client:
        return await client.ticker_book(market)


async def tickers_24h() -> list[Ticker24h]:
    """Get 24 hour statistics for every market."""
    async with BitvavoClient() as client:
        return await client.tickers_24h()


async def ticker_24h(market: str) -> Ticker24h:
    """Get 24 hour statistics for one market.

    Volumes are in the base asset; ``volume_quote`` is in the quote asset.
    """
    async with BitvavoClient() as client:
        return await client.ticker_24h(market)
