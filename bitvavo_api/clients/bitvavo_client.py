"""Bitvavo REST API client using CCXT."""

import logging
from collections.abc import Callable
from typing import Any, TypeVar
from uuid import UUID

import ccxt.async_support as ccxt

from bitvavo_api.config import Settings
from bitvavo_api.errors import BitvavoAuthenticationError, BitvavoDecodeError, translate_error
from bitvavo_api.types import (
    OHLCV,
    Account,
    Asset,
    Balance,
    CandleInterval,
    Deposit,
    DepositInfo,
    Fees,
    Market,
    Order,
    OrderBook,
    OrderResponse,
    Ticker24h,
    TickerBook,
    TickerPrice,
    Trade,
    WithdrawalOrderResponse,
    Withdrawal,
    WithdrawOrder,
)
from bitvavo_api.utils import transport_retrying

logger = logging.getLogger(__name__)

T = TypeVar('T')

MAX_TRADES_LIMIT = 1000
MAX_CANDLES_LIMIT = 1440
MAX_HISTORY_LIMIT = 1000


def _check_limit(name: str, value: int | None, maximum: int) -> None:
    if value is not None and not 1 <= value <= maximum:
        raise ValueError(f"{name} must be between 1 and {maximum}, got {value}")


class BitvavoClient:
    """Async Bitvavo API client using CCXT.

    CCXT's Bitvavo exchange is used as the transport only: it signs private
    requests, throttles to the exchange's rate limit and performs the HTTP
    call. Responses are decoded into the types in ``bitvavo_api.types``.

    Idempotent GET requests are retried on transport failures; order
    placement, cancellation and withdrawals are sent exactly once.

    Usage:
        async with BitvavoClient() as client:
            server_time = await client.time()

            book = await client.order_book("BTC-EUR", depth=10)
            print(f"Best bid: {book.bids[0].price}")

            # Requires BITVAVO_API_KEY / BITVAVO_API_SECRET
            balances = await client.balance()
    """

    def __init__(self, settings: Settings | None = None) -> None:
        """Initialize Bitvavo client.

        Args:
            settings: Client settings; loaded from the environment if omitted
        """
        self._settings = settings or Settings()
        self._exchange: ccxt.bitvavo | None = None
        self._initialized = False

    async def initialize(self) -> None:
        """Create the CCXT exchange session. Does not perform network I/O."""
        if self._initialized:
            return

        config: dict[str, Any] = {
            'enableRateLimit': True,
            'timeout': self._settings.request_timeout_ms,
            'options': {
                # ccxt signs with recvWindow as the BITVAVO-ACCESS-WINDOW header
                'recvWindow': str(self._settings.access_window),
            },
        }
        if self._settings.has_credentials:
            config['apiKey'] = self._settings.bitvavo_api_key
            config['secret'] = self._settings.bitvavo_api_secret

        self._exchange = ccxt.bitvavo(config)
        base_url = self._settings.bitvavo_api_url.rstrip("/")
        self._exchange.urls['api'] = {'public': base_url, 'private': base_url}

        self._initialized = True
        logger.debug(f"Bitvavo client initialized for {base_url}")

    async def close(self) -> None:
        """Close exchange connection."""
        if self._exchange is not None:
            await self._exchange.close()
            self._exchange = None
            self._initialized = False

    def _ensure_initialized(self) -> ccxt.bitvavo:
        if not self._initialized or self._exchange is None:
            raise RuntimeError("Client not initialized. Call initialize() first.")
        return self._exchange

    async def _request(
        self,
        path: str,
        params: dict[str, Any] | None = None,
        *,
        api: str = 'public',
        method: str = 'GET',
    ) -> Any:
        """Send a request and return the decoded JSON body.

        Args:
            path: Endpoint path relative to /v2, may contain ``{market}``
            params: Query (GET/DELETE) or body (POST) parameters; None values are dropped
            api: 'public' or 'private' (signed)
            method: HTTP method

        Raises:
            BitvavoAuthenticationError: Private endpoint without credentials
            BitvavoError: Any transport or exchange failure
        """
        exchange = self._ensure_initialized()

        if api == 'private' and not self._settings.has_credentials:
            raise BitvavoAuthenticationError(
                None, "API key and secret are required for authenticated endpoints"
            )

        params = {k: v for k, v in (params or {}).items() if v is not None}
        if method == 'GET':
            retrying = transport_retrying(
                max_attempts=self._settings.max_retries,
                base_delay=self._settings.retry_base_delay,
            )
            return await retrying(self._send, exchange, path, api, method, params)
        return await self._send(exchange, path, api, method, params)

    async def _send(
        self,
        exchange: ccxt.bitvavo,
        path: str,
        api: str,
        method: str,
        params: dict[str, Any],
    ) -> Any:
        logger.debug(f"{method} /{path} params={params}")
        try:
            return await exchange.request(path, api, method, params)
        except ccxt.BaseError as e:
            error = translate_error(e)
            logger.warning(f"{method} /{path} failed: {error}")
            raise error from e

    @staticmethod
    def _decode(parser: Callable[[Any], T], data: Any) -> T:
        try:
            return parser(data)
        except (KeyError, IndexError, TypeError, ValueError, ArithmeticError) as e:
            raise BitvavoDecodeError(f"Unexpected response: {e!r}") from e

    @classmethod
    def _decode_list(cls, parser: Callable[[Any], T], data: Any) -> list[T]:
        if not isinstance(data, list):
            raise BitvavoDecodeError(f"Expected a list, got {type(data).__name__}")
        return [cls._decode(parser, item) for item in data]

    # Market data

    async def time(self) -> int:
        """Get the exchange server time in Unix milliseconds."""
        data = await self._request('time')
        return self._decode(lambda d: int(d['time']), data)

    async def assets(self) -> list[Asset]:
        """Get all the assets."""
        data = await self._request('assets')
        return self._decode_list(Asset.from_json, data)

    async def asset(self, symbol: str) -> Asset:
        """Get the info of a particular asset, e.g. ``"BTC"``."""
        data = await self._request('assets', {'symbol': symbol})
        return self._decode(Asset.from_json, data)

    async def markets(self) -> list[Market]:
        """Get all the markets."""
        data = await self._request('markets')
        return self._decode_list(Market.from_json, data)

    async def market(self, pair: str) -> Market:
        """Get market information for a specific market, e.g. ``"BTC-EUR"``."""
        data = await self._request('markets', {'market': pair})
        return self._decode(Market.from_json, data)

    async def order_book(self, market: str, depth: int | None = None) -> OrderBook:
        """Get the order book for a particular market.

        Args:
            market: Market pair (e.g., "BTC-EUR")
            depth: Number of price levels per side (optional)
        """
        if depth is not None and depth < 1:
            raise ValueError(f"depth must be positive, got {depth}")

        data = await self._request('{market}/book', {'market': market, 'depth': depth})
        return self._decode(OrderBook.from_json, data)

    async def trades(
        self,
        market: str,
        limit: int | None = None,
        start: int | None = None,
        end: int | None = None,
        trade_id_from: str | None = None,
        trade_id_to: str | None = None,
    ) -> list[Trade]:
        """Get the public trades for a particular market.

        Args:
            market: Market pair (e.g., "BTC-EUR")
            limit: Maximum number of trades, 1..1000 (optional)
            start: Start timestamp in milliseconds (optional)
            end: End timestamp in milliseconds (optional)
            trade_id_from: Return trades after this trade id (optional)
            trade_id_to: Return trades before this trade id (optional)
        """
        _check_limit("limit", limit, MAX_TRADES_LIMIT)

        data = await self._request('{market}/trades', {
            'market': market,
            'limit': limit,
            'start': start,
            'end': end,
            'tradeIdFrom': trade_id_from,
            'tradeIdTo': trade_id_to,
        })
        return self._decode_list(Trade.from_json, data)

    async def candles(
        self,
        market: str,
        interval: CandleInterval,
        limit: int | None = None,
        start: int | None = None,
        end: int | None = None,
    ) -> list[OHLCV]:
        """Get candles for a particular market, newest first.

        Args:
            market: Market pair (e.g., "BTC-EUR")
            interval: Candle interval
            limit: Maximum number of candles, 1..1440 (optional)
            start: Start timestamp in milliseconds (optional)
            end: End timestamp in milliseconds (optional)
        """
        _check_limit("limit", limit, MAX_CANDLES_LIMIT)

        data = await self._request('{market}/candles', {
            'market': market,
            'interval': CandleInterval(interval).value,
            'limit': limit,
            'start': start,
            'end': end,
        })
        return self._decode_list(OHLCV.from_json, data)

    async def ticker_prices(self) -> list[TickerPrice]:
        """Get the last price for all markets."""
        data = await self._request('ticker/price')
        return self._decode_list(TickerPrice.from_json, data)

    async def ticker_price(self, market: str) -> TickerPrice:
        """Get the last price for a particular market."""
        data = await self._request('ticker/price', {'market': market})
        return self._decode(TickerPrice.from_json, data)

    async def ticker_books(self) -> list[TickerBook]:
        """Get the best bid and ask for all markets."""
        data = await self._request('ticker/book')
        return self._decode_list(TickerBook.from_json, data)

    async def ticker_book(self, market: str) -> TickerBook:
        """Get the best bid and ask for a particular market."""
        data = await self._request('ticker/book', {'market': market})
        return self._decode(TickerBook.from_json, data)

    async def tickers_24h(self) -> list[Ticker24h]:
        """Get 24h high, low, open, last and volume for all markets."""
        data = await self._request('ticker/24h')
        return self._decode_list(Ticker24h.from_json, data)

    async def ticker_24h(self, market: str) -> Ticker24h:
        """Get 24h high, low, open, last and volume for a particular market."""
        data = await self._request('ticker/24h', {'market': market})
        return self._decode(Ticker24h.from_json, data)

    # Account

    async def account(self) -> Account:
        """Get the fee tier in use for the account."""
        data = await self._request('account', api='private')
        return self._decode(Account.from_json, data)

    async def balance(self, symbol: str | None = None) -> list[Balance]:
        """Get the account balance, optionally for a single asset."""
        data = await self._request('balance', {'symbol': symbol}, api='private')
        return self._decode_list(Balance.from_json, data)

    async def fees(self, market: str | None = None) -> Fees:
        """Get the fees charged on the account, optionally for a market."""
        data = await self._request('account/fees', {'market': market}, api='private')
        return self._decode(Fees.from_json, data)

    async def deposit_info(self, symbol: str) -> DepositInfo:
        """Get the deposit address for an asset."""
        data = await self._request('deposit', {'symbol': symbol}, api='private')
        return self._decode(DepositInfo.from_json, data)

    async def deposit_history(
        self,
        symbol: str | None = None,
        limit: int | None = None,
        start: int | None = None,
        end: int | None = None,
    ) -> list[Deposit]:
        """Get past deposits, newest first."""
        _check_limit("limit", limit, MAX_HISTORY_LIMIT)

        data = await self._request('depositHistory', {
            'symbol': symbol,
            'limit': limit,
            'start': start,
            'end': end,
        }, api='private')
        return self._decode_list(Deposit.from_json, data)

    async def withdrawal_history(
        self,
        symbol: str | None = None,
        limit: int | None = None,
        start: int | None = None,
        end: int | None = None,
    ) -> list[Withdrawal]:
        """Get past withdrawals, newest first."""
        _check_limit("limit", limit, MAX_HISTORY_LIMIT)

        data = await self._request('withdrawalHistory', {
            'symbol': symbol,
            'limit': limit,
            'start': start,
            'end': end,
        }, api='private')
        return self._decode_list(Withdrawal.from_json, data)

    async def withdraw(self, order: WithdrawOrder) -> WithdrawalOrderResponse:
        """Request a withdrawal. Sent once, never retried."""
        data = await self._request('withdrawal', order.to_params(), api='private', method='POST')
        return self._decode(WithdrawalOrderResponse.from_json, data)

    # Trading

    async def place_order(self, order: Order) -> OrderResponse:
        """Place a new order. Sent once, never retried."""
        data = await self._request('order', order.to_params(), api='private', method='POST')
        return self._decode(OrderResponse.from_json, data)

    async def cancel_order(self, market: str, order_id: UUID | str) -> UUID:
        """Cancel an open order and return the id of the cancelled order."""
        data = await self._request(
            'order',
            {'market': market, 'orderId': str(order_id)},
            api='private',
            method='DELETE',
        )
        return self._decode(lambda d: UUID(str(d['orderId'])), data)

    async def __aenter__(self) -> "BitvavoClient":
        """Async context manager entry."""
        await self.initialize()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Async context manager exit."""
        await self.close()
