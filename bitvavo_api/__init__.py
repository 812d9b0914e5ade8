"""Async client for the Bitvavo exchange REST API."""

__version__ = "0.1.0"

from bitvavo_api.clients import BitvavoClient
from bitvavo_api.config import Settings
from bitvavo_api.errors import (
    BitvavoApiError,
    BitvavoAuthenticationError,
    BitvavoDecodeError,
    BitvavoError,
    BitvavoRateLimitError,
    BitvavoTransportError,
)
from bitvavo_api.public import (
    asset,
    assets,
    candles,
    market,
    markets,
    order_book,
    ticker_24h,
    ticker_book,
    ticker_books,
    ticker_price,
    ticker_prices,
    tickers_24h,
    time,
    trades,
)
from bitvavo_api.types import (
    OHLCV,
    Account,
    AccountFees,
    Asset,
    AssetStatus,
    Balance,
    CandleInterval,
    Deposit,
    DepositInfo,
    DepositStatus,
    Fees,
    Market,
    MarketStatus,
    Order,
    OrderBook,
    OrderResponse,
    OrderType,
    Quote,
    SelfTradePrevention,
    Ticker24h,
    TickerBook,
    TickerPrice,
    TimeInForce,
    Trade,
    TradeSide,
    TriggerReference,
    TriggerType,
    Withdrawal,
    WithdrawalOrderResponse,
    WithdrawalStatus,
    WithdrawOrder,
)

__all__ = [
    "BitvavoClient",
    "Settings",
    # Errors
    "BitvavoError",
    "BitvavoTransportError",
    "BitvavoDecodeError",
    "BitvavoApiError",
    "BitvavoAuthenticationError",
    "BitvavoRateLimitError",
    # Public endpoints
    "time",
    "assets",
    "asset",
    "markets",
    "market",
    "order_book",
    "trades",
    "candles",
    "ticker_prices",
    "ticker_price",
    "ticker_books",
    "ticker_book",
    "tickers_24h",
    "ticker_24h",
    # Enums
    "CandleInterval",
    "AssetStatus",
    "MarketStatus",
    "TradeSide",
    "DepositStatus",
    "WithdrawalStatus",
    "OrderType",
    "TriggerType",
    "TriggerReference",
    "TimeInForce",
    "SelfTradePrevention",
    # Responses and request bodies
    "Asset",
    "Market",
    "Quote",
    "OrderBook",
    "Trade",
    "OHLCV",
    "TickerPrice",
    "TickerBook",
    "Ticker24h",
    "AccountFees",
    "Account",
    "Balance",
    "Fees",
    "DepositInfo",
    "Deposit",
    "Withdrawal",
    "WithdrawOrder",
    "WithdrawalOrderResponse",
    "Order",
    "OrderResponse",
]
