"""Request and response types for the Bitvavo REST API.

Amounts and prices are sent by the exchange as strings and exposed here as
``Decimal``. Timestamps are Unix milliseconds.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Any
from uuid import UUID


def _decimal(value: Any) -> Decimal:
    return Decimal(str(value))


def _optional_decimal(value: Any) -> Decimal | None:
    if value is None or value == "":
        return None
    return Decimal(str(value))


def _optional_int(value: Any) -> int | None:
    return None if value is None else int(value)


def _optional_uuid(value: Any) -> UUID | None:
    return None if value in (None, "") else UUID(str(value))


def _compact(params: dict[str, Any]) -> dict[str, Any]:
    """Drop unset values and stringify decimals for the JSON body."""
    result = {}
    for key, value in params.items():
        if value is None:
            continue
        if isinstance(value, Enum):
            value = value.value
        elif isinstance(value, (Decimal, UUID)):
            value = str(value)
        result[key] = value
    return result


class CandleInterval(str, Enum):
    """Time interval between each candlestick."""
    ONE_MINUTE = "1m"
    FIVE_MINUTES = "5m"
    FIFTEEN_MINUTES = "15m"
    THIRTY_MINUTES = "30m"
    ONE_HOUR = "1h"
    TWO_HOURS = "2h"
    FOUR_HOURS = "4h"
    SIX_HOURS = "6h"
    EIGHT_HOURS = "8h"
    TWELVE_HOURS = "12h"
    ONE_DAY = "1d"


class AssetStatus(str, Enum):
    """Deposit or withdrawal status of an asset."""
    OK = "OK"
    MAINTENANCE = "MAINTENANCE"
    DELISTED = "DELISTED"


class MarketStatus(str, Enum):
    TRADING = "trading"
    HALTED = "halted"
    AUCTION = "auction"


class TradeSide(str, Enum):
    BUY = "buy"
    SELL = "sell"


class DepositStatus(str, Enum):
    COMPLETED = "completed"
    CANCELED = "canceled"


class WithdrawalStatus(str, Enum):
    AWAITING_PROCESSING = "awaiting_processing"
    AWAITING_EMAIL_CONFIRMATION = "awaiting_email_confirmation"
    AWAITING_BITVAVO_INSPECTION = "awaiting_bitvavo_inspection"
    APPROVED = "approved"
    SENDING = "sending"
    IN_MEMPOOL = "in_mempool"
    PROCESSED = "processed"
    COMPLETED = "completed"
    CANCELED = "canceled"


class OrderType(str, Enum):
    MARKET = "market"
    LIMIT = "limit"
    STOP_LOSS = "stopLoss"
    STOP_LOSS_LIMIT = "stopLossLimit"
    TAKE_PROFIT = "takeProfit"
    TAKE_PROFIT_LIMIT = "takeProfitLimit"


class TriggerType(str, Enum):
    """The type of trigger that will cause an order to be filled."""
    PRICE = "price"


class TriggerReference(str, Enum):
    """The price type that triggers an order to be filled."""
    LAST_TRADE = "lastTrade"
    BEST_BID = "bestBid"
    BEST_ASK = "bestAsk"
    MID_PRICE = "midPrice"


class TimeInForce(str, Enum):
    """How long an order should remain active."""
    GOOD_TILL_CANCELLED = "GTC"
    FILL_OR_KILL = "FOK"
    IMMEDIATE_OR_CANCEL = "IOC"


class SelfTradePrevention(str, Enum):
    DECREMENT_AND_CANCEL = "decrementAndCancel"
    CANCEL_BOTH = "cancelBoth"
    CANCEL_NEWEST = "cancelNewest"
    CANCEL_OLDEST = "cancelOldest"


@dataclass
class Asset:
    """Asset supported by Bitvavo."""
    symbol: str
    name: str
    decimals: int
    deposit_fee: Decimal
    deposit_confirmations: int
    deposit_status: AssetStatus
    withdrawal_fee: Decimal
    withdrawal_min_amount: Decimal
    withdrawal_status: AssetStatus
    networks: list[str]
    message: str | None = None

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> "Asset":
        return cls(
            symbol=data["symbol"],
            name=data["name"],
            decimals=int(data["decimals"]),
            deposit_fee=_decimal(data["depositFee"]),
            deposit_confirmations=int(data["depositConfirmations"]),
            deposit_status=AssetStatus(data["depositStatus"]),
            withdrawal_fee=_decimal(data["withdrawalFee"]),
            withdrawal_min_amount=_decimal(data["withdrawalMinAmount"]),
            withdrawal_status=AssetStatus(data["withdrawalStatus"]),
            networks=list(data["networks"]),
            message=data.get("message") or None,
        )


@dataclass
class Market:
    """Information about a market on Bitvavo."""
    pair: str
    status: MarketStatus
    base: str
    quote: str
    price_precision: int
    min_order_in_base_asset: Decimal
    min_order_in_quote_asset: Decimal
    max_order_in_base_asset: Decimal
    max_order_in_quote_asset: Decimal
    order_types: list[str]

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> "Market":
        return cls(
            pair=data["market"],
            status=MarketStatus(data["status"]),
            base=data["base"],
            quote=data["quote"],
            price_precision=int(data["pricePrecision"]),
            min_order_in_base_asset=_decimal(data["minOrderInBaseAsset"]),
            min_order_in_quote_asset=_decimal(data["minOrderInQuoteAsset"]),
            max_order_in_base_asset=_decimal(data["maxOrderInBaseAsset"]),
            max_order_in_quote_asset=_decimal(data["maxOrderInQuoteAsset"]),
            order_types=list(data["orderTypes"]),
        )


@dataclass
class Quote:
    """A price level in the order book, sent as ``[price, amount]``."""
    price: Decimal
    amount: Decimal

    @classmethod
    def from_json(cls, data: list[Any]) -> "Quote":
        price, amount = data[:2]
        return cls(price=_decimal(price), amount=_decimal(amount))


@dataclass
class OrderBook:
    """Order book for a particular market."""
    market: str
    nonce: int
    bids: list[Quote] = field(default_factory=list)
    asks: list[Quote] = field(default_factory=list)

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> "OrderBook":
        return cls(
            market=data["market"],
            nonce=int(data["nonce"]),
            bids=[Quote.from_json(q) for q in data["bids"]],
            asks=[Quote.from_json(q) for q in data["asks"]],
        )


@dataclass
class Trade:
    """A trade performed on the exchange for a particular market."""
    id: str
    timestamp: int
    amount: Decimal
    price: Decimal
    side: TradeSide

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> "Trade":
        return cls(
            id=data["id"],
            timestamp=int(data["timestamp"]),
            amount=_decimal(data["amount"]),
            price=_decimal(data["price"]),
            side=TradeSide(data["side"]),
        )


@dataclass
class OHLCV:
    """A candlestick, sent as ``[time, open, high, low, close, volume]``."""
    time: int  # Unix timestamp in milliseconds
    open: Decimal
    high: Decimal
    low: Decimal
    close: Decimal
    volume: Decimal

    @classmethod
    def from_json(cls, data: list[Any]) -> "OHLCV":
        time, open_, high, low, close, volume = data[:6]
        return cls(
            time=int(time),
            open=_decimal(open_),
            high=_decimal(high),
            low=_decimal(low),
            close=_decimal(close),
            volume=_decimal(volume),
        )


@dataclass
class TickerPrice:
    """Last traded price for a market."""
    market: str
    price: Decimal | None = None

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> "TickerPrice":
        return cls(market=data["market"], price=_optional_decimal(data.get("price")))


@dataclass
class TickerBook:
    """Highest buy and lowest sell prices currently available for a market."""
    market: str | None = None
    bid: Decimal | None = None
    bid_size: Decimal | None = None
    ask: Decimal | None = None
    ask_size: Decimal | None = None

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> "TickerBook":
        return cls(
            market=data.get("market"),
            bid=_optional_decimal(data.get("bid")),
            bid_size=_optional_decimal(data.get("bidSize")),
            ask=_optional_decimal(data.get("ask")),
            ask_size=_optional_decimal(data.get("askSize")),
        )


@dataclass
class Ticker24h:
    """High, low, open, last and volume for a market over the previous 24h."""
    market: str
    start_timestamp: int | None = None
    timestamp: int | None = None
    open: Decimal | None = None
    open_timestamp: int | None = None
    high: Decimal | None = None
    low: Decimal | None = None
    last: Decimal | None = None
    close_timestamp: int | None = None
    bid: Decimal | None = None
    bid_size: Decimal | None = None
    ask: Decimal | None = None
    ask_size: Decimal | None = None
    volume: Decimal | None = None
    volume_quote: Decimal | None = None

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> "Ticker24h":
        return cls(
            market=data["market"],
            start_timestamp=_optional_int(data.get("startTimestamp")),
            timestamp=_optional_int(data.get("timestamp")),
            open=_optional_decimal(data.get("open")),
            open_timestamp=_optional_int(data.get("openTimestamp")),
            high=_optional_decimal(data.get("high")),
            low=_optional_decimal(data.get("low")),
            last=_optional_decimal(data.get("last")),
            close_timestamp=_optional_int(data.get("closeTimestamp")),
            bid=_optional_decimal(data.get("bid")),
            bid_size=_optional_decimal(data.get("bidSize")),
            ask=_optional_decimal(data.get("ask")),
            ask_size=_optional_decimal(data.get("askSize")),
            volume=_optional_decimal(data.get("volume")),
            volume_quote=_optional_decimal(data.get("volumeQuote")),
        )


@dataclass
class AccountFees:
    """The fees in use for an account."""
    taker: Decimal
    maker: Decimal
    volume: Decimal

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> "AccountFees":
        return cls(
            taker=_decimal(data["taker"]),
            maker=_decimal(data["maker"]),
            volume=_decimal(data["volume"]),
        )


@dataclass
class Account:
    fees: AccountFees

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> "Account":
        return cls(fees=AccountFees.from_json(data["fees"]))


@dataclass
class Balance:
    """The balance of an account in a particular asset."""
    symbol: str
    available: Decimal
    in_order: Decimal

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> "Balance":
        return cls(
            symbol=data["symbol"],
            available=_decimal(data["available"]),
            in_order=_decimal(data["inOrder"]),
        )


@dataclass
class Fees:
    """Fees charged for a market on an account."""
    tier: int
    volume: Decimal
    taker: Decimal
    maker: Decimal

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> "Fees":
        return cls(
            tier=int(data["tier"]),
            volume=_decimal(data["volume"]),
            taker=_decimal(data["taker"]),
            maker=_decimal(data["maker"]),
        )


@dataclass
class DepositInfo:
    address: str
    payment_id: str | None = None

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> "DepositInfo":
        return cls(address=data["address"], payment_id=data.get("paymentId") or None)


@dataclass
class Deposit:
    timestamp: int
    symbol: str
    amount: Decimal
    fee: Decimal
    status: DepositStatus
    tx_id: str | None = None
    address: str | None = None
    payment_id: str | None = None

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> "Deposit":
        return cls(
            timestamp=int(data["timestamp"]),
            symbol=data["symbol"],
            amount=_decimal(data["amount"]),
            fee=_decimal(data["fee"]),
            status=DepositStatus(data["status"]),
            tx_id=data.get("txId"),
            address=data.get("address"),
            payment_id=data.get("paymentId"),
        )


@dataclass
class Withdrawal:
    """Information about a withdrawal."""
    timestamp: int
    symbol: str
    amount: Decimal
    fee: Decimal
    status: WithdrawalStatus
    address: str | None = None
    payment_id: str | None = None
    tx_id: str | None = None

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> "Withdrawal":
        return cls(
            timestamp=int(data["timestamp"]),
            symbol=data["symbol"],
            amount=_decimal(data["amount"]),
            fee=_decimal(data["fee"]),
            status=WithdrawalStatus(data["status"]),
            address=data.get("address"),
            payment_id=data.get("paymentId"),
            tx_id=data.get("txId"),
        )


@dataclass
class WithdrawOrder:
    """Request body for ``POST /withdrawal``."""
    symbol: str
    amount: Decimal
    address: str
    payment_id: str | None = None
    internal: bool = False
    add_withdrawal_fee: bool = False

    def to_params(self) -> dict[str, Any]:
        return _compact({
            "symbol": self.symbol,
            "amount": self.amount,
            "address": self.address,
            "paymentId": self.payment_id,
            "internal": self.internal,
            "addWithdrawalFee": self.add_withdrawal_fee,
        })


@dataclass
class WithdrawalOrderResponse:
    success: bool
    symbol: str
    amount: Decimal

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> "WithdrawalOrderResponse":
        return cls(
            success=bool(data["success"]),
            symbol=data["symbol"],
            amount=_decimal(data["amount"]),
        )


@dataclass
class Order:
    """Request body for ``POST /order``.

    Market orders take either ``amount`` or ``amount_quote``; limit orders
    take ``amount`` and ``price``. Stop-loss and take-profit orders also need
    the trigger fields.
    """
    market: str
    side: TradeSide
    order_type: OrderType
    client_order_id: UUID | None = None
    amount: Decimal | None = None
    amount_quote: Decimal | None = None
    price: Decimal | None = None
    trigger_amount: Decimal | None = None
    trigger_type: TriggerType | None = None
    trigger_reference: TriggerReference | None = None
    time_in_force: TimeInForce | None = None
    post_only: bool | None = None
    self_trade_prevention: SelfTradePrevention | None = None
    disable_market_protection: bool = False
    response_required: bool = True

    def to_params(self) -> dict[str, Any]:
        return _compact({
            "market": self.market,
            "side": self.side,
            "orderType": self.order_type,
            "clientOrderId": self.client_order_id,
            "amount": self.amount,
            "amountQuote": self.amount_quote,
            "price": self.price,
            "triggerAmount": self.trigger_amount,
            "triggerType": self.trigger_type,
            "triggerReference": self.trigger_reference,
            "timeInForce": self.time_in_force,
            "postOnly": self.post_only,
            "selfTradePrevention": self.self_trade_prevention,
            "disableMarketProtection": self.disable_market_protection,
            "responseRequired": self.response_required,
        })


@dataclass
class OrderResponse:
    market: str
    order_id: UUID
    created: int
    updated: int
    client_order_id: UUID | None = None

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> "OrderResponse":
        return cls(
            market=data["market"],
            order_id=UUID(str(data["orderId"])),
            created=int(data["created"]),
            updated=int(data["updated"]),
            client_order_id=_optional_uuid(data.get("clientOrderId")),
        )
