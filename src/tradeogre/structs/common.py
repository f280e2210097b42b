"""
Domain records returned by the TradeOgre clients.

All structures are frozen msgspec.Structs. Prices, quantities and balances
are kept as the decimal strings the server sends; no float conversion is
done anywhere in this package. Unknown JSON fields are ignored on decode.

Note: ``success`` is a string on OrderBook (the server sends ``"true"``)
and a bool on every other record. This mirrors the wire format.
"""

from typing import Dict, Optional

import msgspec
from msgspec import Struct

from .enums import OrderDirection


# Public market data

class MarketSummary(Struct, frozen=True):
    """One market entry of the markets listing."""
    initial_price: str = msgspec.field(name="initialprice")
    price: str
    high: str
    low: str
    volume: str
    bid: str
    ask: str


class OrderBook(Struct, frozen=True):
    """Order book ladders (price -> quantity) in server order."""
    success: str
    buy: Dict[str, str]
    sell: Dict[str, str]


class Ticker(Struct, frozen=True):
    """24h ticker; initial_price is the price 24 hours ago."""
    success: bool
    initial_price: str = msgspec.field(name="initialprice")
    price: str
    high: str
    low: str
    volume: str
    bid: str
    ask: str


class TradeRecord(Struct, frozen=True):
    timestamp: int  # unix seconds, UTC
    direction: OrderDirection
    price: str
    quantity: str


# Private account data
# Every field besides ``success`` has a default so that
# {"success": false, "error": "..."} decodes into a normal result.

class SubmitOrderResult(Struct, frozen=True):
    """
    Result of a buy/sell submission.

    An empty uuid on success means the order was filled immediately and
    nothing was placed on the book.
    """
    success: bool
    uuid: str = ""
    buy_balance_available: str = msgspec.field(default="", name="bnewbalavail")
    sell_balance_available: str = msgspec.field(default="", name="snewbalavail")
    error: Optional[str] = None


class CancelResult(Struct, frozen=True):
    success: bool
    error: Optional[str] = None


class OpenOrder(Struct, frozen=True):
    """Active order on the account."""
    uuid: str
    timestamp: int
    direction: OrderDirection
    price: str
    quantity: str
    market: str


class AssetBalance(Struct, frozen=True):
    """Balance of one currency; available is what can be used in orders."""
    success: bool
    balance: str = ""
    available: str = ""
    error: Optional[str] = None


class BalanceTable(Struct, frozen=True):
    success: bool
    balances: Dict[str, str] = {}
    error: Optional[str] = None
