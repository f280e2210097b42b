from enum import Enum


class OrderDirection(Enum):
    """Order/trade direction. Values are the wire tokens."""
    BUY = "buy"
    SELL = "sell"
