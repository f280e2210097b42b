import msgspec


class TradeOgreTradeResponse(msgspec.Struct):
    """Trade history entry as sent by /history/{market}."""
    date: int
    type: str  # "buy" or "sell"
    price: str
    quantity: str


class TradeOgreOrderResponse(msgspec.Struct):
    """Active order entry as sent by /account/orders."""
    uuid: str
    date: int
    type: str  # "buy" or "sell"
    price: str
    quantity: str
    market: str
