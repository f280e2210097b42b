from .enums import OrderDirection
from .codec import EnumCodec
from .common import (
    MarketSummary, OrderBook, Ticker, TradeRecord,
    SubmitOrderResult, CancelResult, OpenOrder, AssetBalance, BalanceTable
)

__all__ = [
    'OrderDirection',
    'EnumCodec',
    'MarketSummary',
    'OrderBook',
    'Ticker',
    'TradeRecord',
    'SubmitOrderResult',
    'CancelResult',
    'OpenOrder',
    'AssetBalance',
    'BalanceTable',
]
