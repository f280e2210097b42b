from .base_rest import DEFAULT_BASE_URL, BaseTradeOgreRest, decode_response
from .rest_private import CANCEL_ALL, TradeOgrePrivateRest
from .rest_public import TradeOgrePublicRest

__all__ = [
    'DEFAULT_BASE_URL',
    'BaseTradeOgreRest',
    'decode_response',
    'CANCEL_ALL',
    'TradeOgrePrivateRest',
    'TradeOgrePublicRest',
]
