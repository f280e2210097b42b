"""
Typed async client for the TradeOgre REST API.

Usage:
    from tradeogre import new_client

    async with new_client() as client:
        book = await client.get_order_book("XMR-BTC")

        private = client.as_authenticated(api_key, secret_key)
        result = await private.submit_buy_order("XMR-BTC", "1.5", "0.0042")
        if not result.success:
            print(result.error)
"""

from .exceptions import TradeOgreError, TransportError, DecodeError, UnknownEnumToken, ConfigurationError
from .structs import (
    OrderDirection, EnumCodec,
    MarketSummary, OrderBook, Ticker, TradeRecord,
    SubmitOrderResult, CancelResult, OpenOrder, AssetBalance, BalanceTable
)
from .transport import HTTPMethod, RestConfig, Transport, RestTransport
from .rest import DEFAULT_BASE_URL, CANCEL_ALL, TradeOgrePublicRest, TradeOgrePrivateRest
from .config import TradeOgreConfig, ExchangeCredentials, NetworkConfig, load_config
from .factory import new_client, client_from_config, private_client_from_config

__version__ = "1.0.0"

__all__ = [
    'TradeOgreError', 'TransportError', 'DecodeError', 'UnknownEnumToken', 'ConfigurationError',
    'OrderDirection', 'EnumCodec',
    'MarketSummary', 'OrderBook', 'Ticker', 'TradeRecord',
    'SubmitOrderResult', 'CancelResult', 'OpenOrder', 'AssetBalance', 'BalanceTable',
    'HTTPMethod', 'RestConfig', 'Transport', 'RestTransport',
    'DEFAULT_BASE_URL', 'CANCEL_ALL', 'TradeOgrePublicRest', 'TradeOgrePrivateRest',
    'TradeOgreConfig', 'ExchangeCredentials', 'NetworkConfig', 'load_config',
    'new_client', 'client_from_config', 'private_client_from_config',
]
