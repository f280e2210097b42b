"""
TradeOgre Public REST API Implementation

Read-only market data endpoints; no credentials required.

TradeOgre API Specifications:
- Base URL: https://tradeogre.com/api/v1/
- GET markets, orders/{market}, ticker/{market}, history/{market}
- JSON responses; prices and quantities are decimal strings

Every call is a single round trip with no retry and no caching. Market
symbols (e.g. "XMR-BTC") are passed through unvalidated; an unknown market
comes back as an error payload and surfaces as DecodeError.
"""

from typing import Dict, List, Optional

from ..structs import EnumCodec, MarketSummary, OrderBook, OrderDirection, Ticker, TradeRecord
from ..structs.tradeogre_structs import TradeOgreTradeResponse
from ..transport import HTTPMethod, RestTransport, Transport
from .base_rest import DEFAULT_BASE_URL, BaseTradeOgreRest
from .rest_private import TradeOgrePrivateRest

TRADE_DIRECTION = EnumCodec.for_enum(OrderDirection, "trade")


class TradeOgrePublicRest(BaseTradeOgreRest):
    """
    TradeOgre public REST API client.

    Owns its transport: close() (or leaving an ``async with`` block) closes
    it, which also ends any private client derived via as_authenticated().
    """

    def __init__(self, base_url: str = DEFAULT_BASE_URL, transport: Optional[Transport] = None):
        super().__init__(base_url, transport if transport is not None else RestTransport())
        self.logger.info(f"Initialized TradeOgre public REST client for {self.base_url}")

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    def as_authenticated(self, api_key: str, secret_key: str) -> TradeOgrePrivateRest:
        """Derive a private client sharing this client's base URL and transport."""
        return TradeOgrePrivateRest(api_key, secret_key, self.base_url, self.transport)

    async def list_markets(self) -> List[Dict[str, MarketSummary]]:
        """
        Get all markets with price, volume, high, low, bid and ask.

        Returns:
            One single-entry {symbol: MarketSummary} mapping per market,
            in the order the server lists them

        Raises:
            TransportError: On connection or timeout failure
            DecodeError: If the body does not match the expected shape
        """
        return await self._request(HTTPMethod.GET, "markets", List[Dict[str, MarketSummary]])

    async def get_order_book(self, market: str) -> OrderBook:
        """
        Get the current order book for a market such as XMR-BTC.

        Ladder keys are returned exactly as sent (no price normalization or
        re-sorting).
        """
        return await self._request(HTTPMethod.GET, f"orders/{market}", OrderBook)

    async def get_ticker(self, market: str) -> Ticker:
        """Get the ticker; volume, high and low cover the last 24 hours."""
        return await self._request(HTTPMethod.GET, f"ticker/{market}", Ticker)

    async def get_trade_history(self, market: str) -> List[TradeRecord]:
        """
        Get up to 100 of the most recent trades on a market.

        Returns:
            TradeRecord list in server order (newest first as documented)

        Raises:
            UnknownEnumToken: If a trade carries an unregistered type token
        """
        endpoint = f"history/{market}"
        trades = await self._request(HTTPMethod.GET, endpoint, List[TradeOgreTradeResponse])

        return [
            TradeRecord(
                timestamp=trade.date,
                direction=TRADE_DIRECTION.decode(trade.type),
                price=trade.price,
                quantity=trade.quantity
            )
            for trade in trades
        ]

    async def close(self):
        close = getattr(self.transport, "close", None)
        if close is not None:
            await close()
