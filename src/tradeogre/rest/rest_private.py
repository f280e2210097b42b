"""
TradeOgre Private REST API Implementation

Authenticated trading and account endpoints.

Authentication: HTTP Basic with the API key as user and the API secret as
password on every request. Parameters go in an
application/x-www-form-urlencoded body, never JSON or query string.

A ``{"success": false, "error": ...}`` body is a normal decoded result;
callers must check ``success``. Only transport and decode failures raise.
Order submission is not idempotent: two calls place two orders.
"""

from typing import Dict, List, Optional
from urllib.parse import urlencode

import aiohttp

from ..structs import (
    AssetBalance, BalanceTable, CancelResult, EnumCodec, OpenOrder, OrderDirection, SubmitOrderResult
)
from ..structs.tradeogre_structs import TradeOgreOrderResponse
from ..transport import HTTPMethod, Transport
from .base_rest import BaseTradeOgreRest

ORDER_DIRECTION = EnumCodec.for_enum(OrderDirection, "order")

# cancel_order() token that cancels every open order in every market
CANCEL_ALL = "all"

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


class TradeOgrePrivateRest(BaseTradeOgreRest):
    """
    TradeOgre private REST API client.

    Usually derived from a public client via as_authenticated(), which
    passes in the shared transport. The transport is not owned here.
    """

    def __init__(self, api_key: str, secret_key: str, base_url: str, transport: Transport):
        super().__init__(base_url, transport)
        self.api_key = api_key
        self._auth_header = aiohttp.BasicAuth(api_key, secret_key).encode()

    def __repr__(self):
        preview = f"{self.api_key[:4]}..." if len(self.api_key) > 8 else "***"
        return f"TradeOgrePrivateRest(base_url={self.base_url!r}, api_key={preview!r})"

    def _headers(self, form: bool) -> Dict[str, str]:
        headers = {'Authorization': self._auth_header}
        if form:
            headers['Content-Type'] = FORM_CONTENT_TYPE
        return headers

    async def _post_form(self, endpoint: str, params: Dict[str, str], target):
        return await self._request(
            HTTPMethod.POST, endpoint, target,
            headers=self._headers(form=True),
            body=urlencode(params)
        )

    async def submit_order(
            self,
            direction: OrderDirection,
            market: str,
            quantity: str,
            price: str
    ) -> SubmitOrderResult:
        """
        Submit a limit order to the book of a market.

        If the order is not fully filled it is placed on the book and a uuid
        is returned. The new available buy/sell balances are returned on
        success.

        Args:
            direction: OrderDirection.BUY or OrderDirection.SELL
            market: Market symbol such as XMR-BTC
            quantity: Decimal string, passed through as is
            price: Decimal string, passed through as is
        """
        endpoint = f"order/{ORDER_DIRECTION.encode(direction)}"
        self.logger.debug(f"Submitting {direction.value} order on {market}: {quantity} @ {price}")

        return await self._post_form(
            endpoint,
            {'market': market, 'quantity': quantity, 'price': price},
            SubmitOrderResult
        )

    async def submit_buy_order(self, market: str, quantity: str, price: str) -> SubmitOrderResult:
        """
        Submit a buy order for market at price.

        Not idempotent: every call places a new order. Check ``success``;
        a rejected order is returned with ``error`` set, not raised.
        """
        return await self.submit_order(OrderDirection.BUY, market, quantity, price)

    async def submit_sell_order(self, market: str, quantity: str, price: str) -> SubmitOrderResult:
        """Submit a sell order for market at price. Not idempotent, see submit_buy_order()."""
        return await self.submit_order(OrderDirection.SELL, market, quantity, price)

    async def cancel_order(self, uuid: str) -> CancelResult:
        """Cancel an order by uuid, or every open order with CANCEL_ALL."""
        return await self._post_form("order/cancel", {'uuid': uuid}, CancelResult)

    async def get_orders(self, market: Optional[str] = None) -> List[OpenOrder]:
        """
        Get the active orders of the account.

        Without a market the form is sent empty and the server returns the
        orders of every market.
        """
        params = {'market': market} if market is not None else {}
        orders = await self._post_form("account/orders", params, List[TradeOgreOrderResponse])

        return [
            OpenOrder(
                uuid=order.uuid,
                timestamp=order.date,
                direction=ORDER_DIRECTION.decode(order.type),
                price=order.price,
                quantity=order.quantity,
                market=order.market
            )
            for order in orders
        ]

    async def get_balance(self, currency: str) -> AssetBalance:
        """Get total and available balance of one currency such as BTC."""
        return await self._post_form("account/balance", {'currency': currency}, AssetBalance)

    async def get_balances(self) -> BalanceTable:
        """Get the balances of every currency on the account."""
        return await self._request(
            HTTPMethod.GET, "account/balances", BalanceTable,
            headers=self._headers(form=False)
        )
