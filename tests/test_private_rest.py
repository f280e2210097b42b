"""Test TradeOgre private REST client."""

import base64
from urllib.parse import parse_qs

import pytest

from tradeogre.exceptions import DecodeError, UnknownEnumToken
from tradeogre.rest import CANCEL_ALL
from tradeogre.structs import OpenOrder, OrderDirection
from tradeogre.transport import HTTPMethod

from conftest import BASE_URL

EXPECTED_AUTH = "Basic " + base64.b64encode(b"test-key-123456:test-secret").decode()
FORM = "application/x-www-form-urlencoded"


def form_fields(body):
    return {k: v[0] for k, v in parse_qs(body, keep_blank_values=True).items()}


class TestSubmitOrder:
    """Test buy/sell order submission."""

    async def test_buy_order_form_and_auth(self, private_client, transport):
        transport.respond({"success": True, "uuid": "235e2ae2-3b8e-4d5f-a4d2-d29b4a1f3c43",
                           "bnewbalavail": "0.50000000", "snewbalavail": "12.00000000"})

        result = await private_client.submit_buy_order("XMR-BTC", "1.5", "0.00420000")

        sent = transport.last
        assert sent.method == HTTPMethod.POST
        assert sent.url == BASE_URL + "order/buy"
        assert sent.headers["Authorization"] == EXPECTED_AUTH
        assert sent.headers["Content-Type"] == FORM
        assert form_fields(sent.body) == {"market": "XMR-BTC", "quantity": "1.5", "price": "0.00420000"}

        assert result.success is True
        assert result.uuid == "235e2ae2-3b8e-4d5f-a4d2-d29b4a1f3c43"
        assert result.buy_balance_available == "0.50000000"
        assert result.sell_balance_available == "12.00000000"
        assert result.error is None

    async def test_sell_order_path(self, private_client, transport):
        transport.respond({"success": True, "uuid": "", "bnewbalavail": "1", "snewbalavail": "2"})

        result = await private_client.submit_sell_order("XMR-BTC", "2", "0.1")

        assert transport.last.url == BASE_URL + "order/sell"
        # empty uuid: filled immediately
        assert result.uuid == ""

    async def test_generic_submit_uses_direction_token(self, private_client, transport):
        transport.respond({"success": True, "bnewbalavail": "1", "snewbalavail": "2"})

        await private_client.submit_order(OrderDirection.SELL, "BTC-USDT", "0.1", "60000")

        assert transport.last.url == BASE_URL + "order/sell"

    async def test_unsuccessful_result_is_not_raised(self, private_client, transport):
        transport.respond({"success": False, "error": "Insufficient funds"})

        result = await private_client.submit_buy_order("XMR-BTC", "1000", "1")

        assert result.success is False
        assert result.error == "Insufficient funds"
        assert result.uuid == ""

    async def test_each_call_sends_a_request(self, private_client, transport):
        payload = {"success": True, "uuid": "a", "bnewbalavail": "1", "snewbalavail": "2"}
        transport.respond(payload).respond(payload)

        await private_client.submit_buy_order("XMR-BTC", "1", "1")
        await private_client.submit_buy_order("XMR-BTC", "1", "1")

        assert len(transport.requests) == 2

    async def test_values_passed_through_unvalidated(self, private_client, transport):
        transport.respond({"success": False, "error": "Invalid quantity"})

        await private_client.submit_buy_order("XMR-BTC", "-1e-3", "abc")

        assert form_fields(transport.last.body) == {"market": "XMR-BTC", "quantity": "-1e-3", "price": "abc"}

    async def test_wrong_success_type_is_decode_error(self, private_client, transport):
        transport.respond({"success": "maybe"})

        with pytest.raises(DecodeError, match="success"):
            await private_client.submit_buy_order("XMR-BTC", "1", "1")


class TestCancelOrder:
    """Test order cancellation."""

    async def test_cancel_by_uuid(self, private_client, transport):
        transport.respond({"success": True})

        result = await private_client.cancel_order("235e2ae2")

        assert transport.last.url == BASE_URL + "order/cancel"
        assert transport.last.headers["Authorization"] == EXPECTED_AUTH
        assert form_fields(transport.last.body) == {"uuid": "235e2ae2"}
        assert result.success is True

    async def test_cancel_all(self, private_client, transport):
        transport.respond({"success": True})

        await private_client.cancel_order(CANCEL_ALL)

        assert form_fields(transport.last.body) == {"uuid": "all"}


class TestGetOrders:
    """Test active order listing."""

    ORDERS = [
        {"uuid": "a1", "date": 1515128233, "type": "buy", "price": "0.02000000",
         "quantity": "1.50000000", "market": "XMR-BTC"},
        {"uuid": "b2", "date": 1515128240, "type": "sell", "price": "0.00000030",
         "quantity": "1000.00000000", "market": "BCN-BTC"},
    ]

    async def test_all_markets_sends_no_market_field(self, private_client, transport):
        transport.respond(self.ORDERS)

        orders = await private_client.get_orders()

        sent = transport.last
        assert sent.method == HTTPMethod.POST
        assert sent.url == BASE_URL + "account/orders"
        assert sent.headers["Authorization"] == EXPECTED_AUTH
        assert "market" not in form_fields(sent.body)
        assert orders == [
            OpenOrder(uuid="a1", timestamp=1515128233, direction=OrderDirection.BUY,
                      price="0.02000000", quantity="1.50000000", market="XMR-BTC"),
            OpenOrder(uuid="b2", timestamp=1515128240, direction=OrderDirection.SELL,
                      price="0.00000030", quantity="1000.00000000", market="BCN-BTC"),
        ]

    async def test_single_market_sends_market_field(self, private_client, transport):
        transport.respond(self.ORDERS[:1])

        await private_client.get_orders("XMR-BTC")

        assert form_fields(transport.last.body) == {"market": "XMR-BTC"}

    async def test_unknown_market_passed_through(self, private_client, transport):
        transport.respond([])

        assert await private_client.get_orders("NOT-A-MARKET") == []
        assert form_fields(transport.last.body) == {"market": "NOT-A-MARKET"}

    async def test_unknown_order_type(self, private_client, transport):
        transport.respond([dict(self.ORDERS[0], type="short")])

        with pytest.raises(UnknownEnumToken) as exc_info:
            await private_client.get_orders()

        assert exc_info.value.label == "order"

    async def test_error_payload_is_decode_error(self, private_client, transport):
        transport.respond({"success": False, "error": "Must be authorized"})

        with pytest.raises(DecodeError):
            await private_client.get_orders()


class TestBalances:
    """Test balance endpoints."""

    async def test_single_balance(self, private_client, transport):
        transport.respond({"success": True, "balance": "10.00000000", "available": "9.50000000"})

        balance = await private_client.get_balance("BTC")

        assert transport.last.method == HTTPMethod.POST
        assert transport.last.url == BASE_URL + "account/balance"
        assert form_fields(transport.last.body) == {"currency": "BTC"}
        assert balance.success is True
        assert balance.balance == "10.00000000"
        assert balance.available == "9.50000000"

    async def test_all_balances_basic_auth_no_body(self, public_client, transport):
        private = public_client.as_authenticated("test-key-123456", "test-secret")
        transport.respond({"success": True, "balances": {"BTC": "0.00000000", "XMR": "12.34500000"}})

        table = await private.get_balances()

        sent = transport.last
        assert sent.method == HTTPMethod.GET
        assert sent.url == BASE_URL + "account/balances"
        assert sent.headers["Authorization"] == EXPECTED_AUTH
        assert "Content-Type" not in sent.headers
        assert sent.body is None
        assert table.success is True
        assert table.balances == {"BTC": "0.00000000", "XMR": "12.34500000"}

    async def test_balances_failure_result(self, private_client, transport):
        transport.respond({"success": False, "error": "Must be authorized"})

        table = await private_client.get_balances()

        assert table.success is False
        assert table.balances == {}
        assert table.error == "Must be authorized"

    def test_repr_hides_secret(self, private_client):
        assert "test-secret" not in repr(private_client)
        assert "test-key-123456" not in repr(private_client)
