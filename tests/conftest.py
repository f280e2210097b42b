"""
Pytest configuration and shared fixtures for the TradeOgre client tests.

Provides a recording fake transport so client tests run without network
access, plus realistic response payloads.
"""

import sys
from pathlib import Path
from typing import List, Mapping, Optional

import msgspec
import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from tradeogre.transport import HTTPMethod
from tradeogre.rest import TradeOgrePublicRest

BASE_URL = "https://tradeogre.test/api/v1/"


class SentRequest(msgspec.Struct):
    method: HTTPMethod
    url: str
    headers: dict
    body: Optional[str]


class FakeTransport:
    """Transport double: records every request and replays queued responses."""

    def __init__(self):
        self.requests: List[SentRequest] = []
        self._responses: list = []
        self.closed = False

    def respond(self, payload):
        """Queue a response; str is sent verbatim, exceptions are raised, anything else is JSON-encoded."""
        if not isinstance(payload, (str, BaseException)):
            payload = msgspec.json.encode(payload).decode()
        self._responses.append(payload)
        return self

    async def send(self, method: HTTPMethod, url: str, headers: Mapping[str, str], body: Optional[str] = None) -> str:
        self.requests.append(SentRequest(method, url, dict(headers), body))
        response = self._responses.pop(0)
        if isinstance(response, BaseException):
            raise response
        return response

    @property
    def last(self) -> SentRequest:
        return self.requests[-1]

    async def close(self):
        self.closed = True


@pytest.fixture
def transport():
    return FakeTransport()


@pytest.fixture
def public_client(transport):
    return TradeOgrePublicRest(BASE_URL, transport)


@pytest.fixture
def private_client(public_client):
    return public_client.as_authenticated("test-key-123456", "test-secret")


@pytest.fixture
def markets_payload():
    return [
        {"AEON-BTC": {"initialprice": "0.00022004", "price": "0.00025992", "high": "0.00025992",
                      "low": "0.00022003", "volume": "0.00359066", "bid": "0.00022456", "ask": "0.00025993"}},
        {"BCN-BTC": {"initialprice": "0.00000029", "price": "0.00000029", "high": "0.00000030",
                     "low": "0.00000028", "volume": "0.03124000", "bid": "0.00000028", "ask": "0.00000029"}},
    ]


@pytest.fixture
def trade_history_payload():
    return [
        {"date": 1515128233, "type": "sell", "price": "0.02454320", "quantity": "0.17614230"},
        {"date": 1515128101, "type": "buy", "price": "0.02454321", "quantity": "1.00000000"},
    ]
