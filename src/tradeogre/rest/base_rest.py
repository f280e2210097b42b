"""
Shared request/decode plumbing for the TradeOgre REST clients.

Both clients hold a base URL and a Transport handle injected through the
constructor. Responses are decoded with pre-built msgspec decoders; any
msgspec failure (malformed JSON, missing field, wrong type) is raised as
DecodeError with msgspec's path context in the message.
"""

import logging
from typing import Mapping, Optional, Type, TypeVar
from urllib.parse import urlsplit

import msgspec

from ..exceptions import ConfigurationError, DecodeError
from ..transport import HTTPMethod, Transport

T = TypeVar("T")

DEFAULT_BASE_URL = "https://tradeogre.com/api/v1/"

_decoders: dict = {}


def get_decoder(target: Type[T]) -> msgspec.json.Decoder:
    """Return a cached JSON decoder for the target type."""
    decoder = _decoders.get(target)
    if decoder is None:
        decoder = _decoders[target] = msgspec.json.Decoder(target)
    return decoder


def decode_response(response_text: str, target: Type[T], endpoint: str) -> T:
    """Decode response text into target or raise DecodeError."""
    try:
        return get_decoder(target).decode(response_text)
    except msgspec.DecodeError as e:
        raise DecodeError(str(e), target=endpoint, body=response_text) from e


def normalize_base_url(base_url: str) -> str:
    """Validate an http(s) API root and make sure it ends with '/'."""
    if not isinstance(base_url, str):
        raise ConfigurationError(f"Invalid base URL: {base_url!r}", "base_url")

    parts = urlsplit(base_url)
    if parts.scheme not in ("http", "https") or not parts.netloc or parts.query or parts.fragment:
        raise ConfigurationError(f"Invalid base URL: {base_url!r}", "base_url")

    return base_url if base_url.endswith("/") else base_url + "/"


class BaseTradeOgreRest:
    """Base URL + transport holder with a single request path."""

    def __init__(self, base_url: str, transport: Transport):
        self.base_url = normalize_base_url(base_url)
        self.transport = transport
        self.logger = logging.getLogger(self.__class__.__module__)

    def _url(self, endpoint: str) -> str:
        return f"{self.base_url}{endpoint}"

    async def _request(
            self,
            method: HTTPMethod,
            endpoint: str,
            target: Type[T],
            headers: Optional[Mapping[str, str]] = None,
            body: Optional[str] = None
    ) -> T:
        """Send one request and decode its body into target."""
        response_text = await self.transport.send(method, self._url(endpoint), headers or {}, body)
        return decode_response(response_text, target, endpoint)

