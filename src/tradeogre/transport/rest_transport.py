"""
aiohttp transport for the TradeOgre clients.

Provides the single capability the clients consume:

    await transport.send(method, url, headers, body) -> response text

One ClientSession is created lazily and shared by every client bound to the
transport. Timeouts come from RestConfig at construction; there is no
per-call timeout and no retry. Connection, TLS and timeout failures are
raised as TransportError. HTTP error statuses are not raised here: the body
is returned and the caller's decoder decides whether it matches.
"""

import asyncio
import logging
from typing import Mapping, Optional, Protocol, runtime_checkable

import aiohttp

from ..exceptions import TransportError
from .structs import HTTPMethod, RestConfig


@runtime_checkable
class Transport(Protocol):
    """Minimal HTTP capability consumed by the clients."""

    async def send(
            self,
            method: HTTPMethod,
            url: str,
            headers: Mapping[str, str],
            body: Optional[str] = None
    ) -> str:
        ...


class RestTransport:
    """aiohttp-backed Transport with a lazily created, shared session."""

    def __init__(self, config: Optional[RestConfig] = None):
        self.config = config or RestConfig()

        self._session: Optional[aiohttp.ClientSession] = None
        self._connector: Optional[aiohttp.TCPConnector] = None

        self.logger = logging.getLogger(__name__)

    async def __aenter__(self):
        await self._ensure_session()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    @property
    def closed(self) -> bool:
        return self._session is None or self._session.closed

    async def _ensure_session(self):
        """Ensure aiohttp session is created."""
        if self._session is None or self._session.closed:
            self._connector = aiohttp.TCPConnector(
                limit=100,
                ttl_dns_cache=300,
                keepalive_timeout=60,
            )

            timeout = aiohttp.ClientTimeout(
                total=self.config.timeout,
                connect=self.config.connect_timeout,
                sock_connect=self.config.connect_timeout,
            )

            default_headers = {
                'User-Agent': self.config.user_agent,
                'Accept': 'application/json',
            }
            if self.config.headers:
                default_headers.update(self.config.headers)

            self._session = aiohttp.ClientSession(
                connector=self._connector,
                timeout=timeout,
                headers=default_headers
            )

    async def send(
            self,
            method: HTTPMethod,
            url: str,
            headers: Mapping[str, str],
            body: Optional[str] = None
    ) -> str:
        """Execute one request and return the response body as text."""
        await self._ensure_session()

        request_kwargs = {'headers': dict(headers)}
        if body is not None:
            request_kwargs['data'] = body

        try:
            async with self._session.request(method.value, url, **request_kwargs) as response:
                response_text = await response.text()
                status = response.status
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise TransportError(f"Request failed: {e!r}", url, method.value) from e
        except UnicodeDecodeError as e:
            raise TransportError(f"Response body is not text: {e}", url, method.value) from e

        if status >= 400:
            self.logger.warning(f"{method.value} {url} returned HTTP {status}: {response_text[:100]}")
        else:
            self.logger.debug(f"{method.value} {url} -> {status}")

        return response_text

    async def close(self):
        """Close the session and connector."""
        if self._session and not self._session.closed:
            await self._session.close()

        if self._connector and not self._connector.closed:
            await self._connector.close()

        self.logger.info("RestTransport closed")
