"""
Client construction.

    client = new_client()                      # public, default API root
    private = client.as_authenticated(key, secret)

new_client() creates exactly one RestTransport; every client derived from
the returned public client reuses it. Construction performs no network I/O.
"""

from typing import Optional, Tuple

from .config import TradeOgreConfig
from .exceptions import ConfigurationError
from .rest import DEFAULT_BASE_URL, TradeOgrePrivateRest, TradeOgrePublicRest
from .transport import RestConfig, RestTransport


def new_client(base_url: str = DEFAULT_BASE_URL, rest_config: Optional[RestConfig] = None) -> TradeOgrePublicRest:
    """
    Create a public client bound to base_url with a fresh shared transport.

    Raises:
        ConfigurationError: If base_url is not a valid http(s) URL
    """
    return TradeOgrePublicRest(base_url, RestTransport(rest_config))


def client_from_config(config: TradeOgreConfig) -> TradeOgrePublicRest:
    return new_client(config.base_url, config.to_rest_config())


def private_client_from_config(config: TradeOgreConfig) -> Tuple[TradeOgrePublicRest, TradeOgrePrivateRest]:
    """
    Create the public client and a private client derived from it.

    The public client owns the transport and must be closed by the caller.
    """
    if not config.credentials.has_private_api:
        raise ConfigurationError("TradeOgre API credentials are not configured", "credentials")

    client = client_from_config(config)
    return client, client.as_authenticated(config.credentials.api_key, config.credentials.secret_key)
