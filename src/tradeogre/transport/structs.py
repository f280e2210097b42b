from enum import Enum
from typing import Dict, Optional

import msgspec


class HTTPMethod(Enum):
    """HTTP methods used by the TradeOgre API."""
    GET = "GET"
    POST = "POST"


class RestConfig(msgspec.Struct, frozen=True):
    """Transport-level settings, fixed when the transport is created."""
    timeout: float = 10.0
    connect_timeout: float = 5.0
    user_agent: str = "tradeogre-python/1.0"
    headers: Optional[Dict[str, str]] = None  # Extra headers sent with every request
