from typing import Optional


class TradeOgreError(Exception):
    """Base exception for the TradeOgre client."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class TransportError(TradeOgreError):
    """Connection, TLS, timeout or unreadable response body."""

    def __init__(self, message: str, url: str, method: Optional[str] = None) -> None:
        super().__init__(message)
        self.url = url
        self.method = method

    def __str__(self):
        return f"TransportError: {self.method or '-'} {self.url} - {self.message}"


class DecodeError(TradeOgreError):
    """Response text does not match the expected schema."""

    BODY_PREVIEW = 200

    def __init__(self, message: str, target: Optional[str] = None, body: Optional[str] = None) -> None:
        super().__init__(message)
        self.target = target
        self.body = body[:self.BODY_PREVIEW] if body else body

    def __str__(self):
        if self.target:
            return f"DecodeError: {self.target} - {self.message}"
        return f"DecodeError: {self.message}"


class UnknownEnumToken(DecodeError):
    """Wire token is not registered in an EnumCodec."""

    def __init__(self, label: str, token: str, accepted: tuple = ()) -> None:
        accepted_str = ", ".join(repr(t) for t in accepted)
        super().__init__(
            f"Unknown {label} token {token!r} (expected one of: {accepted_str})",
            target=label
        )
        self.label = label
        self.token = token


class ConfigurationError(TradeOgreError):
    """Configuration-specific exception for setup errors."""

    def __init__(self, message: str, setting_name: Optional[str] = None):
        super().__init__(message)
        self.setting_name = setting_name
