"""
Table-driven enum codec.

TradeOgre encodes direction as a lowercase word under the ``type`` field.
EnumCodec maps such tokens to enum members and back with an exact,
case-sensitive lookup. One instance is created per call site so error
messages can name the field being decoded.

Usage:
    TRADE_DIRECTION = EnumCodec.for_enum(OrderDirection, "trade")
    TRADE_DIRECTION.decode("buy")            # OrderDirection.BUY
    TRADE_DIRECTION.encode(OrderDirection.SELL)  # "sell"
"""

from enum import Enum
from typing import Dict, Generic, Iterable, Tuple, Type, TypeVar

from ..exceptions import UnknownEnumToken

E = TypeVar("E", bound=Enum)


class EnumCodec(Generic[E]):
    """Bidirectional token <-> enum mapping established at construction."""

    __slots__ = ("label", "_by_token", "_by_member")

    def __init__(self, label: str, table: Iterable[Tuple[str, E]]):
        self.label = label
        self._by_token: Dict[str, E] = {}
        self._by_member: Dict[E, str] = {}

        for token, member in table:
            if token in self._by_token:
                raise ValueError(f"Duplicate {label} token: {token!r}")
            self._by_token[token] = member
            # First token registered for a member is its canonical encoding
            self._by_member.setdefault(member, token)

    @classmethod
    def for_enum(cls, enum_cls: Type[E], label: str) -> "EnumCodec[E]":
        """Build a codec whose tokens are the members' string values."""
        return cls(label, ((member.value, member) for member in enum_cls))

    @property
    def tokens(self) -> Tuple[str, ...]:
        return tuple(self._by_token)

    def decode(self, token: str) -> E:
        try:
            return self._by_token[token]
        except (KeyError, TypeError):
            raise UnknownEnumToken(self.label, token, self.tokens) from None

    def encode(self, member: E) -> str:
        return self._by_member[member]

    def __repr__(self):
        return f"EnumCodec({self.label!r}, {list(self._by_token)})"
