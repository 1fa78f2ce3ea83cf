"""
secstore Core Data Models

Security is the instrument record shared by the registry, the native-id
cache and every adapter. Records are compared by identity, not by field
values: two Security objects describing the same instrument are still two
records as far as the cache is concerned.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from .enums import SecurityType


@dataclass(eq=False)
class Security:
    """Single tradeable instrument."""

    security_id: str = ""  # e.g. "AAPL@NASDAQ"
    code: str = ""
    board: str = ""
    name: str = ""
    security_type: Optional[SecurityType] = None
    currency: str = ""
    price_step: Optional[float] = None
    decimals: Optional[int] = None

    # Adapter-specific side channel (IG epic, IBKR conId, ...)
    extension_info: Optional[Dict[str, Any]] = None

    @property
    def has_extension_info(self) -> bool:
        return self.extension_info is not None

    def get_extension(self, key: str, default: Any = None) -> Any:
        """Read a single extension value, tolerating a missing mapping."""
        if not self.extension_info:
            return default
        return self.extension_info.get(key, default)

    def to_dict(self) -> dict:
        return {
            "security_id": self.security_id,
            "code": self.code,
            "board": self.board,
            "name": self.name,
            "security_type": self.security_type.value if self.security_type else None,
            "currency": self.currency,
            "price_step": self.price_step,
            "decimals": self.decimals,
            "extension_info": dict(self.extension_info) if self.extension_info is not None else None,
        }

    def __repr__(self):
        return f"<Security {self.security_id or self.code or '?'}>"


def matches_criteria(security: Security, criteria: Security) -> bool:
    """
    Partial-match rule used by the registries for generic lookups.

    Empty criteria fields are wildcards. A criteria security_id pins the
    result to that exact id; code and name match as case-insensitive
    substrings; board, type and currency must be equal.
    """
    if criteria.security_id:
        return security.security_id.lower() == criteria.security_id.lower()

    if criteria.code and criteria.code.lower() not in security.code.lower():
        return False
    if criteria.name and criteria.name.lower() not in security.name.lower():
        return False
    if criteria.board and criteria.board.lower() != security.board.lower():
        return False
    if criteria.security_type is not None and criteria.security_type != security.security_type:
        return False
    if criteria.currency and criteria.currency.upper() != security.currency.upper():
        return False

    return True
