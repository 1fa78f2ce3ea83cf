"""
secstore Base Contracts

Abstract base classes for the persistent registry and for the security
provider/storage capability sets consumed by trading-system adapters.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, List, Optional

from .models import Security

SecurityHandler = Callable[[Security], None]
ClearedHandler = Callable[[], None]


class SecurityRegistry(ABC):
    """
    Durable store of security records (system of record).

    Storage engine and query semantics are up to the implementation.
    """

    @abstractmethod
    def securities(self) -> List[Security]:
        """Enumerate every stored security."""
        pass

    @abstractmethod
    def save(self, security: Security) -> None:
        """Insert or update a security by value."""
        pass

    @abstractmethod
    def lookup(self, criteria: Security) -> List[Security]:
        """Generic partial-match lookup."""
        pass

    @abstractmethod
    def get_security_ids(self) -> List[str]:
        """List the string ids of every stored security."""
        pass


class SecurityProvider(ABC):
    """
    Read side of a security source.

    Subscribers are notified when securities are added, removed, or the
    whole source is cleared.
    """

    @property
    @abstractmethod
    def securities(self) -> List[Security]:
        pass

    @property
    @abstractmethod
    def count(self) -> int:
        pass

    @abstractmethod
    def lookup(self, criteria: Security) -> List[Security]:
        pass

    @abstractmethod
    def get_native_id(self, security: Security) -> Optional[Any]:
        """Native (trading-system) id of a security, or None."""
        pass

    @abstractmethod
    def subscribe_added(self, handler: SecurityHandler) -> None:
        pass

    @abstractmethod
    def unsubscribe_added(self, handler: SecurityHandler) -> bool:
        pass

    @abstractmethod
    def subscribe_removed(self, handler: SecurityHandler) -> None:
        pass

    @abstractmethod
    def unsubscribe_removed(self, handler: SecurityHandler) -> bool:
        pass

    @abstractmethod
    def subscribe_cleared(self, handler: ClearedHandler) -> None:
        pass

    @abstractmethod
    def unsubscribe_cleared(self, handler: ClearedHandler) -> bool:
        pass


class SecurityStorage(SecurityProvider):
    """Security provider that also accepts writes."""

    @abstractmethod
    def save(self, security: Security) -> None:
        pass

    @abstractmethod
    def delete(self, security: Security) -> None:
        pass

    @abstractmethod
    def delete_by(self, criteria: Security) -> None:
        pass

    @abstractmethod
    def get_security_ids(self) -> List[str]:
        pass
