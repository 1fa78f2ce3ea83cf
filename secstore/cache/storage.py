"""
Native-id Security Storage

Security storage for a trading-system adapter that resolves instruments by
the trading system's own id in O(1), while durable writes and generic
lookups go through the persistent registry.

Usage:
    class IGSecurityStorage(NativeIdSecurityStorage[str]):
        def create_native_id(self, security):
            return security.get_extension("ig_epic")

    storage = IGSecurityStorage(registry)
    storage.subscribe_added(on_new_security)
    storage.save(security)
    storage.lookup(criteria)
"""

import logging
from abc import abstractmethod
from typing import Any, Generic, Iterable, List, Optional

from secstore.cache.index import NativeIdIndex, TNativeId
from secstore.cache.notifier import AddedNotifier
from secstore.config.settings import get_settings
from secstore.core.base import ClearedHandler, SecurityHandler, SecurityRegistry, SecurityStorage
from secstore.core.exceptions import InvalidArgumentError, UnsupportedOperationError
from secstore.core.models import Security

logger = logging.getLogger(__name__)


class NativeIdSecurityStorage(SecurityStorage, Generic[TNativeId]):
    """
    Security storage keyed by a native id.

    Subclasses supply create_native_id(); everything else is shared.
    The cache is a derived view of the registry: it is filled from the
    registry at construction and only ever grows afterwards.
    """

    name: str = "native"

    def __init__(
        self,
        registry: SecurityRegistry,
        *,
        on_added: Optional[Iterable[SecurityHandler]] = None,
        notify_on_hydration: Optional[bool] = None,
        settings: Any = None,
    ):
        if registry is None:
            raise InvalidArgumentError("registry is required")

        self.settings = settings or get_settings()
        self._registry = registry
        self._notifier = AddedNotifier()
        self._index: NativeIdIndex[TNativeId] = NativeIdIndex(
            self._derive_native_id,
            normalize=self.normalize_native_id,
            notifier=self._notifier,
        )

        # Subscribed before hydration so boot-time replay reaches them
        for handler in on_added or ():
            self._notifier.subscribe(handler)

        if notify_on_hydration is None:
            notify_on_hydration = getattr(self.settings, "notify_on_hydration", True)

        indexed = self._index.initialize(registry.securities(), notify=notify_on_hydration)
        logger.info("%s storage ready with %d cached securities", self.name, indexed)

    # ------------------------------------------------------------------
    # Adapter hooks
    # ------------------------------------------------------------------

    @abstractmethod
    def create_native_id(self, security: Security) -> Optional[TNativeId]:
        """
        Native (trading system) id for a security.

        Must be pure. Return None when the security's extension info has
        nothing this adapter can use.
        """
        pass

    def normalize_native_id(self, native_id: TNativeId) -> TNativeId:
        """Key normaliser; override for case-insensitive ids and the like."""
        return native_id

    def _derive_native_id(self, security: Security) -> Optional[TNativeId]:
        return self.create_native_id(security)

    # ------------------------------------------------------------------
    # Provider side
    # ------------------------------------------------------------------

    @property
    def securities(self) -> List[Security]:
        """Snapshot of all cached securities."""
        return self._index.values()

    @property
    def count(self) -> int:
        return self._index.count()

    def lookup(self, criteria: Security) -> List[Security]:
        """
        Find securities matching criteria.

        If a native id can be derived from the criteria the cache is
        authoritative: the cached security or nothing. Otherwise the
        registry's own lookup result is returned as is.
        """
        if criteria is None:
            raise InvalidArgumentError("criteria is required")

        native_id = self._index.derive(criteria)
        if native_id is None:
            return self._registry.lookup(criteria)

        security = self._index.get(native_id)
        return [] if security is None else [security]

    def get_native_id(self, security: Security) -> Optional[TNativeId]:
        """Native id a security is cached under (O(n) scan), or None."""
        return self._index.reverse_lookup(security)

    def get_by_native_id(self, native_id: TNativeId) -> Optional[Security]:
        return self._index.get(native_id)

    # ------------------------------------------------------------------
    # Storage side
    # ------------------------------------------------------------------

    def save(self, security: Security) -> None:
        """Persist to the registry, then offer to the cache."""
        if security is None:
            raise InvalidArgumentError("security is required")

        self._registry.save(security)
        self._index.try_add(security)

    def get_security_ids(self) -> List[str]:
        return self._registry.get_security_ids()

    def delete(self, security: Security) -> None:
        raise UnsupportedOperationError(f"{self.name} storage does not support delete")

    def delete_by(self, criteria: Security) -> None:
        raise UnsupportedOperationError(f"{self.name} storage does not support delete_by")

    # ------------------------------------------------------------------
    # Events
    # ------------------------------------------------------------------

    def subscribe_added(self, handler: SecurityHandler) -> None:
        self._notifier.subscribe(handler)

    def unsubscribe_added(self, handler: SecurityHandler) -> bool:
        return self._notifier.unsubscribe(handler)

    # Nothing is ever removed from the cache, so these never fire.
    def subscribe_removed(self, handler: SecurityHandler) -> None:
        pass

    def unsubscribe_removed(self, handler: SecurityHandler) -> bool:
        return False

    def subscribe_cleared(self, handler: ClearedHandler) -> None:
        pass

    def unsubscribe_cleared(self, handler: ClearedHandler) -> bool:
        return False

    # ------------------------------------------------------------------
    # Stats / lifetime
    # ------------------------------------------------------------------

    def get_stats(self) -> dict:
        """Cache statistics."""
        return {
            "adapter": self.name,
            "cached": self._index.count(),
            "registry_ids": len(self._registry.get_security_ids()),
            "added_handlers": self._notifier.handler_count,
        }

    def close(self) -> None:
        """Drop all subscribers. The cache itself stays readable."""
        self._notifier.clear()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False
