"""
Native-id index.

In-memory map from a trading system's own instrument id to the Security
record. Hydrated once from the persistent registry, then grown by inserts.
Entries are never replaced or removed: the first security to claim a
native id keeps it for the lifetime of the process.
"""

import logging
import threading
from typing import Callable, Dict, Generic, Hashable, Iterable, List, Optional, Set, TypeVar

from secstore.cache.notifier import AddedNotifier
from secstore.core.exceptions import InvalidArgumentError
from secstore.core.models import Security

logger = logging.getLogger(__name__)

TNativeId = TypeVar("TNativeId", bound=Hashable)

NativeIdDeriver = Callable[[Security], Optional[TNativeId]]


class NativeIdIndex(Generic[TNativeId]):
    """
    Thread-safe native id -> Security map.

    Args:
        deriver: Computes a native id from a security; returns None when
            the security carries nothing the adapter can use.
        normalize: Optional key normaliser applied to every derived or
            queried id (e.g. case folding for string ids).
        notifier: Receives each security the first time its id is indexed.
    """

    def __init__(
        self,
        deriver: NativeIdDeriver,
        normalize: Optional[Callable[[TNativeId], TNativeId]] = None,
        notifier: Optional[AddedNotifier] = None,
    ):
        self._deriver = deriver
        self._normalize = normalize
        self.notifier = notifier or AddedNotifier()

        self._cache: Dict[TNativeId, Security] = {}
        # identities of indexed records; a record is indexed under one id at most
        self._members: Set[int] = set()
        self._lock = threading.Lock()

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    def initialize(self, securities: Iterable[Security], notify: bool = True) -> int:
        """Bulk-load securities (startup hydration). Returns number indexed."""
        added = 0
        skipped = 0
        for security in securities:
            if self.try_add(security, notify=notify):
                added += 1
            else:
                skipped += 1

        logger.info("Native-id index hydrated: %d indexed, %d skipped", added, skipped)
        return added

    def try_add(self, security: Security, notify: bool = True) -> bool:
        """
        Index a security under its native id.

        Returns True only for the call that actually inserted the id; the
        added notification fires after the lock is released.
        """
        if security is None:
            raise InvalidArgumentError("security is required")

        native_id = self.derive(security)
        if native_id is None:
            return False

        with self._lock:
            if native_id in self._cache or id(security) in self._members:
                is_new = False
            else:
                self._cache[native_id] = security
                self._members.add(id(security))
                is_new = True

        if not is_new:
            logger.debug("Native id %r already indexed, ignoring %r", native_id, security)
            return False

        logger.debug("Indexed %r under native id %r", security, native_id)
        if notify:
            self.notifier.notify(security)
        return True

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def derive(self, security: Security) -> Optional[TNativeId]:
        """Native id for a security, or None if it cannot be derived."""
        if not security.has_extension_info:
            return None

        native_id = self._deriver(security)
        if native_id is None:
            return None
        return self.normalize(native_id)

    def normalize(self, native_id: TNativeId) -> TNativeId:
        return self._normalize(native_id) if self._normalize else native_id

    def get(self, native_id: TNativeId) -> Optional[Security]:
        if native_id is None:
            return None
        key = self.normalize(native_id)
        if not isinstance(key, Hashable):
            return None
        with self._lock:
            return self._cache.get(key)

    def count(self) -> int:
        with self._lock:
            return len(self._cache)

    def values(self) -> List[Security]:
        """Snapshot of cached securities (unordered)."""
        with self._lock:
            return list(self._cache.values())

    def reverse_lookup(self, security: Security) -> Optional[TNativeId]:
        """
        Native id a security is cached under, or None.

        Linear scan comparing by identity. Only used on diagnostic paths,
        so no reverse map is maintained.
        """
        with self._lock:
            for native_id, cached in self._cache.items():
                if cached is security:
                    return native_id
        return None

    def __len__(self) -> int:
        return self.count()

    def __contains__(self, native_id) -> bool:
        return self.get(native_id) is not None
