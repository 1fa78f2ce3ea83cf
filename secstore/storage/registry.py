"""
In-memory security registry.

Reference SecurityRegistry for tests, scripts and adapters running without
a database. Upserts by security_id and keeps insertion order.
"""

import logging
import threading
from typing import Dict, List

from secstore.core.base import SecurityRegistry
from secstore.core.exceptions import InvalidArgumentError
from secstore.core.models import Security, matches_criteria

logger = logging.getLogger(__name__)


class InMemorySecurityRegistry(SecurityRegistry):
    """Thread-safe dict-backed registry."""

    def __init__(self, securities=None):
        self._securities: Dict[str, Security] = {}
        self._lock = threading.Lock()
        for security in securities or ():
            self.save(security)

    def securities(self) -> List[Security]:
        with self._lock:
            return list(self._securities.values())

    def save(self, security: Security) -> None:
        if security is None:
            raise InvalidArgumentError("security is required")
        if not security.security_id:
            raise InvalidArgumentError("security_id is required to save a security")

        with self._lock:
            is_new = security.security_id not in self._securities
            self._securities[security.security_id] = security

        logger.debug("%s security %s", "Inserted" if is_new else "Updated", security.security_id)

    def lookup(self, criteria: Security) -> List[Security]:
        with self._lock:
            candidates = list(self._securities.values())
        return [s for s in candidates if matches_criteria(s, criteria)]

    def get_security_ids(self) -> List[str]:
        with self._lock:
            return list(self._securities.keys())

    def __len__(self) -> int:
        with self._lock:
            return len(self._securities)
