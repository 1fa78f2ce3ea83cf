"""
Added-security notifier.

Fires once per newly indexed security. Handlers are copied under the lock
and invoked after it is released, so a handler may call back into the
cache (or subscribe/unsubscribe) without deadlocking.
"""

import logging
import threading
from typing import List

from secstore.core.base import SecurityHandler
from secstore.core.models import Security

logger = logging.getLogger(__name__)


class AddedNotifier:
    """Synchronous fan-out of the "added" signal."""

    def __init__(self):
        self._handlers: List[SecurityHandler] = []
        self._lock = threading.Lock()

    @property
    def handler_count(self) -> int:
        with self._lock:
            return len(self._handlers)

    def subscribe(self, handler: SecurityHandler) -> None:
        """Register a handler for newly added securities."""
        with self._lock:
            self._handlers.append(handler)
        logger.debug("Registered added handler: %r", handler)

    def unsubscribe(self, handler: SecurityHandler) -> bool:
        """Unregister a handler."""
        with self._lock:
            if handler in self._handlers:
                self._handlers.remove(handler)
                return True
        return False

    def notify(self, security: Security) -> None:
        """Invoke every current handler with the new security."""
        with self._lock:
            handlers = list(self._handlers)

        for handler in handlers:
            try:
                handler(security)
            except Exception as e:
                logger.error("Added handler failed for %r: %s", security, e)

    def clear(self) -> None:
        with self._lock:
            self._handlers = []
