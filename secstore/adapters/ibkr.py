"""
Interactive Brokers security storage.

IBKR identifies every contract by an integer conId, stored on the security
as extension_info["ibkr_con_id"].
"""

import logging
from typing import Optional

from secstore.cache.storage import NativeIdSecurityStorage
from secstore.core.models import Security

logger = logging.getLogger(__name__)

CON_ID_KEY = "ibkr_con_id"


def _parse_con_id(raw) -> Optional[int]:
    """Exact integer value of raw, or None (no truncation of 265598.7)."""
    if isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw
    if isinstance(raw, str):
        raw = raw.strip()
        try:
            return int(raw)
        except ValueError:
            pass
        try:
            raw = float(raw)
        except ValueError:
            return None
    if isinstance(raw, float):
        if not raw.is_integer():
            return None
        return int(raw)
    return None


class IBKRSecurityStorage(NativeIdSecurityStorage[int]):
    """Securities keyed by IBKR contract id."""

    name = "ibkr"

    def create_native_id(self, security: Security) -> Optional[int]:
        raw = security.get_extension(CON_ID_KEY)
        if raw is None:
            return None

        con_id = _parse_con_id(raw)
        if con_id is None:
            logger.warning("Ignoring invalid IBKR conId %r on %r", raw, security)
            return None
        # conId 0 means "unqualified contract" in TWS
        return con_id if con_id > 0 else None
