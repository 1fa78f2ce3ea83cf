"""
IG security storage.

IG uses "epic" codes for instruments (e.g., CS.D.EURUSD.CFD.IP), stored on
the security as extension_info["ig_epic"]. Epics are compared
case-insensitively.
"""

from typing import Optional

from secstore.cache.storage import NativeIdSecurityStorage
from secstore.core.models import Security

EPIC_KEY = "ig_epic"


class IGSecurityStorage(NativeIdSecurityStorage[str]):
    """Securities keyed by IG epic."""

    name = "ig"

    def create_native_id(self, security: Security) -> Optional[str]:
        epic = security.get_extension(EPIC_KEY)
        if not isinstance(epic, str) or not epic.strip():
            return None
        return epic.strip()

    def normalize_native_id(self, native_id: str) -> str:
        if not isinstance(native_id, str):
            return native_id
        return native_id.strip().upper()
