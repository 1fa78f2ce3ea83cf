"""secstore cache layer - native-id index, notifier and storage facade."""

from secstore.cache.notifier import AddedNotifier
from secstore.cache.index import NativeIdIndex
from secstore.cache.storage import NativeIdSecurityStorage

__all__ = [
    "AddedNotifier",
    "NativeIdIndex",
    "NativeIdSecurityStorage",
]
