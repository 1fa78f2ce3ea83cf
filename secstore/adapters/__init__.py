"""Native-id storages for supported trading systems."""

from secstore.adapters.binance import BinanceSecurityStorage
from secstore.adapters.ibkr import IBKRSecurityStorage
from secstore.adapters.ig import IGSecurityStorage
from secstore.core.enums import NativeIdSource

ADAPTERS = {
    NativeIdSource.IBKR: IBKRSecurityStorage,
    NativeIdSource.IG: IGSecurityStorage,
    NativeIdSource.BINANCE: BinanceSecurityStorage,
}


def get_adapter_class(source):
    """Storage class for a NativeIdSource or its string value."""
    return ADAPTERS[NativeIdSource(source)]


__all__ = [
    "ADAPTERS",
    "BinanceSecurityStorage",
    "IBKRSecurityStorage",
    "IGSecurityStorage",
    "get_adapter_class",
]
