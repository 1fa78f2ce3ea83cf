"""
Binance security storage.

The same Binance symbol (e.g. BTCUSDT) exists on several markets, so the
native id is the pair (symbol, market).

Extension keys:
    binance_symbol: exchange symbol, e.g. "BTCUSDT"
    binance_market: "spot" (default), "usdm" or "coinm"
"""

from typing import Optional, Tuple

from secstore.cache.storage import NativeIdSecurityStorage
from secstore.core.models import Security

SYMBOL_KEY = "binance_symbol"
MARKET_KEY = "binance_market"

MARKETS = ("spot", "usdm", "coinm")

BinanceId = Tuple[str, str]


class BinanceSecurityStorage(NativeIdSecurityStorage[BinanceId]):
    """Securities keyed by (symbol, market)."""

    name = "binance"

    def create_native_id(self, security: Security) -> Optional[BinanceId]:
        symbol = security.get_extension(SYMBOL_KEY)
        if not isinstance(symbol, str) or not symbol.strip():
            return None

        market = security.get_extension(MARKET_KEY) or "spot"
        if not isinstance(market, str) or market.strip().lower() not in MARKETS:
            return None

        return symbol.strip(), market.strip()

    def normalize_native_id(self, native_id: BinanceId) -> BinanceId:
        if not isinstance(native_id, tuple) or len(native_id) != 2:
            return native_id
        symbol, market = native_id
        if not isinstance(symbol, str) or not isinstance(market, str):
            return native_id
        return symbol.strip().upper(), market.strip().lower()
