"""
secstore enumerations.
"""

from enum import Enum


class SecurityType(Enum):
    STOCK = "stock"
    FUTURE = "future"
    OPTION = "option"
    INDEX = "index"
    CURRENCY = "currency"
    CRYPTO = "crypto"
    CFD = "cfd"
    BOND = "bond"
    ETF = "etf"


class NativeIdSource(Enum):
    """Trading systems with a shipped native-id adapter."""

    IBKR = "ibkr"
    IG = "ig"
    BINANCE = "binance"
