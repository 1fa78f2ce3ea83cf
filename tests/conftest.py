"""
secstore Test Configuration
"""

from typing import Optional
from unittest.mock import MagicMock

import pytest

from secstore.cache.storage import NativeIdSecurityStorage
from secstore.core.enums import SecurityType
from secstore.core.models import Security
from secstore.storage.database import reset_engines
from secstore.storage.registry import InMemorySecurityRegistry


class TickerStorage(NativeIdSecurityStorage[int]):
    """Minimal adapter: native id is extension_info["ticker_id"]."""

    name = "ticker"

    def create_native_id(self, security: Security) -> Optional[int]:
        return security.get_extension("ticker_id")


def make_security(security_id: str, ticker_id=None, **overrides) -> Security:
    """Security with an optional ticker_id extension."""
    code, _, board = security_id.partition("@")
    base = {
        "security_id": security_id,
        "code": code,
        "board": board or "TEST",
        "name": f"{code} Inc",
        "security_type": SecurityType.STOCK,
        "currency": "USD",
        "extension_info": {"ticker_id": ticker_id} if ticker_id is not None else None,
    }
    base.update(overrides)
    return Security(**base)


@pytest.fixture
def mock_settings():
    s = MagicMock()
    s.notify_on_hydration = True
    return s


@pytest.fixture
def security_a():
    """Carries extension metadata deriving native id 10."""
    return make_security("AAPL@NASDAQ", ticker_id=10)


@pytest.fixture
def security_b():
    """No extension metadata."""
    return make_security("MSFT@NASDAQ")


@pytest.fixture
def registry(security_a, security_b):
    return InMemorySecurityRegistry([security_a, security_b])


@pytest.fixture
def storage(registry, mock_settings):
    return TickerStorage(registry, settings=mock_settings)


@pytest.fixture(autouse=True)
def clean_engines():
    """No engine leaks between tests."""
    reset_engines()
    yield
    reset_engines()
