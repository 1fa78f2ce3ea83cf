"""Tests for the trading-system adapters."""

import pytest

from secstore.adapters import (
    BinanceSecurityStorage,
    IBKRSecurityStorage,
    IGSecurityStorage,
    get_adapter_class,
)
from secstore.core.enums import NativeIdSource, SecurityType
from secstore.core.models import Security
from secstore.storage.registry import InMemorySecurityRegistry


def _sec(security_id, **extension):
    code, _, board = security_id.partition("@")
    return Security(
        security_id=security_id,
        code=code,
        board=board,
        security_type=SecurityType.STOCK,
        extension_info=extension or None,
    )


class TestIBKR:

    @pytest.fixture
    def storage(self, mock_settings):
        registry = InMemorySecurityRegistry([
            _sec("AAPL@SMART", ibkr_con_id=265598),
            _sec("EURUSD@IDEALPRO", ibkr_con_id="12087792"),
            _sec("BAD@SMART", ibkr_con_id="not-a-number"),
            _sec("UNQ@SMART", ibkr_con_id=0),
            _sec("IBM@NYSE"),
        ])
        return IBKRSecurityStorage(registry, settings=mock_settings)

    def test_hydration(self, storage):
        assert storage.count == 2
        assert storage.get_by_native_id(265598).security_id == "AAPL@SMART"

    def test_string_con_id_coerced(self, storage):
        assert storage.get_by_native_id(12087792).security_id == "EURUSD@IDEALPRO"
        assert storage.lookup(Security(extension_info={"ibkr_con_id": "12087792"}))[0].code == "EURUSD"

    def test_invalid_con_id_falls_through(self, storage):
        result = storage.lookup(Security(code="BAD", extension_info={"ibkr_con_id": "junk"}))
        assert [s.security_id for s in result] == ["BAD@SMART"]

    def test_bool_is_not_a_con_id(self, storage):
        assert storage.create_native_id(_sec("X@Y", ibkr_con_id=True)) is None

    def test_infinite_con_id_skipped_on_hydration(self, mock_settings):
        registry = InMemorySecurityRegistry([
            _sec("AAPL@SMART", ibkr_con_id=265598),
            _sec("INF@SMART", ibkr_con_id=float("inf")),
            _sec("NAN@SMART", ibkr_con_id=float("nan")),
            _sec("STRINF@SMART", ibkr_con_id="inf"),
        ])
        storage = IBKRSecurityStorage(registry, settings=mock_settings)

        assert storage.count == 1
        assert storage.get_by_native_id(265598).security_id == "AAPL@SMART"

    def test_fractional_con_id_not_truncated(self, storage):
        assert storage.create_native_id(_sec("X@Y", ibkr_con_id=265598.7)) is None
        assert storage.lookup(Security(code="ZZZ", extension_info={"ibkr_con_id": 265598.7})) == []
        assert storage.lookup(Security(code="ZZZ", extension_info={"ibkr_con_id": "265598.7"})) == []

    def test_integral_float_con_id_accepted(self, storage):
        result = storage.lookup(Security(extension_info={"ibkr_con_id": 265598.0}))
        assert [s.security_id for s in result] == ["AAPL@SMART"]

    def test_wrong_type_lookup_is_a_miss(self, storage):
        assert storage.get_by_native_id("265598") is None
        assert storage.get_by_native_id([265598]) is None


class TestIG:

    @pytest.fixture
    def storage(self, mock_settings):
        registry = InMemorySecurityRegistry([
            _sec("EURUSD@IG", ig_epic="CS.D.EURUSD.CFD.IP"),
            _sec("FTSE@IG", ig_epic="  ix.d.ftse.daily.ip "),
            _sec("BLANK@IG", ig_epic=""),
        ])
        return IGSecurityStorage(registry, settings=mock_settings)

    def test_hydration(self, storage):
        assert storage.count == 2

    def test_case_insensitive_epic(self, storage):
        result = storage.lookup(Security(extension_info={"ig_epic": "cs.d.eurusd.cfd.ip"}))
        assert [s.security_id for s in result] == ["EURUSD@IG"]

    def test_epic_stripped_and_upper(self, storage):
        sec = storage.get_by_native_id("IX.D.FTSE.DAILY.IP")
        assert storage.get_native_id(sec) == "IX.D.FTSE.DAILY.IP"

    def test_non_string_id_is_a_miss(self, storage):
        assert storage.get_by_native_id(123) is None
        assert storage.get_by_native_id(None) is None


class TestBinance:

    @pytest.fixture
    def storage(self, mock_settings):
        registry = InMemorySecurityRegistry([
            _sec("BTCUSDT@BINANCE", binance_symbol="BTCUSDT"),
            _sec("BTCUSDT@BINANCE_USDM", binance_symbol="BTCUSDT", binance_market="usdm"),
            _sec("ETHUSDT@BINANCE_X", binance_symbol="ETHUSDT", binance_market="margin"),
        ])
        return BinanceSecurityStorage(registry, settings=mock_settings)

    def test_same_symbol_different_markets(self, storage):
        assert storage.count == 2
        assert storage.get_by_native_id(("BTCUSDT", "spot")).security_id == "BTCUSDT@BINANCE"
        assert storage.get_by_native_id(("btcusdt", "USDM")).security_id == "BTCUSDT@BINANCE_USDM"

    def test_unknown_market_not_indexed(self, storage):
        assert storage.get_by_native_id(("ETHUSDT", "margin")) is None

    def test_native_id_is_tuple(self, storage):
        sec = storage.get_by_native_id(("BTCUSDT", "spot"))
        assert storage.get_native_id(sec) == ("BTCUSDT", "spot")

    def test_symbol_and_market_stripped(self, storage):
        criteria = Security(extension_info={"binance_symbol": " btcusdt ", "binance_market": "USDM "})
        result = storage.lookup(criteria)
        assert [s.security_id for s in result] == ["BTCUSDT@BINANCE_USDM"]
        assert storage.get_by_native_id((" BTCUSDT", "spot ")).security_id == "BTCUSDT@BINANCE"

    def test_padded_duplicate_not_indexed_twice(self, storage):
        storage.save(_sec("BTCUSDT@DUP", binance_symbol=" BTCUSDT ", binance_market=" spot"))
        assert storage.count == 2

    def test_malformed_id_is_a_miss(self, storage):
        assert storage.get_by_native_id("BTCUSDT") is None
        assert storage.get_by_native_id(("BTCUSDT",)) is None
        assert storage.get_by_native_id(["BTCUSDT", "spot"]) is None
        assert storage.get_by_native_id((1, 2)) is None
        assert storage.get_by_native_id(("BTCUSDT", "spot")) is not None


class TestAdapterLookup:

    @pytest.mark.parametrize(
        "source,cls",
        [
            (NativeIdSource.IBKR, IBKRSecurityStorage),
            ("ig", IGSecurityStorage),
            ("binance", BinanceSecurityStorage),
        ],
    )
    def test_get_adapter_class(self, source, cls):
        assert get_adapter_class(source) is cls

    def test_unknown_adapter(self):
        with pytest.raises(ValueError):
            get_adapter_class("oanda")
