"""Tests for the cache inspector script."""

import pytest

from secstore.core.enums import NativeIdSource
from secstore.scripts.cache_stats import main, parse_native_id
from secstore.storage.database import init_db
from secstore.storage.repositories import SqlSecurityRegistry

from conftest import make_security


@pytest.fixture
def db_url(tmp_path):
    url = f"sqlite:///{tmp_path / 'registry.db'}"
    init_db(url=url)
    registry = SqlSecurityRegistry()
    registry.save(make_security("AAPL@SMART", extension_info={"ibkr_con_id": 265598}))
    registry.save(make_security("IBM@NYSE"))
    return url


class TestParseNativeId:

    def test_ibkr(self):
        assert parse_native_id(NativeIdSource.IBKR, "265598") == 265598

    def test_binance(self):
        assert parse_native_id(NativeIdSource.BINANCE, "BTCUSDT:usdm") == ("BTCUSDT", "usdm")
        assert parse_native_id(NativeIdSource.BINANCE, "BTCUSDT") == ("BTCUSDT", "spot")

    def test_ig(self):
        assert parse_native_id(NativeIdSource.IG, "CS.D.EURUSD.CFD.IP") == "CS.D.EURUSD.CFD.IP"


class TestMain:

    def test_stats(self, db_url, capsys):
        assert main(["--database-url", db_url, "--adapter", "ibkr"]) == 0
        out = capsys.readouterr().out
        assert "Cached:        1" in out
        assert "Registry ids:  2" in out

    def test_lookup_hit(self, db_url, capsys):
        assert main(["--database-url", db_url, "--adapter", "ibkr", "--lookup-id", "265598"]) == 0
        assert "AAPL@SMART" in capsys.readouterr().out

    def test_lookup_miss(self, db_url, capsys):
        main(["--database-url", db_url, "--adapter", "ibkr", "--lookup-id", "1"])
        assert "not cached" in capsys.readouterr().out

    def test_invalid_id(self, db_url, capsys):
        assert main(["--database-url", db_url, "--adapter", "ibkr", "--lookup-id", "abc"]) == 2

    def test_lookup_json(self, db_url, capsys):
        args = ["--database-url", db_url, "--adapter", "ibkr", "--lookup-id", "265598", "--json"]
        assert main(args) == 0
        out = capsys.readouterr().out
        assert '"security_id": "AAPL@SMART"' in out
        assert '"ibkr_con_id": 265598' in out
