"""
Tests for listen address parsing and the command line entry point.
"""

import asyncio

import pytest

import run
from recipes_api.app.core.address import parse_addr


class TestParseAddr:
    """Tests for ``host:port`` parsing."""

    def test_port_only_binds_all_interfaces(self):
        assert parse_addr(":5000") == ("0.0.0.0", 5000)

    def test_host_and_port(self):
        assert parse_addr("127.0.0.1:8080") == ("127.0.0.1", 8080)

    def test_ipv6_host(self):
        assert parse_addr("[::1]:9000") == ("::1", 9000)

    @pytest.mark.parametrize("addr", ["5000", "localhost", "host:port", ":70000", ":-1"])
    def test_invalid(self, addr):
        with pytest.raises(ValueError):
            parse_addr(addr)


class TestCommandLine:
    """Tests for ``run.py`` argument handling."""

    def test_default_addr(self):
        assert run.parse_args([]).addr == ("0.0.0.0", 5000)

    def test_addr_flag(self):
        assert run.parse_args(["--addr", "localhost:8000"]).addr == ("localhost", 8000)

    def test_bad_addr_flag_exits(self):
        with pytest.raises(SystemExit):
            run.parse_args(["--addr", "nope"])

    def test_missing_seed_file_exits_before_serving(self, tmp_path, monkeypatch):
        monkeypatch.setattr(run.settings, "recipes_file", str(tmp_path / "missing.json"))
        served = []
        monkeypatch.setattr(run, "serve", lambda *a: served.append(a))
        with pytest.raises(SystemExit) as exc_info:
            run.main([])
        assert exc_info.value.code == 1
        assert served == []

    def test_serve_disables_uvicorn_access_log(self, monkeypatch):
        configs = []

        class FakeServer:
            def __init__(self, config):
                configs.append(config)

            async def serve(self):
                return None

        monkeypatch.setattr(run, "Server", FakeServer)
        asyncio.run(run.serve(object(), "127.0.0.1", 5000))
        assert len(configs) == 1
        assert configs[0].access_log is False
        assert (configs[0].host, configs[0].port) == ("127.0.0.1", 5000)
