"""Tests for opencagedata.cli module."""

import pytest

from opencagedata import cli
from opencagedata.exceptions import InvalidAddress


class TestMain:
    def test_missing_api_key_exits(self, monkeypatch, capsys):
        monkeypatch.delenv("OPENCAGE_API_KEY", raising=False)
        monkeypatch.setattr("sys.argv", ["opencagedata", "Berlin"])
        with pytest.raises(SystemExit) as exc_info:
            cli.main()
        assert exc_info.value.code == 2
        assert "OPENCAGE_API_KEY" in capsys.readouterr().err

    def test_single_lookup_prints_results(self, monkeypatch, capsys):
        async def fake_lookup(client, args):
            assert args == ["Berlin"]
            return [
                {
                    "formatted": "Berlin, Germany",
                    "confidence": 8,
                    "confidenceInM": 1000.0,
                    "geometry": {"lat": 52.52, "lng": 13.40},
                }
            ]

        monkeypatch.setenv("OPENCAGE_API_KEY", "k")
        monkeypatch.setattr("sys.argv", ["opencagedata", "Berlin"])
        monkeypatch.setattr(cli, "_lookup", fake_lookup)
        cli.main()
        out = capsys.readouterr().out
        assert "Berlin, Germany" in out
        assert "1000.0" in out

    def test_two_text_arguments_search_joined(self, monkeypatch, capsys):
        seen = []

        async def fake_lookup(client, args):
            seen.append(args)
            return []

        monkeypatch.setenv("OPENCAGE_API_KEY", "k")
        monkeypatch.setattr("sys.argv", ["opencagedata", "10 Downing St", "London"])
        monkeypatch.setattr(cli, "_lookup", fake_lookup)
        cli.main()
        assert seen == [["10 Downing St London"]]

    def test_lookup_error_exits_1(self, monkeypatch, capsys):
        async def failing_lookup(client, args):
            raise InvalidAddress()

        monkeypatch.setenv("OPENCAGE_API_KEY", "k")
        monkeypatch.setattr("sys.argv", ["opencagedata", "51.5", "-0.1"])
        monkeypatch.setattr(cli, "_lookup", failing_lookup)
        with pytest.raises(SystemExit) as exc_info:
            cli.main()
        assert exc_info.value.code == 1
        assert "INVALID_ADDRESS" in capsys.readouterr().err


class TestLooksNumeric:
    def test_coordinates(self):
        assert cli._looks_numeric(["51.5", "-0.12"])

    def test_text(self):
        assert not cli._looks_numeric(["Paris", "France"])
