"""
CLI Tests

Validates commands and exit codes.
"""
from __future__ import annotations

import json

import pytest

from bolagstatus.cli import ExitCode, main


class TestStatusCommand:

    def test_status_json(self, capsys) -> None:
        code = main(["status", "--at", "2025-12-24T11:00", "--json"])

        data = json.loads(capsys.readouterr().out)
        assert code == ExitCode.OK
        assert data["state"] == "closed"
        assert data["holiday_name"] == "Julafton"
        assert data["countdown_display"] == "71:00:00"

    def test_status_text(self, capsys) -> None:
        code = main(["status", "--at", "2025-10-13T10:30"])

        out = capsys.readouterr().out
        assert code == ExitCode.OK
        assert "JA" in out
        assert "Stänger kl 19:00: 08:30:00" in out

    def test_invalid_timestamp(self, capsys) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["status", "--at", "igår"])

        assert exc_info.value.code == 2

    def test_watch(self, capsys) -> None:
        code = main(["watch", "--ticks", "2", "--interval", "0.001"])

        assert code == ExitCode.OK
        assert len(capsys.readouterr().out.strip().splitlines()) == 2


class TestInfoCommands:

    def test_holidays_json(self, capsys) -> None:
        code = main(["holidays", "--year", "2026", "--json"])

        data = json.loads(capsys.readouterr().out)
        assert code == ExitCode.OK
        assert len(data) == 17
        assert {"date": "2026-06-19", "name": "Midsommarafton", "closed": True} in data

    def test_holidays_text(self, capsys) -> None:
        assert main(["holidays", "--year", "2025"]) == ExitCode.OK
        assert "Alla helgons dag" in capsys.readouterr().out

    def test_next_holiday(self, capsys) -> None:
        code = main(["holidays", "--next", "--json"])

        assert code == ExitCode.OK
        assert json.loads(capsys.readouterr().out)["closed"] is True

    def test_hours(self, capsys) -> None:
        assert main(["hours"]) == ExitCode.OK
        out = capsys.readouterr().out
        assert "Måndag – Fredag: 10:00 – 19:00" in out
        assert "Söndag: Stängt" in out

    def test_no_command(self, capsys) -> None:
        assert main([]) == ExitCode.USAGE


class TestFailures:

    def test_stores_without_api_key(self, capsys) -> None:
        code = main(["stores", "Göteborg"])

        assert code == ExitCode.SEARCH_FAILED
        assert "API-nyckel saknas" in capsys.readouterr().err

    def test_bad_environment(self, monkeypatch, capsys) -> None:
        monkeypatch.setenv("BS_TIMEZONE", "Mars/Olympus_Mons")

        assert main(["status"]) == ExitCode.CONFIG_ERROR
        assert "BS_CONFIG_ERROR" in capsys.readouterr().err

    def test_missing_hours_file(self, monkeypatch, tmp_path) -> None:
        monkeypatch.setenv("BS_HOURS_FILE", str(tmp_path / "missing.yaml"))

        assert main(["status"]) == ExitCode.CONFIG_ERROR


class TestServeCommand:

    def test_serve_runs_uvicorn(self, monkeypatch) -> None:
        import uvicorn

        calls = []
        monkeypatch.setattr(uvicorn, "run", lambda app, **kwargs: calls.append((app, kwargs)))

        assert main(["serve", "--port", "8123"]) == ExitCode.OK
        app, kwargs = calls[0]
        assert app.title == "bolagstatus"
        assert kwargs["port"] == 8123
