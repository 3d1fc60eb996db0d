"""Tests for the uvicorn launch helpers."""

from __future__ import annotations

import sys

import pytest
from typer.testing import CliRunner

from sprint_orchestrator.api import serve
from sprint_orchestrator.api.serve import ServeConfig, ServeError, build_serve_command
from sprint_orchestrator.cli import app


def test_build_serve_command_uses_app_factory() -> None:
    command = build_serve_command(ServeConfig(host="0.0.0.0", port=9000, reload=True))
    assert command[:3] == [sys.executable, "-m", "uvicorn"]
    assert "sprint_orchestrator.api.app:create_app" in command
    assert "--factory" in command
    assert command[-5:] == ["--host", "0.0.0.0", "--port", "9000", "--reload"]


def test_serve_config_rejects_out_of_range_port() -> None:
    with pytest.raises(ValueError):
        ServeConfig(port=0)


def test_api_serve_command_reports_busy_port(tmp_path, monkeypatch) -> None:
    def _busy(host: str, port: int) -> None:
        raise ServeError(f"Port {port} on {host} is unavailable: in use.")

    monkeypatch.setattr(serve, "ensure_port_available", _busy)
    result = CliRunner().invoke(
        app,
        ["--log-file", str(tmp_path / "cli.log"), "api", "serve", "--port", "8123"],
    )
    assert result.exit_code == 1
    assert "unavailable" in result.stdout


def test_api_serve_command_propagates_exit_code(tmp_path, monkeypatch) -> None:
    calls: list[list[str]] = []

    class _Completed:
        returncode = 3

    def _fake_run(command: list[str], check: bool) -> _Completed:
        calls.append(command)
        return _Completed()

    monkeypatch.setattr(serve, "ensure_port_available", lambda host, port: None)
    monkeypatch.setattr(serve.subprocess, "run", _fake_run)
    result = CliRunner().invoke(app, ["--log-file", str(tmp_path / "cli.log"), "api", "serve"])
    assert result.exit_code == 3
    assert calls and calls[0][-4:] == ["--host", "127.0.0.1", "--port", "8080"]
