"""Unit tests for the CLI entrypoint."""

from __future__ import annotations

from unittest.mock import Mock

import pytest
import requests

from studio_publish import main as cli


@pytest.fixture(autouse=True)
def _no_logging_reconfigure(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(cli, "configure_logging", lambda _level: None)


def test_status_unconfigured(capsys: pytest.CaptureFixture[str]) -> None:
    assert cli.main(["status"]) == 0

    out = capsys.readouterr().out
    assert "Panel: unconfigured" in out
    assert "Webhook:" not in out


def test_status_ready(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    monkeypatch.setenv("SANITY_STUDIO_HOST_WEBHOOK_URL", "https://deploy.example.com/hook")
    monkeypatch.setenv("SANITY_STUDIO_HOST_WEBHOOK_METHOD", "GET")

    assert cli.main(["status"]) == 0

    out = capsys.readouterr().out
    assert "Panel: ready" in out
    assert "Webhook: GET https://deploy.example.com/hook" in out


def test_publish_missing_configuration_exits_1(capsys: pytest.CaptureFixture[str]) -> None:
    assert cli.main(["publish"]) == 1

    err = capsys.readouterr().err
    assert "Missing configuration" in err


def test_publish_success_exits_0(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str], make_response
) -> None:
    monkeypatch.setenv("SANITY_STUDIO_HOST_WEBHOOK_URL", "https://deploy.example.com/hook")
    monkeypatch.setenv("COOLIFY_API_TOKEN", "test-token")
    monkeypatch.setattr(requests.Session, "request", Mock(return_value=make_response(200)))

    assert cli.main(["publish"]) == 0

    out = capsys.readouterr().out
    assert "Triggered Webhook" in out


def test_serve_runs_uvicorn(monkeypatch: pytest.MonkeyPatch) -> None:
    import uvicorn

    run = Mock()
    monkeypatch.setattr(uvicorn, "run", run)

    assert cli.main(["serve", "--port", "9001"]) == 0

    run.assert_called_once()
    _args, kwargs = run.call_args
    assert kwargs == {"host": "127.0.0.1", "port": 9001}


def test_version_flag(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["--version"])

    assert excinfo.value.code == 0
    assert "studio-publish" in capsys.readouterr().out
