"""Test configuration and fixtures."""

import json
from collections.abc import Callable
from pathlib import Path
from unittest.mock import Mock

import pytest
import requests

from studio_publish.webhook import WebhookConfig

_ENV_VARS = (
    "SANITY_STUDIO_HOST_WEBHOOK_URL",
    "SANITY_STUDIO_HOST_WEBHOOK_METHOD",
    "COOLIFY_API_TOKEN",
    "LOG_LEVEL",
    "STUDIO_APP_DESCRIPTOR",
    "STUDIO_CORS_ORIGINS",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Keep the developer's environment and `.env` out of the tests."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def webhook_config() -> WebhookConfig:
    """Provide a fully configured webhook."""
    return WebhookConfig(
        webhook_url="https://deploy.example.com/api/v1/deploy?uuid=abc",
        webhook_method="POST",
        auth_token="test-token",
    )


@pytest.fixture
def descriptor_file(tmp_path: Path) -> Path:
    """Provide an app descriptor on disk."""
    path = tmp_path / "photo-grid.json"
    path.write_text(
        json.dumps({"app": {"domain": "https://photos.example.com", "basePathName": "gallery"}}),
        encoding="utf-8",
    )
    return path


def _response(status_code: int, text: str = "") -> Mock:
    response = Mock(spec=requests.Response)
    response.status_code = status_code
    response.text = text
    return response


@pytest.fixture
def make_response() -> Callable[..., Mock]:
    """Build fake `requests.Response` objects."""
    return _response


@pytest.fixture
def fake_session() -> Mock:
    """Provide a requests session that answers 204 without touching the network."""
    session = Mock(spec=requests.Session)
    session.request.return_value = _response(204)
    return session
