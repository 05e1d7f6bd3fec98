from __future__ import annotations

import json
import logging

from studio_publish.logging import JsonFormatter, configure_logging


def _record(**extra: object) -> logging.LogRecord:
    record = logging.LogRecord(
        name="studio_publish.webhook",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg="Triggering %s",
        args=("webhook",),
        exc_info=None,
    )
    record.__dict__.update(extra)
    return record


def test_json_formatter_includes_extra() -> None:
    payload = json.loads(JsonFormatter().format(_record(method="POST", url="https://x.test")))

    assert payload["level"] == "INFO"
    assert payload["logger"] == "studio_publish.webhook"
    assert payload["message"] == "Triggering webhook"
    assert payload["extra"] == {"method": "POST", "url": "https://x.test"}


def test_json_formatter_masks_secrets() -> None:
    payload = json.loads(JsonFormatter().format(_record(auth_token="secret", Authorization="x")))

    assert payload["extra"] == {"auth_token": "***", "Authorization": "***"}


def test_configure_logging_replaces_handlers() -> None:
    root = logging.getLogger()
    saved_handlers, saved_level = list(root.handlers), root.level
    try:
        configure_logging("debug")
        configure_logging("warning")

        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, JsonFormatter)
        assert root.level == logging.WARNING
        assert logging.getLogger("urllib3").level == logging.WARNING
    finally:
        for handler in list(root.handlers):
            root.removeHandler(handler)
        for handler in saved_handlers:
            root.addHandler(handler)
        root.setLevel(saved_level)
