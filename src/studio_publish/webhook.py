"""Deployment webhook trigger.

One call, one request: the trigger never retries and never overrides the HTTP
client's default timeout. Failures are folded into a :class:`Failure` result so
callers only ever have to render a message.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from enum import Enum
from urllib.parse import urlparse

import requests

from studio_publish.errors import (
    ConfigurationMissing,
    PublishError,
    RequestFailed,
    TransportError,
)

logger = logging.getLogger(__name__)

DEFAULT_WEBHOOK_METHOD = "POST"


@dataclass(frozen=True, slots=True)
class WebhookConfig:
    """Webhook target and credentials, fixed for the process lifetime."""

    webhook_url: str | None = None
    webhook_method: str = DEFAULT_WEBHOOK_METHOD
    auth_token: str | None = None

    @property
    def is_complete(self) -> bool:
        return bool(self.webhook_url) and bool(self.auth_token)


class FailureKind(str, Enum):
    CONFIGURATION_MISSING = "configuration_missing"
    REQUEST_FAILED = "request_failed"
    TRANSPORT_ERROR = "transport_error"


@dataclass(frozen=True, slots=True)
class Success:
    ok: bool = True


@dataclass(frozen=True, slots=True)
class Failure:
    kind: FailureKind
    message: str
    ok: bool = False


TriggerResult = Success | Failure


def _host(url: str | None) -> str:
    # Deploy URLs can carry credentials in the query string.
    return urlparse(url or "").netloc


def _failure_kind(error: PublishError) -> FailureKind:
    if isinstance(error, ConfigurationMissing):
        return FailureKind.CONFIGURATION_MISSING
    if isinstance(error, RequestFailed):
        return FailureKind.REQUEST_FAILED
    return FailureKind.TRANSPORT_ERROR


def send_webhook(config: WebhookConfig, *, session: requests.Session | None = None) -> None:
    """Call the webhook once, blocking until it answers.

    Raises:
        ConfigurationMissing: URL or token is absent (no request is made).
        RequestFailed: the webhook answered with a non-2xx status.
        TransportError: the request never got a response.
    """

    if not config.is_complete:
        raise ConfigurationMissing()
    assert config.webhook_url is not None

    http = session if session is not None else requests.Session()
    # ValueError: non-Latin-1 header values or a method that is not an HTTP token.
    try:
        resp = http.request(
            config.webhook_method,
            config.webhook_url,
            headers={"Authorization": f"Bearer {config.auth_token}"},
        )
    except (requests.RequestException, ValueError) as e:
        raise TransportError(e) from e
    finally:
        if session is None:
            http.close()

    if not 200 <= resp.status_code < 300:
        raise RequestFailed(resp.status_code, resp.text)


async def trigger(
    config: WebhookConfig, *, session: requests.Session | None = None
) -> TriggerResult:
    """Trigger the deployment webhook and report the outcome.

    The HTTP call runs in a worker thread, so the event loop stays free while the
    webhook responds. Concurrent calls are not coordinated.
    """

    if not config.is_complete:
        logger.warning(
            "Webhook trigger skipped: missing configuration",
            extra={
                "has_url": bool(config.webhook_url),
                "has_token": bool(config.auth_token),
            },
        )
        return Failure(kind=FailureKind.CONFIGURATION_MISSING, message=str(ConfigurationMissing()))

    logger.info(
        "Triggering webhook",
        extra={"method": config.webhook_method, "host": _host(config.webhook_url)},
    )
    try:
        await asyncio.to_thread(send_webhook, config, session=session)
    except PublishError as e:
        logger.warning(
            "Webhook trigger failed",
            extra={"host": _host(config.webhook_url), "error": str(e)},
        )
        return Failure(kind=_failure_kind(e), message=str(e))

    logger.info("Webhook triggered", extra={"host": _host(config.webhook_url)})
    return Success()
