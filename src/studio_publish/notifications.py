"""Toast notifications for the "Publish" action.

The trigger itself knows nothing about the UI. Callers inject a notifier and
receive exactly one :class:`NotificationEvent` per publish.
"""

from __future__ import annotations

import threading
from collections import deque
from collections.abc import Callable
from dataclasses import asdict, dataclass
from typing import Literal

import requests

from studio_publish.webhook import Failure, FailureKind, TriggerResult, WebhookConfig, trigger

NotificationStatus = Literal["success", "error"]


@dataclass(frozen=True, slots=True)
class NotificationEvent:
    status: NotificationStatus
    title: str
    description: str

    def to_dict(self) -> dict[str, str]:
        return asdict(self)


Notifier = Callable[[NotificationEvent], None]

MISSING_CONFIGURATION = NotificationEvent(
    status="error",
    title="Missing configuration",
    description="Webhook URL or API token not set. Check environment variables.",
)

TRIGGER_SUCCEEDED = NotificationEvent(
    status="success",
    title="Triggered Webhook",
    description="Please allow a few minutes for the build and deployment.",
)


def notification_for(result: TriggerResult) -> NotificationEvent:
    """Map a trigger outcome to the toast the editor sees."""

    if isinstance(result, Failure):
        if result.kind is FailureKind.CONFIGURATION_MISSING:
            return MISSING_CONFIGURATION
        return NotificationEvent(
            status="error",
            title="Webhook Trigger Failed",
            description=result.message,
        )
    return TRIGGER_SUCCEEDED


async def publish(
    config: WebhookConfig,
    notify: Notifier,
    *,
    session: requests.Session | None = None,
) -> TriggerResult:
    """Run the trigger and push one notification describing the outcome."""

    result = await trigger(config, session=session)
    notify(notification_for(result))
    return result


class NotificationLog:
    """Keeps the most recent notifications in memory.

    Used as the notifier for the REST server, so the dashboard can poll for toasts.
    """

    def __init__(self, maxlen: int = 50) -> None:
        self._events: deque[NotificationEvent] = deque(maxlen=maxlen)
        self._lock = threading.Lock()

    def __call__(self, event: NotificationEvent) -> None:
        with self._lock:
            self._events.append(event)

    def recent(self) -> list[NotificationEvent]:
        with self._lock:
            return list(self._events)

    def clear(self) -> None:
        with self._lock:
            self._events.clear()
