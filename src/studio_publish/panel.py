"""Panel view model.

The panel is either Unconfigured (no webhook URL) or Ready. It is chosen once per
render from the configuration alone; a missing token is only reported when the
editor clicks "Publish".
"""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum

from pydantic import BaseModel

from studio_publish.descriptor import AppDescriptor
from studio_publish.webhook import WebhookConfig

DOCUMENTATION_URL = (
    "https://github.com/kwickramasekara/photo-grid/wiki/Customizations#environment-variables"
)
UNCONFIGURED_MESSAGE = "Oops! We couldn't find a valid webhook URL. Please see documentation."


class PanelState(str, Enum):
    UNCONFIGURED = "unconfigured"
    READY = "ready"


class ReadyPanel(BaseModel):
    host: str
    open_url: str
    webhook_method: str
    webhook_url: str
    action: str = "publish"


class PanelView(BaseModel):
    state: PanelState
    message: str | None = None
    documentation_url: str | None = None
    ready: ReadyPanel | None = None


def panel_state(config: WebhookConfig) -> PanelState:
    if not config.webhook_url:
        return PanelState.UNCONFIGURED
    return PanelState.READY


def build_panel(config: WebhookConfig, descriptor: Callable[[], AppDescriptor]) -> PanelView:
    """Build the panel for `config`.

    `descriptor` is only called for the Ready state, so an unconfigured panel never
    depends on the application descriptor being present.
    """

    if panel_state(config) is PanelState.UNCONFIGURED:
        return PanelView(
            state=PanelState.UNCONFIGURED,
            message=UNCONFIGURED_MESSAGE,
            documentation_url=DOCUMENTATION_URL,
        )

    assert config.webhook_url is not None
    app = descriptor()
    return PanelView(
        state=PanelState.READY,
        ready=ReadyPanel(
            host=app.host,
            open_url=app.open_url,
            webhook_method=config.webhook_method,
            webhook_url=config.webhook_url,
        ),
    )
