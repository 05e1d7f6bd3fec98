"""FastAPI app factory.

Endpoints are thin wrappers over the panel and the webhook trigger.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from studio_publish import __version__
from studio_publish.config import PublishSettings
from studio_publish.descriptor import AppDescriptor, load_app_descriptor
from studio_publish.errors import DescriptorError
from studio_publish.notifications import (
    NotificationEvent,
    NotificationLog,
    notification_for,
    publish,
)
from studio_publish.panel import PanelView, build_panel, panel_state
from studio_publish.server.models import ApiNotification, HealthResponse, PublishResponse

logger = logging.getLogger(__name__)


def _to_api_notification(event: NotificationEvent) -> ApiNotification:
    return ApiNotification.model_validate(event.to_dict())


def create_app(settings: PublishSettings | None = None) -> FastAPI:
    settings = settings or PublishSettings()
    config = settings.webhook_config()
    notifications = NotificationLog()

    app = FastAPI(
        title="Studio Publish",
        version=__version__,
        description="Publish panel: trigger the deployment webhook and read its status.",
        openapi_url="/api/openapi.json",
        docs_url="/api/docs",
        redoc_url="/api/redoc",
    )

    app.state.settings = settings
    app.state.notifications = notifications

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.parsed_cors_origins(),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    def _descriptor() -> AppDescriptor:
        try:
            return load_app_descriptor(settings.app_descriptor_path)
        except DescriptorError as e:
            logger.error("App descriptor unavailable", extra={"error": str(e)})
            raise HTTPException(status_code=500, detail=str(e)) from e

    @app.get("/api/health", response_model=HealthResponse)
    def health() -> HealthResponse:
        return HealthResponse(
            status="ok", version=__version__, panel_state=panel_state(config).value
        )

    @app.get("/api/panel", response_model=PanelView)
    def get_panel() -> PanelView:
        return build_panel(config, _descriptor)

    @app.post("/api/publish", response_model=PublishResponse)
    async def post_publish() -> PublishResponse:
        # Failures are reported in the body; the HTTP call itself succeeded.
        result = await publish(config, notifications)
        return PublishResponse(
            ok=result.ok, notification=_to_api_notification(notification_for(result))
        )

    @app.get("/api/notifications", response_model=list[ApiNotification])
    def list_notifications() -> list[ApiNotification]:
        return [_to_api_notification(e) for e in notifications.recent()]

    return app
