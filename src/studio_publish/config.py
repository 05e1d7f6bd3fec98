"""Configuration for the publish panel.

Configuration is loaded from:
- environment variables
- and a local `.env` file (if present)

The variable names match the ones the studio build already exposes, so an
existing deployment `.env` can be reused as-is.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from studio_publish.webhook import DEFAULT_WEBHOOK_METHOD, WebhookConfig


class PublishSettings(BaseSettings):
    """Settings for the publish panel.

    Environment variables:
    - SANITY_STUDIO_HOST_WEBHOOK_URL     (optional)
    - SANITY_STUDIO_HOST_WEBHOOK_METHOD  (optional, defaults to POST)
    - COOLIFY_API_TOKEN                  (optional)
    - LOG_LEVEL                          (optional)
    - STUDIO_APP_DESCRIPTOR              (optional)
    - STUDIO_CORS_ORIGINS                (optional)

    Notes:
        Missing webhook values never fail validation. The panel must still come up
        and explain what is missing; the trigger checks credentials at click time.
    """

    webhook_url: str | None = Field(
        default=None,
        validation_alias="SANITY_STUDIO_HOST_WEBHOOK_URL",
        description="Deployment webhook endpoint",
    )
    webhook_method: str = Field(
        default=DEFAULT_WEBHOOK_METHOD,
        validation_alias="SANITY_STUDIO_HOST_WEBHOOK_METHOD",
        description="HTTP method used to call the webhook",
    )
    auth_token: str | None = Field(
        default=None,
        validation_alias="COOLIFY_API_TOKEN",
        description="Bearer token sent with the webhook call",
    )

    log_level: str = Field(
        default="INFO",
        validation_alias="LOG_LEVEL",
        description="Root logging level",
    )

    app_descriptor_path: Path = Field(
        default=Path("photo-grid.json"),
        validation_alias="STUDIO_APP_DESCRIPTOR",
        description="JSON file describing the published application (domain, basePathName)",
    )

    # Dev-friendly CORS for the studio dev server.
    cors_origins: str = Field(
        default="http://localhost:3333,http://127.0.0.1:3333",
        validation_alias="STUDIO_CORS_ORIGINS",
        description="Comma-separated list of allowed CORS origins.",
    )

    model_config = SettingsConfigDict(
        env_prefix="",
        env_file=".env",
        extra="ignore",
        populate_by_name=True,
        frozen=True,
    )

    @field_validator("webhook_url", "auth_token", mode="before")
    @classmethod
    def _blank_is_missing(cls, value: object) -> object:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("webhook_method", mode="before")
    @classmethod
    def _default_method(cls, value: object) -> object:
        if value is None or (isinstance(value, str) and not value.strip()):
            return DEFAULT_WEBHOOK_METHOD
        return value

    def webhook_config(self) -> WebhookConfig:
        """Immutable webhook configuration handed to the trigger and the panel."""

        return WebhookConfig(
            webhook_url=self.webhook_url,
            webhook_method=self.webhook_method,
            auth_token=self.auth_token,
        )

    def parsed_cors_origins(self) -> list[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]
