"""Pydantic models for the REST server."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel


class ApiNotification(BaseModel):
    status: Literal["success", "error"]
    title: str
    description: str


class PublishResponse(BaseModel):
    ok: bool
    notification: ApiNotification


class HealthResponse(BaseModel):
    status: str
    version: str
    panel_state: str
