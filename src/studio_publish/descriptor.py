"""Static application descriptor (`photo-grid.json`).

Only the `app` section is read. It is used to build the "Open" link shown on the
panel; it plays no part in triggering the webhook.
"""

from __future__ import annotations

import json
from pathlib import Path
from urllib.parse import urlparse

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from studio_publish.errors import DescriptorError


class AppDescriptor(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    domain: str
    base_path_name: str = Field(default="", alias="basePathName")

    @property
    def host(self) -> str:
        return urlparse(self.domain).netloc

    @property
    def open_url(self) -> str:
        return f"{self.domain}/{self.base_path_name}"


def load_app_descriptor(path: Path) -> AppDescriptor:
    """Read the `app` section of the descriptor file at `path`."""

    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as e:
        raise DescriptorError(f"App descriptor not found: {path}") from e
    except OSError as e:
        raise DescriptorError(f"App descriptor is not readable: {path}: {e}") from e
    except UnicodeDecodeError as e:
        raise DescriptorError(f"App descriptor is not valid UTF-8: {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise DescriptorError(f"App descriptor is not valid JSON: {path}: {e}") from e

    app = raw.get("app") if isinstance(raw, dict) else None
    if not isinstance(app, dict):
        raise DescriptorError(f"App descriptor is missing the 'app' section: {path}")

    try:
        return AppDescriptor.model_validate(app)
    except ValidationError as e:
        raise DescriptorError(f"Invalid app descriptor: {path}: {e}") from e
