"""FastAPI server adapter for the publish panel.

Design intent:
- Keep trigger/panel logic in `studio_publish.*`
- Keep server-specific concerns (routing, CORS, notification buffering) here
"""

from __future__ import annotations

__all__ = ["create_app"]

from studio_publish.server.app import create_app
