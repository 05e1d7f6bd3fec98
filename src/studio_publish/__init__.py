"""Studio publish panel.

Provides:
- configuration loaded from the environment / `.env`
- a webhook trigger that kicks off a deployment with bearer-token auth
- a small REST API + CLI exposing the panel state and the "Publish" action
"""

__version__ = "0.1.0"

from studio_publish.config import PublishSettings

__all__ = ["__version__", "PublishSettings"]
