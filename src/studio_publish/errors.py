"""Error types raised while publishing."""

from __future__ import annotations


class PublishError(Exception):
    """Base class for webhook trigger failures."""


class ConfigurationMissing(PublishError):
    """Webhook URL or auth token is not configured."""

    def __init__(self, message: str = "Missing configuration") -> None:
        super().__init__(message)


class RequestFailed(PublishError):
    """The webhook answered with a non-2xx status."""

    def __init__(self, status_code: int, body: str) -> None:
        super().__init__(f"HTTP {status_code}: {body}")
        self.status_code = status_code
        self.body = body


class TransportError(PublishError):
    """The webhook could not be reached (DNS, refused connection, timeout...)."""

    def __init__(self, cause: Exception) -> None:
        super().__init__(str(cause))
        self.cause = cause


class DescriptorError(Exception):
    """The application descriptor file is missing or malformed."""
