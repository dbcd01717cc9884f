"""
Exceptions raised by the deeplink client.
"""

from __future__ import annotations

import requests

__all__ = [
    "ConfigError",
    "DeeplinkError",
    "ForbiddenError",
    "OperationNotAvailable",
    "RequestFailed",
    "UnsupportedAuthType",
]


class DeeplinkError(Exception):
    """Base class for every error raised by this package."""


class ConfigError(DeeplinkError):
    """Raised when the supplied configuration is invalid."""


class UnsupportedAuthType(DeeplinkError):
    """Raised when a token is requested for an auth type other than JWT."""

    def __init__(self, auth_type: str) -> None:
        super().__init__(f"{auth_type} is not supported yet")
        self.auth_type = auth_type


class OperationNotAvailable(DeeplinkError):
    """Raised when a sandbox-only operation is called in PRODUCTION mode."""

    def __init__(self, operation: str, mode: str) -> None:
        super().__init__(f"{operation} is not available in {mode}")
        self.operation = operation
        self.mode = mode


class ForbiddenError(DeeplinkError, requests.HTTPError):
    """
    The server answered 403.

    The original ``response`` and ``request`` are kept as-is so callers can
    inspect status, headers and body.
    """


class RequestFailed(DeeplinkError):
    """
    Any other transport failure.

    The message is the server's response body when there is one, otherwise the
    transport error message. Status code and headers are not retained.
    """
