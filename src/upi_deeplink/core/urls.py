"""
Endpoint URL construction.
"""

from __future__ import annotations

from .constants import (
    AUTH_JWT,
    AUTH_OAUTH,
    MODE_PRODUCTION,
    MODE_SANDBOX,
    OAUTH_PATH_PREFIX,
    PRODUCTION_BASE,
    SANDBOX_BASE,
)

__all__ = ["get_url_path"]


def get_url_path(
    endpoint: str,
    auth_type: str = AUTH_JWT,
    mode: str = MODE_SANDBOX,
    *,
    production_base: str = PRODUCTION_BASE,
    sandbox_base: str = SANDBOX_BASE,
) -> str:
    """
    Return the absolute URL for ``endpoint``.

    The host is picked by ``mode``; OAuth requests go through the ``/v2``
    prefix.
    """
    base = production_base if mode == MODE_PRODUCTION else sandbox_base
    prefix = OAUTH_PATH_PREFIX if auth_type == AUTH_OAUTH else ""
    return f"{base}{prefix}{endpoint}"
