"""
Public, high-level helpers for interacting with the deeplink payment API.
"""

from __future__ import annotations

from typing import Any, Callable, Mapping, Optional

import requests

from .core.client import DeeplinkClient
from .core.config import ClientConfig, ClientParameters, load_client_config

__all__ = ["create_client"]


def create_client(
    *,
    config: Optional[ClientConfig] = None,
    session: Optional[requests.Session] = None,
    clock: Optional[Callable[[], float]] = None,
    env_file: Optional[str] = ".env",
    overrides: Optional[Mapping[str, str]] = None,
    base: Optional[Mapping[str, str]] = None,
    parameters: Optional[ClientParameters] = None,
    scheme_id: Optional[str] = None,
    secret: Optional[str] = None,
    product_instance_id: Optional[str] = None,
    auth_type: Optional[str] = None,
    mode: Optional[str] = None,
    production_base: Optional[str] = None,
    sandbox_base: Optional[str] = None,
    timeout_seconds: Optional[Any] = None,
) -> DeeplinkClient:
    """
    Construct a :class:`DeeplinkClient`.

    Callers can either supply a ready-made :class:`ClientConfig` or let the
    helper assemble one from environment data and keyword arguments.
    """
    if config is None:
        config = load_client_config(
            env_file=env_file,
            overrides=overrides,
            base=base,
            parameters=parameters,
            scheme_id=scheme_id,
            secret=secret,
            product_instance_id=product_instance_id,
            auth_type=auth_type,
            mode=mode,
            production_base=production_base,
            sandbox_base=sandbox_base,
            timeout_seconds=timeout_seconds,
        )
    else:
        extras = (
            overrides,
            base,
            parameters,
            scheme_id,
            secret,
            product_instance_id,
            auth_type,
            mode,
            production_base,
            sandbox_base,
            timeout_seconds,
        )
        if any(item is not None and item != {} for item in extras):
            raise ValueError(
                "Provide either a pre-built ClientConfig or individual parameters, not both."
            )
    return DeeplinkClient.from_config(config, session=session, clock=clock)
