"""
Client library for the UPI deeplink payment API.

The most useful pieces are re-exported here so integrators can
``from upi_deeplink import ...`` without navigating the package.
"""

from .api import create_client
from .core import (
    PAYMENT_LINK_BASE,
    PRODUCTION_BASE,
    REFUNDS_BASE,
    SANDBOX_BASE,
    TRIGGER_MOCK_PAYMENT,
    ClientConfig,
    ClientEnvironment,
    ClientParameters,
    ConfigError,
    DeeplinkClient,
    DeeplinkError,
    ForbiddenError,
    OperationNotAvailable,
    RequestFailed,
    TokenProvider,
    Transport,
    UnsupportedAuthType,
    build_environment,
    generate_jwt_token,
    get_url_path,
    load_client_config,
    load_env_file,
)

__version__ = "0.1.0"

__all__ = (
    "ClientConfig",
    "ClientEnvironment",
    "ClientParameters",
    "ConfigError",
    "DeeplinkClient",
    "DeeplinkError",
    "ForbiddenError",
    "OperationNotAvailable",
    "PAYMENT_LINK_BASE",
    "PRODUCTION_BASE",
    "REFUNDS_BASE",
    "RequestFailed",
    "SANDBOX_BASE",
    "TRIGGER_MOCK_PAYMENT",
    "TokenProvider",
    "Transport",
    "UnsupportedAuthType",
    "build_environment",
    "create_client",
    "generate_jwt_token",
    "get_url_path",
    "load_client_config",
    "load_env_file",
)
