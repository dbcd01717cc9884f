"""
Core pieces of the deeplink client: signing, URL building and transport.
"""

from .client import DeeplinkClient
from .config import ClientConfig, ClientParameters, load_client_config
from .constants import (
    PAYMENT_LINK_BASE,
    PRODUCTION_BASE,
    REFUNDS_BASE,
    SANDBOX_BASE,
    TRIGGER_MOCK_PAYMENT,
)
from .environment import ClientEnvironment, build_environment, load_env_file
from .errors import (
    ConfigError,
    DeeplinkError,
    ForbiddenError,
    OperationNotAvailable,
    RequestFailed,
    UnsupportedAuthType,
)
from .tokens import TokenProvider, generate_jwt_token
from .transport import Transport
from .urls import get_url_path

__all__ = [
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
    "generate_jwt_token",
    "get_url_path",
    "load_client_config",
    "load_env_file",
]
