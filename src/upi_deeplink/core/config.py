"""
Configuration objects and helpers for the deeplink client.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional

from .constants import (
    AUTH_JWT,
    MODE_PRODUCTION,
    MODE_SANDBOX,
    MODES,
    PRODUCTION_BASE,
    SANDBOX_BASE,
)
from .environment import build_environment
from .errors import ConfigError

__all__ = [
    "ClientConfig",
    "ClientParameters",
    "load_client_config",
]

_PARAMETER_TO_ENV_KEY = {
    "scheme_id": "DEEPLINK_SCHEME_ID",
    "secret": "DEEPLINK_SECRET",
    "product_instance_id": "DEEPLINK_PRODUCT_INSTANCE_ID",
    "auth_type": "DEEPLINK_AUTH_TYPE",
    "mode": "DEEPLINK_MODE",
    "production_base": "DEEPLINK_PRODUCTION_BASE",
    "sandbox_base": "DEEPLINK_SANDBOX_BASE",
    "timeout_seconds": "DEEPLINK_TIMEOUT_SECONDS",
}


@dataclass(frozen=True)
class ClientParameters:
    """
    Explicit parameter bundle for constructing :class:`ClientConfig`.

    Callers can either instantiate this helper or pass the individual keyword
    arguments directly to :func:`load_client_config`.
    """

    scheme_id: Optional[str] = None
    secret: Optional[str] = None
    product_instance_id: Optional[str] = None
    auth_type: Optional[str] = None
    mode: Optional[str] = None
    production_base: Optional[str] = None
    sandbox_base: Optional[str] = None
    timeout_seconds: Optional[float | int | str] = None

    def as_overrides(self) -> Dict[str, str]:
        overrides: Dict[str, str] = {}
        for field_name, env_key in _PARAMETER_TO_ENV_KEY.items():
            value = getattr(self, field_name)
            if value is None:
                continue
            overrides[env_key] = str(value)
        return overrides


def _collect_parameter_overrides(
    parameters: Optional[ClientParameters],
    explicit: Mapping[str, Any],
) -> Dict[str, str]:
    overrides: Dict[str, str] = {}
    if parameters is not None:
        overrides.update(parameters.as_overrides())

    for key, value in explicit.items():
        if value is None:
            continue
        try:
            env_key = _PARAMETER_TO_ENV_KEY[key]
        except KeyError as exc:
            raise TypeError(f"Unknown client parameter '{key}'") from exc
        overrides[env_key] = str(value)
    return overrides


def _require(values: Mapping[str, str], env_key: str) -> str:
    value = values.get(env_key) or ""
    if not value.strip():
        raise ConfigError(f"{env_key} must be provided")
    return value


def _normalize_mode(raw_mode: str) -> str:
    mode = raw_mode.strip().upper()
    if mode not in MODES:
        raise ConfigError(
            f"DEEPLINK_MODE must be one of {', '.join(MODES)}, got '{raw_mode}'"
        )
    return mode


def _normalize_base(raw_base: str, field_name: str) -> str:
    value = raw_base.strip().rstrip("/")
    if not value.startswith(("http://", "https://")):
        raise ConfigError(f"{field_name} must be an http(s) URL, got '{raw_base}'")
    return value


def _parse_timeout(raw_timeout: Optional[str]) -> Optional[float]:
    if raw_timeout is None or not raw_timeout.strip():
        return None
    try:
        timeout = float(raw_timeout)
    except ValueError as exc:
        raise ConfigError(
            f"DEEPLINK_TIMEOUT_SECONDS must be a number, got '{raw_timeout}'"
        ) from exc
    if timeout <= 0:
        raise ConfigError("DEEPLINK_TIMEOUT_SECONDS must be greater than zero")
    return timeout


@dataclass(frozen=True)
class ClientConfig:
    scheme_id: str
    secret: str = field(repr=False)
    product_instance_id: str
    auth_type: str = AUTH_JWT
    mode: str = MODE_SANDBOX
    production_base: str = PRODUCTION_BASE
    sandbox_base: str = SANDBOX_BASE
    timeout_seconds: Optional[float] = None

    @property
    def is_production(self) -> bool:
        return self.mode == MODE_PRODUCTION

    @classmethod
    def create(
        cls,
        scheme_id: str,
        secret: str,
        product_instance_id: str,
        auth_type: str = AUTH_JWT,
        mode: str = MODE_SANDBOX,
        **extra: Any,
    ) -> "ClientConfig":
        """
        Build a config from positional identity values, validating as
        :meth:`from_mapping` does.
        """
        values = {
            "scheme_id": scheme_id,
            "secret": secret,
            "product_instance_id": product_instance_id,
            "auth_type": auth_type,
            "mode": mode,
        }
        values.update(extra)
        return cls.from_mapping(_collect_parameter_overrides(None, values))

    @classmethod
    def from_mapping(cls, values: Mapping[str, str]) -> "ClientConfig":
        scheme_id = _require(values, "DEEPLINK_SCHEME_ID")
        secret = _require(values, "DEEPLINK_SECRET")
        product_instance_id = _require(values, "DEEPLINK_PRODUCT_INSTANCE_ID")

        # Kept verbatim; token generation rejects anything but JWT.
        auth_type = values.get("DEEPLINK_AUTH_TYPE", AUTH_JWT)
        mode = _normalize_mode(values.get("DEEPLINK_MODE") or MODE_SANDBOX)

        production_base = _normalize_base(
            values.get("DEEPLINK_PRODUCTION_BASE") or PRODUCTION_BASE,
            "DEEPLINK_PRODUCTION_BASE",
        )
        sandbox_base = _normalize_base(
            values.get("DEEPLINK_SANDBOX_BASE") or SANDBOX_BASE,
            "DEEPLINK_SANDBOX_BASE",
        )
        timeout_seconds = _parse_timeout(values.get("DEEPLINK_TIMEOUT_SECONDS"))

        return cls(
            scheme_id=scheme_id,
            secret=secret,
            product_instance_id=product_instance_id,
            auth_type=auth_type,
            mode=mode,
            production_base=production_base,
            sandbox_base=sandbox_base,
            timeout_seconds=timeout_seconds,
        )

    @classmethod
    def from_env(
        cls,
        *,
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
        timeout_seconds: Optional[float | int | str] = None,
    ) -> "ClientConfig":
        parameter_overrides = _collect_parameter_overrides(
            parameters,
            {
                "scheme_id": scheme_id,
                "secret": secret,
                "product_instance_id": product_instance_id,
                "auth_type": auth_type,
                "mode": mode,
                "production_base": production_base,
                "sandbox_base": sandbox_base,
                "timeout_seconds": timeout_seconds,
            },
        )
        merged_overrides = dict(overrides or {})
        merged_overrides.update(parameter_overrides)

        environment = build_environment(
            env_file=env_file,
            base=base,
            overrides=merged_overrides,
        )
        return cls.from_mapping(environment.variables)


def load_client_config(
    *,
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
    timeout_seconds: Optional[float | int | str] = None,
) -> ClientConfig:
    """
    Convenience wrapper that mirrors :meth:`ClientConfig.from_env`.

    The configuration can be provided through environment variables, a
    ``.env`` file, direct keyword arguments, or any combination of the three.
    """
    return ClientConfig.from_env(
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
