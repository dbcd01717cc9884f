"""
Client for the deeplink payment API.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Mapping, Optional

import requests

from .config import ClientConfig
from .constants import (
    AUTH_JWT,
    HEADER_AUTHORIZATION,
    HEADER_CONTENT_TYPE,
    HEADER_PRODUCT_INSTANCE_ID,
    MODE_SANDBOX,
    PAYMENT_LINK_BASE,
    REFUNDS_BASE,
    TRIGGER_MOCK_PAYMENT,
)
from .errors import OperationNotAvailable, UnsupportedAuthType
from .tokens import TokenProvider
from .transport import Transport
from .urls import get_url_path

__all__ = ["DeeplinkClient"]


class DeeplinkClient:
    """
    Creates payment links, checks their status and manages refunds.

    Each call builds its own header set with a freshly signed token, so one
    instance can be shared between threads.
    """

    def __init__(
        self,
        scheme_id: Optional[str] = None,
        secret: Optional[str] = None,
        product_instance_id: Optional[str] = None,
        auth_type: Optional[str] = None,
        mode: Optional[str] = None,
        *,
        config: Optional[ClientConfig] = None,
        session: Optional[requests.Session] = None,
        clock: Optional[Callable[[], float]] = None,
    ) -> None:
        if config is None:
            config = ClientConfig.create(
                scheme_id or "",
                secret or "",
                product_instance_id or "",
                auth_type=AUTH_JWT if auth_type is None else auth_type,
                mode=MODE_SANDBOX if mode is None else mode,
            )
        elif any(
            value is not None
            for value in (scheme_id, secret, product_instance_id, auth_type, mode)
        ):
            raise ValueError(
                "Provide either a pre-built ClientConfig or individual credentials, not both."
            )

        self.config = config
        self.tokens = TokenProvider(config.scheme_id, config.secret, clock=clock)
        self.transport = Transport(session, timeout=config.timeout_seconds)

    @classmethod
    def from_config(
        cls,
        config: ClientConfig,
        *,
        session: Optional[requests.Session] = None,
        clock: Optional[Callable[[], float]] = None,
    ) -> "DeeplinkClient":
        return cls(config=config, session=session, clock=clock)

    @property
    def auth_type(self) -> str:
        return self.config.auth_type

    @property
    def mode(self) -> str:
        return self.config.mode

    @property
    def session(self) -> requests.Session:
        return self.transport.session

    def base_headers(self) -> Dict[str, str]:
        """Headers sent with every request, without credentials."""
        return {
            HEADER_PRODUCT_INSTANCE_ID: self.config.product_instance_id,
            HEADER_CONTENT_TYPE: "application/json",
        }

    def regenerate_token(self) -> Dict[str, str]:
        """
        Return a new header set carrying a freshly signed ``Authorization``.

        Only JWT is implemented; any other auth type raises
        :class:`UnsupportedAuthType` before anything is sent.
        """
        if self.auth_type != AUTH_JWT:
            raise UnsupportedAuthType(self.auth_type)
        headers = self.base_headers()
        headers[HEADER_AUTHORIZATION] = self.tokens.generate()
        return headers

    def url_for(self, endpoint: str) -> str:
        return get_url_path(
            endpoint,
            self.auth_type,
            self.mode,
            production_base=self.config.production_base,
            sandbox_base=self.config.sandbox_base,
        )

    def _send(
        self,
        method: str,
        endpoint: str,
        *,
        payload: Any = None,
        authorize: bool = True,
    ) -> Any:
        headers = self.regenerate_token() if authorize else self.base_headers()
        return self.transport.send(
            method,
            self.url_for(endpoint),
            headers=headers,
            json=payload,
        )

    def create_payment_link(self, payload: Mapping[str, Any]) -> Any:
        """Create a payment link. ``payload`` is sent as-is."""
        return self._send("POST", PAYMENT_LINK_BASE, payload=payload)

    def check_payment_status(self, platform_bill_id: str) -> Any:
        return self._send("GET", f"{PAYMENT_LINK_BASE}/{platform_bill_id}")

    def trigger_mock_payment(
        self,
        amount_value: Any,
        upi_id: str,
        platform_bill_id: str,
    ) -> Any:
        """
        Simulate a customer paying ``platform_bill_id``. Sandbox only.
        """
        if self.config.is_production:
            raise OperationNotAvailable("trigger_mock_payment", self.mode)
        payload = {
            "amountValue": amount_value,
            "upiId": upi_id,
            "platformBillId": platform_bill_id,
        }
        return self._send("POST", TRIGGER_MOCK_PAYMENT, payload=payload)

    def initiate_batch_refund(self, refunds: List[Mapping[str, Any]]) -> Any:
        return self._send("POST", f"{REFUNDS_BASE}/batch", payload={"refunds": refunds})

    def get_refund_status_by_identifier(
        self,
        identifier_type: str,
        identifier_value: str,
    ) -> Any:
        """
        Look up refunds by an identifier such as a batch or bill id.

        This request is sent without an ``Authorization`` header, unlike
        every other call. It is unclear whether the endpoint is public, so the
        behaviour is left as observed.
        """
        return self._send(
            "GET",
            f"{REFUNDS_BASE}/{identifier_type}/{identifier_value}",
            authorize=False,
        )

    def close(self) -> None:
        self.transport.close()

    def __enter__(self) -> "DeeplinkClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
