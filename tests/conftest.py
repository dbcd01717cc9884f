"""
Shared fixtures: a fake HTTP session standing in for the payment API.
"""

import json

import pytest
import requests

from upi_deeplink import DeeplinkClient

SCHEME_ID = "scheme-123"
SECRET = "shh-secret"
PRODUCT_INSTANCE_ID = "pi-456"
FIXED_NOW = 1700000000.75


def make_response(status_code, body, method="GET", url="https://example.test/"):
    """Build a real :class:`requests.Response` without touching the network."""
    response = requests.Response()
    response.status_code = status_code
    response.url = url
    response.encoding = "utf-8"
    response.request = requests.Request(method, url).prepare()
    if body is None:
        response._content = b""
    elif isinstance(body, bytes):
        response._content = body
    elif isinstance(body, str):
        response._content = body.encode("utf-8")
    else:
        response._content = json.dumps(body).encode("utf-8")
        response.headers["Content-Type"] = "application/json"
    return response


class FakeSession:
    """
    Records every request and answers with whatever ``handler`` returns.

    ``handler(method, url, headers, body)`` returns ``(status, body)`` or
    raises a ``requests`` exception.
    """

    def __init__(self, handler=None):
        self.handler = handler or (lambda method, url, headers, body: (200, {"ok": True}))
        self.calls = []
        self.closed = False

    def request(self, method, url, headers=None, json=None, timeout=None, **kwargs):
        self.calls.append(
            {
                "method": method,
                "url": url,
                "headers": dict(headers or {}),
                "json": json,
                "timeout": timeout,
            }
        )
        status, body = self.handler(method, url, headers, json)
        return make_response(status, body, method=method, url=url)

    def close(self):
        self.closed = True


def echo_handler(method, url, headers, body):
    return 200, body


@pytest.fixture
def fake_session():
    return FakeSession()


@pytest.fixture
def echo_session():
    return FakeSession(echo_handler)


@pytest.fixture
def fixed_clock():
    return lambda: FIXED_NOW


@pytest.fixture
def make_client(fixed_clock):
    """Factory for clients bound to a given session."""

    def _make(session, auth_type="JWT", mode="SANDBOX"):
        return DeeplinkClient(
            SCHEME_ID,
            SECRET,
            PRODUCT_INSTANCE_ID,
            auth_type,
            mode,
            session=session,
            clock=fixed_clock,
        )

    return _make
