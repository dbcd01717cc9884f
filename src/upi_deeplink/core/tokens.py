"""
Signed credentials sent in the ``Authorization`` header.
"""

from __future__ import annotations

import time
from typing import Callable, Optional

import jwt

__all__ = ["JWT_ALGORITHM", "TokenProvider", "generate_jwt_token"]

JWT_ALGORITHM = "HS256"


def generate_jwt_token(
    scheme_id: str,
    secret: str,
    *,
    now: Optional[int] = None,
) -> str:
    """
    Sign ``{"aud": scheme_id, "iat": now}`` with ``secret`` using HS256.

    ``now`` defaults to the current unix time truncated to whole seconds.
    """
    issued_at = int(time.time()) if now is None else int(now)
    claims = {
        "aud": scheme_id,
        "iat": issued_at,
    }
    return jwt.encode(claims, secret, algorithm=JWT_ALGORITHM)


class TokenProvider:
    """
    Produces a fresh token on every call. Nothing is cached.
    """

    def __init__(
        self,
        scheme_id: str,
        secret: str,
        *,
        clock: Optional[Callable[[], float]] = None,
    ) -> None:
        self.scheme_id = scheme_id
        self._secret = secret
        self._clock = clock or time.time

    def generate(self) -> str:
        return generate_jwt_token(self.scheme_id, self._secret, now=int(self._clock()))
