"""
Tests for JWT generation.
"""

import time

import jwt
import pytest

from upi_deeplink import TokenProvider, generate_jwt_token

from .conftest import FIXED_NOW, SCHEME_ID, SECRET


class TestGenerateJwtToken:
    """Tests for generate_jwt_token."""

    def test_claims(self):
        """Token carries the scheme id as audience and the issue time."""
        token = generate_jwt_token(SCHEME_ID, SECRET, now=1700000000)
        claims = jwt.decode(token, SECRET, algorithms=["HS256"], audience=SCHEME_ID)
        assert claims == {"aud": SCHEME_ID, "iat": 1700000000}

    def test_header_algorithm(self):
        """Token is signed with HS256."""
        token = generate_jwt_token(SCHEME_ID, SECRET, now=1700000000)
        assert jwt.get_unverified_header(token)["alg"] == "HS256"

    def test_defaults_to_current_second(self):
        """Without ``now`` the issue time is the current unix second."""
        before = int(time.time())
        token = generate_jwt_token(SCHEME_ID, SECRET)
        after = int(time.time())
        claims = jwt.decode(token, SECRET, algorithms=["HS256"], audience=SCHEME_ID)
        assert before <= claims["iat"] <= after

    def test_deterministic_for_same_second(self):
        """Same identity, secret and second give the same token."""
        first = generate_jwt_token(SCHEME_ID, SECRET, now=1700000000)
        second = generate_jwt_token(SCHEME_ID, SECRET, now=1700000000)
        assert first == second

    def test_resigned_claims_verify(self):
        """Re-signing decoded claims reproduces a verifiable token."""
        token = generate_jwt_token(SCHEME_ID, SECRET, now=1700000000)
        claims = jwt.decode(token, SECRET, algorithms=["HS256"], audience=SCHEME_ID)
        resigned = jwt.encode(claims, SECRET, algorithm="HS256")
        assert jwt.decode(resigned, SECRET, algorithms=["HS256"], audience=SCHEME_ID) == claims

    def test_wrong_secret_rejected(self):
        """A different secret cannot verify the token."""
        token = generate_jwt_token(SCHEME_ID, SECRET, now=1700000000)
        with pytest.raises(jwt.InvalidSignatureError):
            jwt.decode(token, "other", algorithms=["HS256"], audience=SCHEME_ID)


class TestTokenProvider:
    """Tests for TokenProvider."""

    def test_uses_clock_truncated_to_seconds(self, fixed_clock):
        """Fractional clock values are truncated."""
        provider = TokenProvider(SCHEME_ID, SECRET, clock=fixed_clock)
        claims = jwt.decode(
            provider.generate(), SECRET, algorithms=["HS256"], audience=SCHEME_ID
        )
        assert claims["iat"] == int(FIXED_NOW)

    def test_fresh_token_each_call(self):
        """A moving clock yields a new token every time."""
        ticks = iter([1700000000, 1700000001])
        provider = TokenProvider(SCHEME_ID, SECRET, clock=lambda: next(ticks))
        assert provider.generate() != provider.generate()
