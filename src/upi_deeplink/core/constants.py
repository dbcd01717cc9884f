"""
Hosts, endpoint paths and header names used by the deeplink client.
"""

from __future__ import annotations

PRODUCTION_BASE = "https://prod.setu.co/api"
SANDBOX_BASE = "https://uat.setu.co/api"

PAYMENT_LINK_BASE = "/payment-links"
TRIGGER_MOCK_PAYMENT = "/triggers/funds/addCredit"
REFUNDS_BASE = "/refund"

OAUTH_PATH_PREFIX = "/v2"

AUTH_JWT = "JWT"
AUTH_OAUTH = "OAUTH"

MODE_SANDBOX = "SANDBOX"
MODE_PRODUCTION = "PRODUCTION"
MODES = (MODE_SANDBOX, MODE_PRODUCTION)

HEADER_PRODUCT_INSTANCE_ID = "X-Product-Instance-ID"
HEADER_CONTENT_TYPE = "Content-Type"
HEADER_AUTHORIZATION = "Authorization"
