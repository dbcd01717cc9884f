"""
HTTP transport for the deeplink API.

Every request carries the header set supplied by the caller. Failures are
normalised into :class:`ForbiddenError` or :class:`RequestFailed`.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, NoReturn, Optional

import requests

from .errors import ForbiddenError, RequestFailed

__all__ = ["Transport", "normalize_error"]

logger = logging.getLogger(__name__)


def normalize_error(exc: requests.RequestException) -> NoReturn:
    """
    Re-raise a transport failure in the client's error taxonomy.

    403 responses keep their full ``response`` and ``request``. Anything else
    collapses into :class:`RequestFailed` carrying the body text, or the
    transport message when there is no body.
    """
    response = exc.response
    if response is not None and response.status_code == 403:
        logger.debug("Request to %s was forbidden", response.url)
        raise ForbiddenError(*exc.args, request=exc.request, response=response) from exc

    body = response.text if response is not None else ""
    if response is not None:
        logger.debug("Request failed with status %s", response.status_code)
    else:
        logger.debug("Request failed before a response was received: %s", exc)
    raise RequestFailed(body or str(exc)) from exc


def _parse_body(response: requests.Response) -> Any:
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return response.text


class Transport:
    """
    Sends single requests on a :class:`requests.Session`.
    """

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        *,
        timeout: Optional[float] = None,
    ) -> None:
        self.session = session or requests.Session()
        self.timeout = timeout

    def send(
        self,
        method: str,
        url: str,
        *,
        headers: Mapping[str, str],
        json: Any = None,
    ) -> Any:
        logger.debug("Dispatching %s %s", method, url)
        try:
            response = self.session.request(
                method,
                url,
                headers=dict(headers),
                json=json,
                timeout=self.timeout,
            )
            response.raise_for_status()
        except requests.RequestException as exc:
            normalize_error(exc)
        return _parse_body(response)

    def close(self) -> None:
        self.session.close()
