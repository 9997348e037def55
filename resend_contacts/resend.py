"""Core synchronous client for the Resend API.

- Raises ``ResendHTTPError`` on non-2xx responses.
- Reusable ``requests.Session`` support for connection reuse.
"""
from __future__ import annotations

import logging
import os
from typing import Any, Optional, Tuple, cast

import requests

from .errors import ResendDecodeError, ResendHTTPError
from .types import APIError

logger = logging.getLogger(__name__)

__version__ = "0.1.0"

DEFAULT_BASE_URL = "https://api.resend.com"
DEFAULT_USER_AGENT = f"resend-contacts/{__version__}"
DEFAULT_TIMEOUT = 30.0


def resolve_config(
    key: Optional[str], url: Optional[str], user_agent: Optional[str]
) -> Tuple[str, str, str]:
    """Return ``(key, base_url, user_agent)`` from arguments or the environment."""
    key = key or os.getenv("RESEND_API_KEY")
    if not key:
        raise ValueError("Missing API key. Pass it to Resend('re_123') or set RESEND_API_KEY")

    base = url or os.getenv("RESEND_BASE_URL") or DEFAULT_BASE_URL
    agent = user_agent or os.getenv("RESEND_USER_AGENT") or DEFAULT_USER_AGENT
    return key, base.rstrip("/"), agent


def default_error(reason: Optional[str]) -> APIError:
    return {"name": "internal_server_error", "message": reason or ""}


def error_from_payload(payload: Any, reason: Optional[str]) -> APIError:
    """Pick the provider error object out of a decoded error body."""
    if isinstance(payload, dict):
        # Resend puts the error fields at the top level; some proxies nest them.
        nested = payload.get("error")
        if isinstance(nested, dict):
            return cast(APIError, nested)
        if "name" in payload or "code" in payload or "message" in payload:
            return cast(APIError, payload)
    return default_error(reason)


class Resend:
    """Resend API client.

    Parameters
    ----------
    key:
        API key issued by Resend. If not provided, the client reads
        ``RESEND_API_KEY`` from the environment.
    url:
        Optional base URL for the API (useful for testing). Falls back to
        ``RESEND_BASE_URL`` and then to ``https://api.resend.com``.
    user_agent:
        Optional ``User-Agent`` header value, ``RESEND_USER_AGENT`` otherwise.
    timeout:
        Per-request timeout in seconds, 30 by default. ``None`` disables it.
    session:
        Optional ``requests.Session`` to reuse connections across clients.
    """

    def __init__(
        self,
        key: Optional[str] = None,
        url: Optional[str] = None,
        *,
        user_agent: Optional[str] = None,
        timeout: Optional[float] = DEFAULT_TIMEOUT,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.key, self.url, self.user_agent = resolve_config(key, url, user_agent)

        self.headers = {
            "Authorization": f"Bearer {self.key}",
            "Content-Type": "application/json",
            "User-Agent": self.user_agent,
        }

        self.timeout = timeout
        self._session = session or requests.Session()

        self.contacts = Contacts(self)

    def __repr__(self) -> str:
        return f"Resend(url={self.url!r}, user_agent={self.user_agent!r})"

    # ------------------------------------------------------------------
    # Internal request helper
    # ------------------------------------------------------------------
    def _request(self, method: str, path: str, json: Optional[Any] = None) -> Optional[Any]:
        """Perform an HTTP request and return the decoded JSON body, if any."""
        resp = self._session.request(
            method,
            f"{self.url}{path}",
            headers=self.headers,
            json=json,
            timeout=self.timeout,
        )
        logger.debug("%s %s -> %s", method, path, resp.status_code)

        if not resp.ok:
            try:
                error = error_from_payload(resp.json(), resp.reason)
            except ValueError:
                error = default_error(resp.reason)
            raise ResendHTTPError(resp.status_code, error, method, path)

        if not resp.content:
            return None
        try:
            return resp.json()
        except ValueError as e:
            raise ResendDecodeError(f"{method} {path} returned a non-JSON body", resp.text) from e

    # ------------------------------------------------------------------
    # HTTP verb helpers
    # ------------------------------------------------------------------
    def post(self, path: str, body: Any) -> Optional[Any]:
        return self._request("POST", path, json=body)

    def get(self, path: str) -> Optional[Any]:
        return self._request("GET", path)

    def patch(self, path: str, body: Any) -> Optional[Any]:
        return self._request("PATCH", path, json=body)

    def delete(self, path: str) -> Optional[Any]:
        return self._request("DELETE", path)


# Import here to avoid circular dependency during type checking
from .contacts import Contacts  # noqa: E402  pylint: disable=wrong-import-position
