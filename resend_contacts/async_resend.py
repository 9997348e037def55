"""Asynchronous client for the Resend API built on ``httpx.AsyncClient``."""
from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import httpx

from .errors import ResendDecodeError, ResendHTTPError
from .resend import DEFAULT_TIMEOUT, default_error, error_from_payload, resolve_config

logger = logging.getLogger(__name__)


class AsyncResend:
    """Asynchronous Resend API client.

    Accepts the same configuration as :class:`~resend_contacts.Resend`,
    including the 30 second default timeout (``None`` disables it). An
    ``httpx.AsyncClient`` may be injected to share a connection pool; the
    client only closes a pool it created itself::

        async with AsyncResend("re_123") as resend:
            contacts = await resend.contacts.list(audience_id)
    """

    def __init__(
        self,
        key: Optional[str] = None,
        url: Optional[str] = None,
        *,
        user_agent: Optional[str] = None,
        timeout: Optional[float] = DEFAULT_TIMEOUT,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self.key, self.url, self.user_agent = resolve_config(key, url, user_agent)

        self.headers = {
            "Authorization": f"Bearer {self.key}",
            "Content-Type": "application/json",
            "User-Agent": self.user_agent,
        }

        self.timeout = timeout
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient()

        self.contacts = AsyncContacts(self)

    def __repr__(self) -> str:
        return f"AsyncResend(url={self.url!r}, user_agent={self.user_agent!r})"

    async def __aenter__(self) -> "AsyncResend":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def _request(self, method: str, path: str, json: Optional[Any] = None) -> Optional[Any]:
        """Perform an HTTP request and return the decoded JSON body, if any."""
        kwargs: Dict[str, Any] = {"headers": self.headers, "timeout": self.timeout}
        if json is not None:
            kwargs["json"] = json

        resp = await self._client.request(method, f"{self.url}{path}", **kwargs)
        logger.debug("%s %s -> %s", method, path, resp.status_code)

        if not resp.is_success:
            try:
                error = error_from_payload(resp.json(), resp.reason_phrase)
            except ValueError:
                error = default_error(resp.reason_phrase)
            raise ResendHTTPError(resp.status_code, error, method, path)

        if not resp.content:
            return None
        try:
            return resp.json()
        except ValueError as e:
            raise ResendDecodeError(f"{method} {path} returned a non-JSON body", resp.text) from e

    async def post(self, path: str, body: Any) -> Optional[Any]:
        return await self._request("POST", path, json=body)

    async def get(self, path: str) -> Optional[Any]:
        return await self._request("GET", path)

    async def patch(self, path: str, body: Any) -> Optional[Any]:
        return await self._request("PATCH", path, json=body)

    async def delete(self, path: str) -> Optional[Any]:
        return await self._request("DELETE", path)


from .contacts import AsyncContacts  # noqa: E402  pylint: disable=wrong-import-position
