import itertools
import json
import re
from typing import Any, Dict, List, Optional, Tuple
from urllib.parse import unquote, urlparse

import httpx
import pytest
import pytest_asyncio
import responses

from resend_contacts import AsyncResend, Resend

BASE_URL = "https://api.resend.com"
API_KEY = "re_test"


class FakeContactsAPI:
    """In-memory stand-in for Resend's audience contacts endpoints."""

    def __init__(self) -> None:
        self.audiences: Dict[str, List[Dict[str, Any]]] = {}
        self.requests: List[Tuple[str, str, Optional[Any]]] = []
        self.raw_paths: List[str] = []
        self._ids = itertools.count(1)

    def add_audience(self, audience_id: str) -> str:
        self.audiences[audience_id] = []
        return audience_id

    def handle(self, method: str, path: str, body: Optional[Any]) -> Tuple[int, Optional[Any]]:
        self.requests.append((method, path, body))
        parts = path.strip("/").split("/")
        if len(parts) < 3 or parts[0] != "audiences" or parts[2] != "contacts":
            return 404, _not_found("Route not found")

        contacts = self.audiences.get(parts[1])
        if contacts is None:
            return 404, _not_found("Audience not found")

        if len(parts) == 3:
            if method == "POST":
                contact = {
                    "id": f"con_{next(self._ids)}",
                    "email": body["email"],
                    "first_name": body.get("first_name", ""),
                    "last_name": body.get("last_name", ""),
                    "unsubscribed": body.get("unsubscribed", False),
                    "created_at": "2024-01-01T00:00:00.000Z",
                }
                contacts.append(contact)
                return 201, {"object": "contact", "id": contact["id"]}
            if method == "GET":
                return 200, {"object": "list", "data": [dict(c, object="contact") for c in contacts]}
            return 405, {"name": "method_not_allowed", "message": "Method not allowed"}

        segment = parts[3]
        contact = next((c for c in contacts if segment in (c["id"], c["email"])), None)
        if contact is None:
            return 404, _not_found("Contact not found")

        if method == "GET":
            return 200, dict(contact, object="contact")
        if method == "PATCH":
            contact.update(body)
            return 200, {"object": "contact", "id": contact["id"]}
        if method == "DELETE":
            contacts.remove(contact)
            return 200, {"object": "contact", "contact": contact["id"], "deleted": True}
        return 405, {"name": "method_not_allowed", "message": "Method not allowed"}


def _not_found(message: str) -> Dict[str, Any]:
    return {"statusCode": 404, "name": "not_found", "message": message}


@pytest.fixture
def fake_api() -> FakeContactsAPI:
    return FakeContactsAPI()


@pytest.fixture
def resend(fake_api):
    """Synchronous client whose HTTP traffic is served by ``fake_api``."""

    def callback(request):
        raw_path = urlparse(request.url).path
        fake_api.raw_paths.append(raw_path)
        body = json.loads(request.body) if request.body else None
        status, payload = fake_api.handle(request.method, unquote(raw_path), body)
        return status, {}, json.dumps(payload)

    with responses.RequestsMock(assert_all_requests_are_fired=False) as rsps:
        for method in (responses.GET, responses.POST, responses.PATCH, responses.DELETE):
            rsps.add_callback(
                method,
                re.compile(rf"{re.escape(BASE_URL)}/audiences/.*"),
                callback=callback,
                content_type="application/json",
            )
        yield Resend(API_KEY, BASE_URL)


@pytest_asyncio.fixture
async def async_resend(fake_api):
    """Asynchronous client whose HTTP traffic is served by ``fake_api``."""

    def handler(request: httpx.Request) -> httpx.Response:
        fake_api.raw_paths.append(request.url.raw_path.decode("ascii"))
        body = json.loads(request.content) if request.content else None
        status, payload = fake_api.handle(request.method, request.url.path, body)
        return httpx.Response(status, json=payload)

    async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
        yield AsyncResend(API_KEY, BASE_URL, client=client)
