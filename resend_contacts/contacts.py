"""Contact resource clients for the ``/audiences/:id/contacts`` endpoints."""
from __future__ import annotations

from typing import List
from urllib.parse import quote

from .types import (
    AudienceId,
    Contact,
    ContactChanges,
    ContactData,
    ContactId,
    decode_create_response,
    decode_list_response,
    decode_update_response,
)


def _segment(value: object) -> str:
    # "#", "?" and "/" are legal in emails but would end or split the path.
    return quote(str(value), safe="@")


def _collection_path(audience: str) -> str:
    return f"/audiences/{_segment(audience)}/contacts"


def _contact_path(audience: str, email_or_id: object) -> str:
    # The API resolves the last segment as either a contact id or an email.
    return f"{_collection_path(audience)}/{_segment(email_or_id)}"


class Contacts:
    """Client for `/audiences/:id/contacts` endpoints."""

    def __init__(self, resend: "Resend") -> None:
        self.resend = resend

    def __repr__(self) -> str:
        return repr(self.resend)

    def create(self, audience: AudienceId, contact: ContactData) -> ContactId:
        """Create a contact inside an audience and return its id.

        https://resend.com/docs/api-reference/contacts/create-contact
        """
        data = self.resend.post(_collection_path(audience), contact.to_dict())
        return decode_create_response(data)

    def get(self, contact: ContactId, audience: AudienceId) -> Contact:
        """Retrieve a single contact from an audience.

        https://resend.com/docs/api-reference/contacts/get-contact
        """
        data = self.resend.get(_contact_path(audience, contact))
        return Contact.from_dict(data)

    def update(self, contact: ContactId, audience: AudienceId, changes: ContactChanges) -> None:
        """Apply ``changes`` to an existing contact.

        https://resend.com/docs/api-reference/contacts/update-contact
        """
        data = self.resend.patch(_contact_path(audience, contact), changes.to_dict())
        decode_update_response(data)

    def delete(self, audience: AudienceId, email_or_id: object) -> None:
        """Remove a contact from an audience by its email or id.

        ``email_or_id`` may be a :class:`ContactId`, a plain email string or
        anything whose ``str()`` is one of those.

        https://resend.com/docs/api-reference/contacts/delete-contact
        """
        self.resend.delete(_contact_path(audience, email_or_id))

    def list(self, audience: AudienceId) -> List[Contact]:
        """Retrieve all contacts of an audience, in the order Resend returns them.

        https://resend.com/docs/api-reference/contacts/list-contacts
        """
        data = self.resend.get(_collection_path(audience))
        return decode_list_response(data)


class AsyncContacts:
    """Asynchronous client for `/audiences/:id/contacts` endpoints."""

    def __init__(self, resend: "AsyncResend") -> None:
        self.resend = resend

    def __repr__(self) -> str:
        return repr(self.resend)

    async def create(self, audience: AudienceId, contact: ContactData) -> ContactId:
        data = await self.resend.post(_collection_path(audience), contact.to_dict())
        return decode_create_response(data)

    async def get(self, contact: ContactId, audience: AudienceId) -> Contact:
        data = await self.resend.get(_contact_path(audience, contact))
        return Contact.from_dict(data)

    async def update(self, contact: ContactId, audience: AudienceId, changes: ContactChanges) -> None:
        data = await self.resend.patch(_contact_path(audience, contact), changes.to_dict())
        decode_update_response(data)

    async def delete(self, audience: AudienceId, email_or_id: object) -> None:
        await self.resend.delete(_contact_path(audience, email_or_id))

    async def list(self, audience: AudienceId) -> List[Contact]:
        data = await self.resend.get(_collection_path(audience))
        return decode_list_response(data)


from .resend import Resend  # noqa: E402  pylint: disable=wrong-import-position
from .async_resend import AsyncResend  # noqa: E402  pylint: disable=wrong-import-position
