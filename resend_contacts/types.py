"""Types for the Resend contacts API.

Identifiers and payload builders are small immutable Python values. The JSON
shapes exchanged with the API are described with TypedDicts; at runtime those
are plain dicts and lists.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Dict, List, Optional, Type, Union, cast
from typing_extensions import NotRequired, TypedDict

from .errors import ResendDecodeError

# ---------------------------------------------------------------------------
# Identifiers
# ---------------------------------------------------------------------------


class ContactId(str):
    """Unique :class:`Contact` identifier, assigned by Resend on creation."""

    __slots__ = ()

    @classmethod
    def new(cls, id: str) -> "ContactId":
        return cls(id)

    def __repr__(self) -> str:
        return f"ContactId({str.__repr__(self)})"


class AudienceId(str):
    """Identifier of the audience a contact belongs to."""

    __slots__ = ()

    @classmethod
    def new(cls, id: str) -> "AudienceId":
        return cls(id)

    def __repr__(self) -> str:
        return f"AudienceId({str.__repr__(self)})"


# ---------------------------------------------------------------------------
# Wire shapes
# ---------------------------------------------------------------------------


class ContactDataPayload(TypedDict):
    email: str
    first_name: NotRequired[str]
    last_name: NotRequired[str]
    unsubscribed: NotRequired[bool]


class ContactChangesPayload(TypedDict, total=False):
    email: str
    first_name: str
    last_name: str
    unsubscribed: bool


class ContactPayload(TypedDict):
    id: str
    email: str
    first_name: str
    last_name: str
    unsubscribed: bool
    created_at: str


class CreateContactResponse(TypedDict):
    id: str


class UpdateContactResponse(TypedDict):
    id: str


class ListContactResponse(TypedDict):
    data: List[ContactPayload]


class APIError(TypedDict, total=False):
    name: str
    code: str
    message: str
    statusCode: int


# ---------------------------------------------------------------------------
# Payload builders
# ---------------------------------------------------------------------------


def _present(**fields: Any) -> Dict[str, Any]:
    # Unset optionals are left out entirely; the API must never see ``null``.
    return {key: value for key, value in fields.items() if value is not None}


@dataclass(frozen=True)
class ContactData:
    """Details of a new :class:`Contact`.

    Start from :meth:`new` with the email address and chain the ``with_*``
    methods. Each call returns a new value and leaves the original untouched::

        data = (
            ContactData.new("steve@example.com")
            .with_first_name("Steve")
            .with_unsubscribed(False)
        )
    """

    email: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    unsubscribed: Optional[bool] = None

    @classmethod
    def new(cls, email: str) -> "ContactData":
        return cls(email=email)

    def with_first_name(self, name: str) -> "ContactData":
        return replace(self, first_name=name)

    def with_last_name(self, name: str) -> "ContactData":
        return replace(self, last_name=name)

    def with_unsubscribed(self, unsubscribed: bool) -> "ContactData":
        return replace(self, unsubscribed=unsubscribed)

    def to_dict(self) -> ContactDataPayload:
        body = {"email": self.email}
        body.update(
            _present(
                first_name=self.first_name,
                last_name=self.last_name,
                unsubscribed=self.unsubscribed,
            )
        )
        return body  # type: ignore[return-value]


@dataclass(frozen=True)
class ContactChanges:
    """Changes to apply to an existing :class:`Contact`.

    An empty ``ContactChanges()`` requests no change at all.
    """

    email: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    unsubscribed: Optional[bool] = None

    @classmethod
    def new(cls) -> "ContactChanges":
        return cls()

    def with_email(self, email: str) -> "ContactChanges":
        return replace(self, email=email)

    def with_first_name(self, name: str) -> "ContactChanges":
        return replace(self, first_name=name)

    def with_last_name(self, name: str) -> "ContactChanges":
        return replace(self, last_name=name)

    def with_unsubscribed(self, unsubscribed: bool) -> "ContactChanges":
        return replace(self, unsubscribed=unsubscribed)

    def to_dict(self) -> ContactChangesPayload:
        return _present(  # type: ignore[return-value]
            email=self.email,
            first_name=self.first_name,
            last_name=self.last_name,
            unsubscribed=self.unsubscribed,
        )


# ---------------------------------------------------------------------------
# Read model
# ---------------------------------------------------------------------------


def _require_object(payload: Any, what: str) -> Dict[str, Any]:
    if not isinstance(payload, dict):
        raise ResendDecodeError(
            f"Expected a JSON object for {what}, got {type(payload).__name__}",
            payload,
        )
    return payload


def _require_field(obj: Dict[str, Any], key: str, kind: Union[Type[str], Type[bool]], what: str) -> Any:
    if key not in obj:
        raise ResendDecodeError(f"Missing field {key!r} in {what}", obj)
    value = obj[key]
    if not isinstance(value, kind):
        raise ResendDecodeError(
            f"Field {key!r} in {what} must be {kind.__name__}, got {type(value).__name__}",
            obj,
        )
    return value


_CONTACT_FIELDS = {
    "id": str,
    "email": str,
    "first_name": str,
    "last_name": str,
    "unsubscribed": bool,
    "created_at": str,
}


def _as_contact_payload(payload: Any) -> ContactPayload:
    obj = _require_object(payload, "contact")
    for key, kind in _CONTACT_FIELDS.items():
        _require_field(obj, key, kind, "contact")
    return cast(ContactPayload, obj)


@dataclass(frozen=True)
class Contact:
    """Details of an existing contact, as returned by Resend."""

    id: ContactId
    email: str
    first_name: str
    last_name: str
    unsubscribed: bool
    #: Creation timestamp in ISO 8601 format.
    created_at: str

    @classmethod
    def from_dict(cls, payload: Any) -> "Contact":
        obj = _as_contact_payload(payload)
        return cls(
            id=ContactId(obj["id"]),
            email=obj["email"],
            first_name=obj["first_name"],
            last_name=obj["last_name"],
            unsubscribed=obj["unsubscribed"],
            created_at=obj["created_at"],
        )


# ---------------------------------------------------------------------------
# Response decoders
# ---------------------------------------------------------------------------


def decode_create_response(payload: Any) -> ContactId:
    obj = _require_object(payload, "create contact response")
    _require_field(obj, "id", str, "create contact response")
    response = cast(CreateContactResponse, obj)
    return ContactId(response["id"])


def decode_update_response(payload: Any) -> ContactId:
    obj = _require_object(payload, "update contact response")
    _require_field(obj, "id", str, "update contact response")
    response = cast(UpdateContactResponse, obj)
    return ContactId(response["id"])


def decode_list_response(payload: Any) -> List[Contact]:
    obj = _require_object(payload, "list contacts response")
    if "data" not in obj:
        raise ResendDecodeError("Missing field 'data' in list contacts response", obj)
    if not isinstance(obj["data"], list):
        raise ResendDecodeError(
            f"Field 'data' in list contacts response must be list, got {type(obj['data']).__name__}",
            obj,
        )
    response = cast(ListContactResponse, obj)
    return [Contact.from_dict(item) for item in response["data"]]
