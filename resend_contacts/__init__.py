"""Python client for the contacts endpoints of the Resend API."""

import logging

from .resend import Resend, __version__
from .async_resend import AsyncResend
from .contacts import AsyncContacts, Contacts
from .errors import ResendDecodeError, ResendError, ResendHTTPError
from .types import AudienceId, Contact, ContactChanges, ContactData, ContactId
from . import types

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Resend",
    "AsyncResend",
    "Contacts",
    "AsyncContacts",
    "ResendError",
    "ResendHTTPError",
    "ResendDecodeError",
    "AudienceId",
    "Contact",
    "ContactChanges",
    "ContactData",
    "ContactId",
    "types",
    "__version__",
]
