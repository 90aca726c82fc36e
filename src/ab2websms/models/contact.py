"""Contact record model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class ContactRecord(BaseModel):
    """Read-only view of the contact an SMS is addressed to.

    Owned by the host application. Every field defaults to an empty string so
    hosts only need to fill what they have.
    """

    model_config = ConfigDict(frozen=True)

    phone: str = ""
    title: str = ""
    first_name: str = ""
    last_name: str = ""
    display_name: str = ""
    company: str = ""
    email: str = ""
    address1: str = ""
    address2: str = ""
    city: str = ""
    state: str = ""
    country: str = ""
    zipcode: str = ""
    location: str = ""
