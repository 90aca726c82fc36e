"""Abstract base class for SMS transports."""

from __future__ import annotations

from abc import ABC, abstractmethod

from ab2websms.models.contact import ContactRecord
from ab2websms.models.delivery import SmsResult


class SmsTransport(ABC):
    """Capability a host registers to send SMS to its contacts."""

    @property
    def name(self) -> str:
        """Transport name (e.g. 'Ab2webSmsProvider')."""
        return self.__class__.__name__

    @abstractmethod
    def send(self, contact: ContactRecord, content: str) -> SmsResult:
        """Send an SMS to a contact.

        Args:
            contact: Recipient; supplies the phone number and merge fields.
            content: Message template, may contain placeholder tokens.

        Returns:
            ``Sent``, ``Rejected`` or ``InvalidInput``.
        """
        ...

    def close(self) -> None:  # noqa: B027
        """Release resources. Override in subclasses that hold connections."""
