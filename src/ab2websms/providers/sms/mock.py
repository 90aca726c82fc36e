"""Mock SMS transport for testing."""

from __future__ import annotations

from uuid import uuid4

from ab2websms.models.contact import ContactRecord
from ab2websms.models.delivery import Sent, SmsResult
from ab2websms.providers.sms.base import SmsTransport


class MockSmsTransport(SmsTransport):
    """Records sent messages for verification in tests."""

    def __init__(self) -> None:
        self.sent: list[dict[str, str | ContactRecord]] = []

    def send(self, contact: ContactRecord, content: str) -> SmsResult:
        self.sent.append({"contact": contact, "to": contact.phone, "content": content})
        return Sent(message_id=uuid4().hex)
