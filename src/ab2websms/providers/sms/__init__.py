"""SMS transport building blocks."""

from ab2websms.providers.sms.base import SmsTransport
from ab2websms.providers.sms.mock import MockSmsTransport
from ab2websms.providers.sms.phone import is_valid_phone, normalize_phone, strip_plus
from ab2websms.providers.sms.template import (
    COMPATIBLE_PLACEHOLDERS,
    CORRECTED_PLACEHOLDERS,
    placeholders_for,
    render_content,
)

__all__ = [
    "COMPATIBLE_PLACEHOLDERS",
    "CORRECTED_PLACEHOLDERS",
    "MockSmsTransport",
    "SmsTransport",
    "is_valid_phone",
    "normalize_phone",
    "placeholders_for",
    "render_content",
    "strip_plus",
]
