"""Phone number normalization utilities."""

from __future__ import annotations

import phonenumbers

from ab2websms.errors import InvalidPhoneNumberError

DEFAULT_REGION = "IN"


def normalize_phone(number: str, default_region: str = DEFAULT_REGION) -> str:
    """Normalize a phone number to E.164 format.

    Args:
        number: Phone number in any common format.
        default_region: ISO 3166-1 alpha-2 country code for numbers without
            country code (default: "IN").

    Returns:
        Phone number in E.164 format (e.g., "+918123456789").

    Raises:
        InvalidPhoneNumberError: If the number cannot be parsed or is invalid.

    Example:
        >>> normalize_phone("081234 56789")
        '+918123456789'
        >>> normalize_phone("+1 (418) 555-1234")
        '+14185551234'
    """
    cleaned = number.strip()
    try:
        parsed = phonenumbers.parse(cleaned, default_region)
    except phonenumbers.NumberParseException as exc:
        raise InvalidPhoneNumberError(f"Cannot parse phone number: {number}") from exc

    if not phonenumbers.is_valid_number(parsed):
        raise InvalidPhoneNumberError(f"Invalid phone number: {number}")

    return phonenumbers.format_number(parsed, phonenumbers.PhoneNumberFormat.E164)


def strip_plus(number: str) -> str:
    """Strip leading '+' from an E.164 phone number."""
    return number.lstrip("+")


def is_valid_phone(number: str, default_region: str = DEFAULT_REGION) -> bool:
    """Check if a phone number is valid.

    Args:
        number: Phone number in any common format.
        default_region: ISO 3166-1 alpha-2 country code for numbers without
            country code (default: "IN").

    Returns:
        True if the number is valid, False otherwise.
    """
    try:
        normalize_phone(number, default_region)
        return True
    except InvalidPhoneNumberError:
        return False
