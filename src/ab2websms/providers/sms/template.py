"""Merge-field substitution for message templates."""

from __future__ import annotations

import re
from collections.abc import Callable, Mapping

from ab2websms.models.contact import ContactRecord
from ab2websms.models.enums import PlaceholderMode

FieldGetter = Callable[[ContactRecord], str]

# Table shipped with the original plugin. The first-name token keeps its
# misspelling and ``{contact_lastname}`` resolves to the display name.
COMPATIBLE_PLACEHOLDERS: dict[str, FieldGetter] = {
    "{contact_title}": lambda c: c.title,
    "{conact_firstname}": lambda c: c.first_name,
    "{contact_lastname}": lambda c: c.display_name,
    "{contact_company}": lambda c: c.company,
    "{contact_email}": lambda c: c.email,
    "{contact_address1}": lambda c: c.address1,
    "{contact_address2}": lambda c: c.address2,
    "{contact_city}": lambda c: c.city,
    "{contact_state}": lambda c: c.state,
    "{contact_country}": lambda c: c.country,
    "{contact_zipcode}": lambda c: c.zipcode,
    "{contact_location}": lambda c: c.location,
    "{contact_phone}": lambda c: c.phone,
}

CORRECTED_PLACEHOLDERS: dict[str, FieldGetter] = {
    **COMPATIBLE_PLACEHOLDERS,
    "{contact_firstname}": lambda c: c.first_name,
    "{contact_lastname}": lambda c: c.last_name,
    "{contact_name}": lambda c: c.display_name,
}

_TABLES: dict[PlaceholderMode, dict[str, FieldGetter]] = {
    PlaceholderMode.COMPATIBLE: COMPATIBLE_PLACEHOLDERS,
    PlaceholderMode.CORRECTED: CORRECTED_PLACEHOLDERS,
}

_pattern_cache: dict[frozenset[str], re.Pattern[str]] = {}


def placeholders_for(mode: PlaceholderMode | str) -> dict[str, FieldGetter]:
    """Return the token table for a placeholder mode."""
    return _TABLES[PlaceholderMode(mode)]


def _token_pattern(tokens: frozenset[str]) -> re.Pattern[str]:
    pattern = _pattern_cache.get(tokens)
    if pattern is None:
        # Longest first so a token never loses to one of its prefixes
        ordered = sorted(tokens, key=len, reverse=True)
        pattern = re.compile("|".join(re.escape(t) for t in ordered))
        _pattern_cache[tokens] = pattern
    return pattern


def render_content(
    template: str,
    contact: ContactRecord,
    placeholders: Mapping[str, FieldGetter] = COMPATIBLE_PLACEHOLDERS,
) -> str:
    """Substitute placeholder tokens with contact fields.

    Substitution is a single left-to-right pass: text inserted for one token
    is never scanned for further tokens. Unknown tokens are left as they are.

    Args:
        template: Raw message body.
        contact: Source of the merge-field values.
        placeholders: Token to field getter table.

    Returns:
        The rendered message.
    """
    if not placeholders or not template:
        return template
    pattern = _token_pattern(frozenset(placeholders))
    return pattern.sub(lambda m: placeholders[m.group(0)](contact) or "", template)
