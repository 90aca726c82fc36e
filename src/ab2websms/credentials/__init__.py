"""Credential lookup for the gateway API key."""

from ab2websms.credentials.base import CredentialProvider
from ab2websms.credentials.memory import InMemoryCredentialProvider
from ab2websms.credentials.resolver import (
    CredentialResolver,
    CredentialState,
    Resolved,
    Unresolved,
)

__all__ = [
    "CredentialProvider",
    "CredentialResolver",
    "CredentialState",
    "InMemoryCredentialProvider",
    "Resolved",
    "Unresolved",
]
