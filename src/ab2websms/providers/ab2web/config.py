"""AB2Web gateway configuration."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from ab2websms.models.enums import PlaceholderMode

DEFAULT_API_URL = "https://sms.ab2web.com/services/send.php"


class Ab2webConfig(BaseModel):
    """AB2Web SMS provider configuration.

    The API key is not part of this model: it comes from the host's
    integration settings through a ``CredentialProvider``.
    """

    api_url: str = DEFAULT_API_URL
    integration_name: str = "Ab2webSms"
    default_region: str = Field(default="IN", min_length=2, max_length=2)
    timeout: float = Field(default=15.0, gt=0)
    verify_tls: bool = True
    prioritize: bool = True
    placeholders: PlaceholderMode = PlaceholderMode.COMPATIBLE

    @field_validator("default_region")
    @classmethod
    def _upper_region(cls, v: str) -> str:
        if not v.isalpha():
            raise ValueError("default_region must be a two-letter country code")
        return v.upper()
