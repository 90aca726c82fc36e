"""Outbound request and send result models."""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator

from ab2websms.models.enums import ErrorKind


class SmsRequest(BaseModel):
    """A validated message ready for the gateway.

    Only built once the number has been normalized and the body rendered, so
    holding one implies both are usable.
    """

    model_config = ConfigDict(frozen=True)

    number: str
    message: str

    @field_validator("number")
    @classmethod
    def _number_digits(cls, v: str) -> str:
        if not v or not v.isdigit():
            raise ValueError("number must be E.164 digits without the leading '+'")
        return v

    @field_validator("message")
    @classmethod
    def _message_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("message must not be empty")
        return v


class Sent(BaseModel):
    """The gateway accepted the message."""

    model_config = ConfigDict(frozen=True)

    status: Literal["sent"] = "sent"
    message_id: str

    @property
    def success(self) -> bool:
        return True


class Rejected(BaseModel):
    """The send failed on the gateway side or for lack of configuration."""

    model_config = ConfigDict(frozen=True)

    status: Literal["rejected"] = "rejected"
    reason: str
    error: ErrorKind

    @property
    def success(self) -> bool:
        return False


class InvalidInput(BaseModel):
    """The contact or message could not be turned into a request."""

    model_config = ConfigDict(frozen=True)

    status: Literal["invalid_input"] = "invalid_input"
    reason: str
    error: ErrorKind

    @property
    def success(self) -> bool:
        return False


SmsResult = Annotated[Sent | Rejected | InvalidInput, Field(discriminator="status")]

sms_result_adapter: TypeAdapter[Sent | Rejected | InvalidInput] = TypeAdapter(SmsResult)
