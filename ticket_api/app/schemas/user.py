"""
Pydantic models for user data.

``UserCreate`` describes the body of ``POST /users``.  Every field has
a zero default so that an omitted field is reported by the validator
(e.g. "ID is required") rather than as a decode error, while a value of
the wrong JSON type is rejected at decode time.  Unknown keys, including
client supplied ticket fields, are ignored.

``UserRead`` is the stored record returned by every endpoint and
includes the derived ``dateOfTicketExpiry`` and ``price``.
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator, model_validator

# Identifiers and ages are 64-bit signed integers.
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


class UserBase(BaseModel):
    id: int = Field(0, ge=INT64_MIN, le=INT64_MAX, examples=[1])
    name: str = Field("", examples=["Ann"])
    sure_name: str = Field("", alias="sureName", examples=["Lee"])
    passport_number: str = Field("", alias="passportNumber", examples=["123456789"])
    age: int = Field(0, ge=INT64_MIN, le=INT64_MAX, examples=[65])

    model_config = ConfigDict(populate_by_name=True)


class UserCreate(UserBase):
    """Schema for creating a user.

    Types are strict: ``"1"`` is not accepted for ``id`` and ``42`` is not
    accepted for ``passportNumber``.  An explicit ``null`` is treated like
    an omitted field.
    """

    model_config = ConfigDict(populate_by_name=True, strict=True, extra="ignore")

    @model_validator(mode="before")
    @classmethod
    def null_body_as_empty(cls, data: Any) -> Any:
        return {} if data is None else data

    @field_validator("id", "name", "sure_name", "passport_number", "age", mode="before")
    @classmethod
    def null_as_default(cls, value: Any, info: ValidationInfo) -> Any:
        if value is None:
            return cls.model_fields[info.field_name].default
        return value


class UserRead(UserBase):
    """Schema for reading a user from the API."""

    date_of_ticket_expiry: datetime = Field(..., alias="dateOfTicketExpiry")
    price: float = Field(..., examples=[40.0])


class Ticket(BaseModel):
    """Derived ticket attached to a user at creation time."""

    expires_at: datetime
    price: float
