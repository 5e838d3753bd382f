"""Pydantic schemas for the customer resource."""

import re

from pydantic import BaseModel, Field, field_validator

from apps.orders.references import MAX_IDENTIFIER

EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
KINDS = {"P", "F"}


class CreateCustomerDTO(BaseModel):
    """Payload for creating a customer.

    Attributes:
        last_name: Family name, 2-32 characters.
        first_name: Optional given name, up to 32 characters.
        email: Contact address, normalized to lowercase.
        kind: ``P`` (private) or ``F`` (business); defaults to ``P``.
    """

    last_name: str = Field(min_length=2, max_length=32)
    first_name: str = Field(default="", max_length=32)
    email: str = Field(max_length=128)
    kind: str = "P"

    @field_validator("email")
    @classmethod
    def validate_email(cls, v: str) -> str:
        v2 = v.strip().lower()
        if not EMAIL_RE.match(v2):
            raise ValueError("Invalid email address")
        return v2

    @field_validator("kind")
    @classmethod
    def validate_kind(cls, v: str) -> str:
        v2 = v.upper()
        if v2 not in KINDS:
            raise ValueError("Unsupported customer kind")
        return v2


class UpdateCustomerDTO(CreateCustomerDTO):
    id: int = Field(gt=0, le=MAX_IDENTIFIER)


class CustomerReadDTO(BaseModel):
    id: int
    last_name: str
    first_name: str
    email: str
    kind: str
