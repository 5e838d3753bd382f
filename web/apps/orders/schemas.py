"""Pydantic schemas for orders.

Inbound references are accepted as plain strings: whether they resolve to
stored entities is decided by the assembly pipeline, not by validation.
"""

from datetime import datetime

from pydantic import BaseModel, Field


class OrderLineIn(BaseModel):
    """Input schema for a single order line.

    Attributes:
        article_uri: Reference to the ordered article; may be missing.
        quantity: Positive number of units, defaults to 1.
    """

    article_uri: str | None = Field(default=None, max_length=2048)
    quantity: int = Field(default=1, gt=0, le=9999)


class CreateOrderDTO(BaseModel):
    """Schema for creating an order.

    Attributes:
        customer_uri: Reference to the ordering customer; may be missing.
        lines: Requested lines in order.
    """

    customer_uri: str | None = Field(default=None, max_length=2048)
    lines: list[OrderLineIn] = Field(default_factory=list, max_length=500)


class OrderLineOut(BaseModel):
    article_uri: str
    quantity: int


class OrderReadDTO(BaseModel):
    id: int
    customer_uri: str | None = None
    lines: list[OrderLineOut]
    created_at: datetime | None = None
    updated_at: datetime | None = None


class OrderSummaryDTO(BaseModel):
    id: int
    uri: str
    customer_uri: str | None = None
    line_count: int
    created_at: datetime | None = None
