"""Pydantic schemas for the article resource."""

from decimal import Decimal

from pydantic import BaseModel, Field, field_validator

from apps.orders.references import MAX_IDENTIFIER


class ArticleIn(BaseModel):
    """Article attributes sent by clients.

    Attributes:
        name: Article name, 1-32 characters after trimming.
        price: Non-negative unit price with at most two decimals.
        available: Whether the article can be ordered (default True).
    """

    name: str = Field(min_length=1, max_length=32)
    price: Decimal = Field(ge=0, max_digits=10, decimal_places=2)
    available: bool = True

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        v2 = v.strip()
        if not v2:
            raise ValueError("Name must not be blank")
        return v2


class UpdateArticleDTO(ArticleIn):
    id: int = Field(gt=0, le=MAX_IDENTIFIER)


class ArticleReadDTO(BaseModel):
    id: int
    name: str
    price: str
    available: bool
