"""Article snapshot and article-level errors."""

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class ArticleSnapshot:
    """Read-only view of a persisted article.

    Attributes:
        id: Storage identifier.
        name: Unique article name.
        price: Unit price.
        available: Whether the article can currently be ordered.
    """

    id: int
    name: str
    price: Decimal
    available: bool = True


class NameExists(ValueError):
    """Raised when another article already uses the requested name."""

    def __init__(self, name: str):
        super().__init__("NAME_EXISTS")
        self.name = name


class ArticleNotFound(ValueError):
    def __init__(self, article_id: int):
        super().__init__("NOT_FOUND")
        self.article_id = article_id
