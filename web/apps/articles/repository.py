"""Repository layer for articles.

Besides single-article access this module provides the batch lookup used
while assembling orders: ``find_by_ids`` fetches every requested article
that exists in one query and silently skips the rest.
"""

import logging
from decimal import Decimal
from typing import Iterable

from django.db import IntegrityError, transaction

from apps.orders.references import MAX_IDENTIFIER

from .domain import ArticleNotFound, ArticleSnapshot, NameExists
from .models import ArticleModel

logger = logging.getLogger(__name__)


def to_snapshot(obj: ArticleModel) -> ArticleSnapshot:
    return ArticleSnapshot(id=obj.id, name=obj.name, price=obj.price, available=obj.available)


class ArticleRepository:
    """Persists and finds articles using Django ORM.

    All methods return ``ArticleSnapshot`` values so callers never hold ORM
    instances.
    """

    def find_by_id(self, article_id: int) -> ArticleSnapshot | None:
        if article_id > MAX_IDENTIFIER:
            return None
        obj = ArticleModel.objects.filter(id=article_id).first()
        return to_snapshot(obj) if obj else None

    def find_by_ids(self, ids: Iterable[int]) -> list[ArticleSnapshot]:
        """Return the stored articles among ``ids``.

        Unknown identifiers are omitted from the result; an empty input
        returns an empty list without touching the database. The result
        order is unrelated to the input order.

        Args:
            ids: Article identifiers to look up.

        Returns:
            list[ArticleSnapshot]: The articles that exist.
        """
        wanted = set(ids)
        if not wanted:
            return []
        found = [to_snapshot(obj) for obj in ArticleModel.objects.filter(id__in=wanted)]
        logger.debug("article batch lookup", extra={"requested": len(wanted), "found": len(found)})
        return found

    def create(self, name: str, price: Decimal, available: bool = True) -> ArticleSnapshot:
        """Persist a new article.

        Raises:
            NameExists: If the name is already used by another article.
        """
        if ArticleModel.objects.filter(name=name).exists():
            raise NameExists(name)
        try:
            with transaction.atomic():
                obj = ArticleModel.objects.create(name=name, price=price, available=available)
        except IntegrityError:
            raise NameExists(name)
        return to_snapshot(obj)

    def update(self, article_id: int, name: str, price: Decimal, available: bool) -> ArticleSnapshot:
        """Overwrite the attributes of an existing article.

        Raises:
            ArticleNotFound: If no article has ``article_id``.
            NameExists: If ``name`` belongs to a different article.
        """
        try:
            with transaction.atomic():
                obj = ArticleModel.objects.select_for_update().filter(id=article_id).first()
                if obj is None:
                    raise ArticleNotFound(article_id)
                if ArticleModel.objects.filter(name=name).exclude(id=article_id).exists():
                    raise NameExists(name)
                obj.name = name
                obj.price = price
                obj.available = available
                obj.save(update_fields=["name", "price", "available", "updated_at"])
        except IntegrityError:
            # concurrent rename onto the same name
            raise NameExists(name)
        return to_snapshot(obj)
