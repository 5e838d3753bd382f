"""HTTP views for the article resource.

``POST /api/articles`` creates an article, ``PUT /api/articles`` overwrites
the article named by the ``id`` in the body, and ``GET
/api/articles/<id>`` returns one article with its ``self`` link.
"""

import logging

from pydantic import ValidationError
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.orders.links import SELF, Link, render_link_header
from apps.orders.references import ReferenceMapper, ResourceKind

from .domain import ArticleNotFound, ArticleSnapshot, NameExists
from .repository import ArticleRepository
from .schemas import ArticleIn, ArticleReadDTO, UpdateArticleDTO

logger = logging.getLogger(__name__)


def article_response(article: ArticleSnapshot, mapper: ReferenceMapper) -> Response:
    body = ArticleReadDTO(
        id=article.id,
        name=article.name,
        price=str(article.price),
        available=article.available,
    ).model_dump()
    self_link = Link(SELF, mapper.to_reference(ResourceKind.ARTICLE, article.id))
    return Response(body, status=200, headers={"Link": render_link_header([self_link])})


class ArticlesCollectionView(APIView):
    """Create (POST) and update (PUT) articles."""

    def post(self, request):
        try:
            dto = ArticleIn.model_validate(request.data)
        except ValidationError as e:
            return Response({"detail": str(e)}, status=status.HTTP_400_BAD_REQUEST)

        try:
            article = ArticleRepository().create(name=dto.name, price=dto.price, available=dto.available)
        except NameExists as e:
            return Response({"detail": str(e), "reference": e.name}, status=status.HTTP_409_CONFLICT)

        logger.info("article created", extra={"article_id": article.id})
        location = ReferenceMapper.for_request(request).to_reference(ResourceKind.ARTICLE, article.id)
        return Response(status=status.HTTP_201_CREATED, headers={"Location": location})

    def put(self, request):
        try:
            dto = UpdateArticleDTO.model_validate(request.data)
        except ValidationError as e:
            return Response({"detail": str(e)}, status=status.HTTP_400_BAD_REQUEST)

        try:
            article = ArticleRepository().update(dto.id, name=dto.name, price=dto.price, available=dto.available)
        except ArticleNotFound as e:
            return Response({"detail": str(e), "reference": e.article_id}, status=status.HTTP_404_NOT_FOUND)
        except NameExists as e:
            return Response({"detail": str(e), "reference": e.name}, status=status.HTTP_409_CONFLICT)

        logger.info("article updated", extra={"article_id": article.id})
        return article_response(article, ReferenceMapper.for_request(request))


class RetrieveArticleView(APIView):
    def get(self, request, pk: int):
        article = ArticleRepository().find_by_id(pk)
        if article is None:
            return Response({"detail": "NOT_FOUND"}, status=status.HTTP_404_NOT_FOUND)
        return article_response(article, ReferenceMapper.for_request(request))
