"""HTTP views for the orders app.

Views are kept small: they validate requests (via Pydantic), map them to
domain DTOs, delegate to ``OrderAssembler`` or ``OrderRepository`` and
build the HTTP response.

Creating an order answers 201 with an empty body and a ``Location``
header. Reading an order returns its structural links in the body
(``customer_uri``, ``lines[].article_uri``) and its transitional links
(``self``, ``add``) in the ``Link`` header.

Assembly failures map to 404 with ``{"detail": CODE, "reference": ...}``;
storage failures map to 503 ``STORAGE_UNAVAILABLE``.
"""

import logging

from django.conf import settings
from django.db import DatabaseError
from pydantic import ValidationError
from rest_framework import status
from rest_framework.response import Response
from rest_framework.throttling import ScopedRateThrottle
from rest_framework.views import APIView

from apps.customers.views import customer_response

from . import providers
from .domain import Order, OrderAssemblyError, OrderLineRequest, OrderRequest
from .links import TRANSITIONAL_RELS, project_links, render_link_header
from .references import ReferenceMapper, ResourceKind
from .repository import OrderRepository
from .schemas import CreateOrderDTO, OrderLineOut, OrderReadDTO, OrderSummaryDTO

logger = logging.getLogger(__name__)

MAX_PAGE_SIZE = 100


def order_body(order: Order, mapper: ReferenceMapper) -> dict:
    customer_uri = mapper.to_reference(ResourceKind.CUSTOMER, order.customer.id) if order.customer else None
    dto = OrderReadDTO(
        id=order.id,
        customer_uri=customer_uri,
        lines=[
            OrderLineOut(
                article_uri=mapper.to_reference(ResourceKind.ARTICLE, line.article.id),
                quantity=line.quantity,
            )
            for line in order.lines
        ],
        created_at=order.created_at,
        updated_at=order.updated_at,
    )
    return dto.model_dump(mode="json", exclude_none=True)


def _page_size(raw) -> int:
    try:
        size = int(raw)
    except (TypeError, ValueError):
        return settings.ORDERS_PAGE_SIZE
    return min(max(size, 1), MAX_PAGE_SIZE)


class OrdersCollectionView(APIView):
    """List orders (GET) and create an order from references (POST)."""

    throttle_classes = [ScopedRateThrottle]

    def get_throttles(self):
        self.throttle_scope = "orders_list" if self.request.method == "GET" else "orders_create"
        return [throttle() for throttle in self.throttle_classes]

    def get(self, request):
        page_size = _page_size(request.GET.get("page_size"))
        total, page, orders = OrderRepository().list_page(request.GET.get("page", 1), page_size)
        mapper = ReferenceMapper.for_request(request)

        results = [
            OrderSummaryDTO(
                id=o.id,
                uri=mapper.to_reference(ResourceKind.ORDER, o.id),
                customer_uri=mapper.to_reference(ResourceKind.CUSTOMER, o.customer.id) if o.customer else None,
                line_count=len(o.lines),
                created_at=o.created_at,
            ).model_dump(mode="json", exclude_none=True)
            for o in orders
        ]
        return Response(
            {"count": total, "page": page, "page_size": page_size, "results": results},
            status=200,
        )

    def post(self, request):
        """Create a new order.

        Returns:
            Response: One of the following responses.
            - 201 with empty body and ``Location`` of the new order.
            - 400 for DTO validation errors.
            - 404 with {detail, reference} when the customer or the
              articles cannot be resolved or found.
            - 503 with {detail: "STORAGE_UNAVAILABLE"} on database errors.
        """
        # 1) Pydantic validation
        try:
            dto = CreateOrderDTO.model_validate(request.data)
        except ValidationError as e:
            return Response({"detail": str(e)}, status=status.HTTP_400_BAD_REQUEST)

        # 2) Domain
        order_request = OrderRequest(
            customer_ref=dto.customer_uri,
            lines=tuple(OrderLineRequest(article_ref=li.article_uri, quantity=li.quantity) for li in dto.lines),
        )
        assembler = providers.get_order_assembler()
        try:
            order = assembler.assemble(order_request)
        except OrderAssemblyError as e:
            logger.info("order rejected", extra={"code": str(e), "reference": e.reference})
            return Response({"detail": str(e), "reference": e.reference}, status=status.HTTP_404_NOT_FOUND)
        except DatabaseError:
            logger.exception("order storage failed")
            return Response({"detail": "STORAGE_UNAVAILABLE"}, status=status.HTTP_503_SERVICE_UNAVAILABLE)

        # 3) Response
        location = ReferenceMapper.for_request(request).to_reference(ResourceKind.ORDER, order.id)
        return Response(status=status.HTTP_201_CREATED, headers={"Location": location})


class RetrieveOrderView(APIView):
    throttle_classes = [ScopedRateThrottle]
    throttle_scope = "orders_detail"

    def get(self, request, pk: int):
        order = OrderRepository().find_by_id(pk)
        if order is None:
            return Response({"detail": "NOT_FOUND"}, status=status.HTTP_404_NOT_FOUND)

        mapper = ReferenceMapper.for_request(request)
        links = project_links(order, mapper)
        return Response(
            order_body(order, mapper),
            status=200,
            headers={"Link": render_link_header(links, TRANSITIONAL_RELS)},
        )


class OrderCustomerView(APIView):
    throttle_classes = [ScopedRateThrottle]
    throttle_scope = "orders_detail"

    def get(self, request, pk: int):
        customer = OrderRepository().find_customer_by_order_id(pk)
        if customer is None:
            return Response({"detail": "NOT_FOUND"}, status=status.HTTP_404_NOT_FOUND)
        return customer_response(customer, ReferenceMapper.for_request(request))
