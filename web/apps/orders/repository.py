"""Repository layer for persisting orders.

``OrderRepository`` implements the ``OrderStorePort`` used by
``OrderAssembler`` and the read side used by the views. It maps between
the ORM models and the domain dataclasses so neither the domain nor the
views handle ORM instances.
"""

from django.core.paginator import Paginator
from django.db import transaction

from apps.articles.repository import to_snapshot as article_snapshot
from apps.customers.models import CustomerModel
from apps.customers.repository import to_snapshot as customer_snapshot

from .domain import CustomerNotFound, Order, OrderLine
from .models import OrderLineModel, OrderModel
from .references import MAX_IDENTIFIER


def _to_domain(obj: OrderModel) -> Order:
    return Order(
        id=obj.id,
        customer=customer_snapshot(obj.customer),
        lines=tuple(
            OrderLine(article=article_snapshot(line.article), quantity=line.quantity)
            for line in obj.lines.all()
        ),
        created_at=obj.created_at,
        updated_at=obj.updated_at,
    )


class OrderRepository:
    """Persists ``Order`` domain objects using Django ORM."""

    def create_order(self, order: Order, customer_id: int) -> Order:
        """Persist a new order and its lines atomically.

        The order row and all line rows are written in one transaction, so
        either the whole order becomes visible or nothing does.

        Args:
            order: Assembled order; its lines reference stored articles.
            customer_id: Identifier of the ordering customer.

        Returns:
            Order: The stored order with id, customer and timestamps set.

        Raises:
            CustomerNotFound: If no customer has ``customer_id``.
        """
        with transaction.atomic():
            customer = CustomerModel.objects.filter(id=customer_id).first()
            if customer is None:
                raise CustomerNotFound(customer_id)

            obj = OrderModel.objects.create(customer=customer)
            OrderLineModel.objects.bulk_create(
                [
                    OrderLineModel(order=obj, article_id=line.article.id, quantity=line.quantity, position=pos)
                    for pos, line in enumerate(order.lines)
                ]
            )

        return Order(
            id=obj.id,
            customer=customer_snapshot(customer),
            lines=order.lines,
            created_at=obj.created_at,
            updated_at=obj.updated_at,
        )

    def find_by_id(self, order_id: int) -> Order | None:
        if order_id > MAX_IDENTIFIER:
            return None
        obj = (
            OrderModel.objects.select_related("customer")
            .prefetch_related("lines__article")
            .filter(id=order_id)
            .first()
        )
        return _to_domain(obj) if obj else None

    def find_customer_by_order_id(self, order_id: int):
        """Return the ``CustomerSnapshot`` of an order, or None if unknown."""
        if order_id > MAX_IDENTIFIER:
            return None
        customer = CustomerModel.objects.filter(orders__id=order_id).first()
        return customer_snapshot(customer) if customer else None

    def list_page(self, page, page_size: int):
        """Return ``(total, page_number, orders)`` for one page, newest first.

        Invalid or out-of-range page numbers fall back to the nearest valid
        page, following ``Paginator.get_page``.
        """
        qs = OrderModel.objects.select_related("customer").prefetch_related("lines__article")
        p = Paginator(qs, page_size)
        page_obj = p.get_page(page)
        return p.count, page_obj.number, [_to_domain(o) for o in page_obj.object_list]
