"""Domain models, ports and the assembly service for orders.

An order arrives with external references (URIs) to its customer and to
the article of every line. ``OrderAssembler`` resolves those references,
looks up all referenced articles in one batch, keeps the lines whose
article exists and hands the result to the order store.

Lines whose article reference is malformed or points to a missing article
are dropped without failing the request, as long as at least one line
survives. The dropped requests are kept on ``Order.dropped_lines`` for
diagnostics; they are never persisted.
"""

import logging
from dataclasses import dataclass, replace
from datetime import datetime
from typing import Iterable, Protocol, Sequence

from apps.articles.domain import ArticleSnapshot
from apps.customers.domain import CustomerSnapshot

from .references import raw_tail, resolve_identifier

logger = logging.getLogger(__name__)


# ---- Errors ----
class OrderAssemblyError(ValueError):
    """Base class of the failures that stop an order before persistence.

    ``str(error)`` is the short error code; ``reference`` carries the
    offending raw reference or identifier when one is known.
    """

    code = "ORDER_ASSEMBLY_FAILED"

    def __init__(self, reference=None):
        super().__init__(self.code)
        self.reference = reference


class UnresolvableCustomer(OrderAssemblyError):
    """The customer reference was missing or did not end in an identifier."""

    code = "UNRESOLVABLE_CUSTOMER"


class NoResolvableArticles(OrderAssemblyError):
    """No line carried an article reference ending in an identifier."""

    code = "NO_RESOLVABLE_ARTICLES"


class NoArticlesFound(OrderAssemblyError):
    """None of the referenced articles exists."""

    code = "NO_ARTICLES_FOUND"


class CustomerNotFound(OrderAssemblyError):
    """The customer identifier is well formed but no such customer is stored."""

    code = "CUSTOMER_NOT_FOUND"


# ---- Entities / DTOs ----
@dataclass(frozen=True)
class OrderLineRequest:
    """One requested line: an article reference plus line attributes."""

    article_ref: str | None
    quantity: int = 1


@dataclass(frozen=True)
class OrderRequest:
    """Inbound order payload, still holding external references."""

    customer_ref: str | None
    lines: tuple[OrderLineRequest, ...] = ()


@dataclass(frozen=True)
class OrderLine:
    article: ArticleSnapshot
    quantity: int


@dataclass(frozen=True)
class Order:
    """An order whose lines point at stored articles.

    Attributes:
        id: Storage identifier, None until persisted.
        customer: Customer snapshot, set by the order store.
        lines: Order lines in request order.
        created_at: Set by the order store.
        updated_at: Set by the order store.
        dropped_lines: Requests removed during assembly (diagnostic only).
    """

    id: int | None = None
    customer: CustomerSnapshot | None = None
    lines: tuple[OrderLine, ...] = ()
    created_at: datetime | None = None
    updated_at: datetime | None = None
    dropped_lines: tuple[OrderLineRequest, ...] = ()


# ---- Ports (DIP) ----
class ArticleLookupPort(Protocol):
    def find_by_ids(self, ids: set[int]) -> Iterable[ArticleSnapshot]:
        """Return the stored articles among ``ids``; unknown ids are omitted."""
        raise NotImplementedError()


class OrderStorePort(Protocol):
    def create_order(self, order: Order, customer_id: int) -> Order:
        """Persist ``order`` for the customer and return the stored order.

        Raises:
            CustomerNotFound: If no customer has ``customer_id``.
        """
        raise NotImplementedError()


# ---- Reconciliation ----
def reconcile(
    lines: Sequence[tuple[int | None, OrderLineRequest]],
    found: Iterable[ArticleSnapshot],
) -> tuple[OrderLine, ...]:
    """Attach found articles to requested lines.

    A line survives only if its resolved identifier is not None and one of
    the ``found`` articles carries it. Surviving lines keep their relative
    order, and lines sharing an identifier all survive.

    Args:
        lines: ``(resolved identifier, request)`` pairs in request order.
        found: Result of the batch article lookup, in any order.

    Returns:
        tuple[OrderLine, ...]: The surviving lines.
    """
    by_id = {article.id: article for article in found}
    return tuple(
        OrderLine(article=by_id[article_id], quantity=request.quantity)
        for article_id, request in lines
        if article_id is not None and article_id in by_id
    )


def dropped_requests(
    lines: Sequence[tuple[int | None, OrderLineRequest]],
    found: Iterable[ArticleSnapshot],
) -> tuple[OrderLineRequest, ...]:
    """Return the requests ``reconcile`` discards for the same input."""
    found_ids = {article.id for article in found}
    return tuple(request for article_id, request in lines if article_id not in found_ids)


# ---- Domain service ----
class OrderAssembler:
    """Turns an ``OrderRequest`` into a persisted ``Order``.

    The assembler performs no I/O itself; the batch lookup and the final
    write go through the injected ports, one call each, in that order.
    """

    def __init__(self, articles: ArticleLookupPort, orders: OrderStorePort):
        self.articles = articles
        self.orders = orders

    def assemble(self, request: OrderRequest) -> Order:
        """Resolve, reconcile and persist an order.

        Reference and lookup failures are raised before the order store
        is called.
        Errors raised by the ports themselves propagate unchanged.

        Args:
            request: The inbound order with its external references.

        Returns:
            Order: The persisted order returned by the order store.

        Raises:
            UnresolvableCustomer: The customer reference is missing or
                malformed.
            NoResolvableArticles: No line reference resolves (this includes
                an order without lines). Raised before any lookup.
            NoArticlesFound: No referenced article exists.
            CustomerNotFound: Propagated from the order store.
        """
        # 1) Customer
        customer_id = resolve_identifier(request.customer_ref)
        if customer_id is None:
            raise UnresolvableCustomer(request.customer_ref)

        # 2) Article identifiers, distinct and in first-seen order
        resolved = [(resolve_identifier(line.article_ref), line) for line in request.lines]
        article_ids = list(dict.fromkeys(aid for aid, _ in resolved if aid is not None))

        # 3) Nothing to look up
        if not article_ids:
            first_ref = next((line.article_ref for line in request.lines if line.article_ref is not None), None)
            raise NoResolvableArticles(raw_tail(first_ref) if first_ref is not None else None)

        # 4-5) Batch lookup
        found = list(self.articles.find_by_ids(set(article_ids)))
        if not found:
            raise NoArticlesFound(article_ids[0])

        # 6) Reconcile into a new order
        order = Order(lines=reconcile(resolved, found), dropped_lines=dropped_requests(resolved, found))
        if order.dropped_lines:
            logger.warning(
                "order lines dropped",
                extra={
                    "customer_id": customer_id,
                    "requested": len(request.lines),
                    "dropped": len(order.dropped_lines),
                    "dropped_refs": [line.article_ref for line in order.dropped_lines],
                },
            )

        # 7-8) Persist
        persisted = self.orders.create_order(order, customer_id)
        logger.info(
            "order created",
            extra={"order_id": persisted.id, "customer_id": customer_id, "lines": len(persisted.lines)},
        )
        return replace(persisted, dropped_lines=order.dropped_lines)
