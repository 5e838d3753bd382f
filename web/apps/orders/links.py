"""Hypermedia links for persisted orders.

``project_links`` derives the links of an order from its identifiers only;
it reads the order and never changes it. Views put the transitional links
(``self``, ``add``) into the ``Link`` response header and the structural
ones (``customer``, ``article``) into the body.
"""

from dataclasses import dataclass
from typing import Iterable

from .references import ReferenceMapper, ResourceKind

SELF = "self"
ADD = "add"
CUSTOMER = "customer"
ARTICLE = "article"

TRANSITIONAL_RELS = (SELF, ADD)


@dataclass(frozen=True)
class Link:
    """A relation name and the reference it points to."""

    rel: str
    href: str


def project_links(order, mapper: ReferenceMapper) -> list[Link]:
    """Return the distinct links of a persisted order.

    The result always starts with ``self`` and ``add``, followed by the
    customer link (when the order carries a customer) and one ``article``
    link per distinct article, in line order.

    Args:
        order: A persisted ``Order`` (its ``id`` must be set).
        mapper: Mapping used to turn identifiers into references.

    Returns:
        list[Link]: Links without duplicates.
    """
    links = [
        Link(SELF, mapper.to_reference(ResourceKind.ORDER, order.id)),
        Link(ADD, mapper.to_reference(ResourceKind.ORDER_COLLECTION)),
    ]
    if order.customer is not None:
        links.append(Link(CUSTOMER, mapper.to_reference(ResourceKind.CUSTOMER, order.customer.id)))
    for line in order.lines:
        links.append(Link(ARTICLE, mapper.to_reference(ResourceKind.ARTICLE, line.article.id)))
    return list(dict.fromkeys(links))


def render_link_header(links: Iterable[Link], rels: Iterable[str] | None = None) -> str:
    """Format links as an RFC 8288 ``Link`` header value.

    Only relations listed in ``rels`` are rendered when it is given.
    """
    wanted = set(rels) if rels is not None else None
    return ", ".join(
        f'<{link.href}>; rel="{link.rel}"'
        for link in links
        if wanted is None or link.rel in wanted
    )
