"""Mapping between resource identifiers and their external references.

Clients address customers, articles and orders by URI. The storage
identifier is the last path segment of such a URI, e.g.
``http://shop.example/api/articles/7`` refers to article ``7``.

``resolve_identifier`` is the pure inbound direction. ``ReferenceMapper``
bundles it with the outbound direction, which needs Django's URL
resolver and the base URI of the current request.
"""

import re
from enum import Enum

from django.urls import reverse

# Upper bound of a signed 64-bit storage key.
MAX_IDENTIFIER = 2**63 - 1

_IDENTIFIER_RE = re.compile(r"[0-9]+", re.ASCII)


class ResourceKind(str, Enum):
    """Resources that can be addressed by an external reference."""

    CUSTOMER = "customer"
    ARTICLE = "article"
    ORDER = "order"
    ORDER_COLLECTION = "orders"


# kind -> (url name, takes an identifier)
_ROUTES = {
    ResourceKind.CUSTOMER: ("customers:customers-detail", True),
    ResourceKind.ARTICLE: ("articles:articles-detail", True),
    ResourceKind.ORDER: ("orders:orders-detail", True),
    ResourceKind.ORDER_COLLECTION: ("orders:orders-collection", False),
}


def raw_tail(ref: str) -> str:
    """Return the text after the last ``/`` of ``ref`` (all of it if none)."""
    return ref[ref.rfind("/") + 1:]


def resolve_identifier(ref: str | None) -> int | None:
    """Extract the integral identifier embedded in an external reference.

    Args:
        ref: The external reference, or None when the client sent none.

    Returns:
        int | None: The identifier, or None when ``ref`` is missing or its
        last path segment is not a positive decimal integer that
        fits a storage key. Never raises for string input.
    """
    if ref is None:
        return None
    tail = raw_tail(ref)
    if not _IDENTIFIER_RE.fullmatch(tail):
        return None
    value = int(tail)
    if value == 0 or value > MAX_IDENTIFIER:
        return None
    return value


class ReferenceMapper:
    """Bidirectional identifier/reference mapping for one base URI.

    Attributes:
        base_uri: Scheme and authority prepended to reversed paths, without
            a trailing slash. Empty yields host-relative references.
    """

    def __init__(self, base_uri: str = ""):
        self.base_uri = base_uri.rstrip("/")

    @classmethod
    def for_request(cls, request) -> "ReferenceMapper":
        """Build a mapper producing absolute URIs for the given request."""
        return cls(request.build_absolute_uri("/"))

    @staticmethod
    def resolve(ref: str | None) -> int | None:
        return resolve_identifier(ref)

    def to_reference(self, kind: ResourceKind, identifier: int | None = None) -> str:
        """Build the external reference of a resource.

        Args:
            kind: Which resource is addressed.
            identifier: Storage identifier; must be None for collections.

        Raises:
            ValueError: If an identifier is missing for an item resource or
                given for a collection.
        """
        route, takes_id = _ROUTES[ResourceKind(kind)]
        if takes_id != (identifier is not None):
            raise ValueError(f"identifier mismatch for {ResourceKind(kind).value}")
        kwargs = {"pk": identifier} if takes_id else None
        return f"{self.base_uri}{reverse(route, kwargs=kwargs)}"
