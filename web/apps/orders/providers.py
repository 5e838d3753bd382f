"""Service provider helpers for wiring OrderAssembler with its ports.

Views obtain the assembler through ``get_order_assembler`` (looked up on
this module at call time) so tests can substitute stub ports with
``monkeypatch.setattr("apps.orders.providers.get_order_assembler", ...)``.
"""

from apps.articles.repository import ArticleRepository

from .domain import OrderAssembler
from .repository import OrderRepository


def get_order_assembler() -> OrderAssembler:
    """Return an ``OrderAssembler`` backed by the ORM repositories."""
    return OrderAssembler(articles=ArticleRepository(), orders=OrderRepository())
