"""Unit tests for matching requested lines against looked-up articles."""

from decimal import Decimal

from apps.articles.domain import ArticleSnapshot
from apps.orders.domain import OrderLineRequest, dropped_requests, reconcile

A7 = ArticleSnapshot(id=7, name="Hammer", price=Decimal("9.99"))
A8 = ArticleSnapshot(id=8, name="Zange", price=Decimal("4.50"))
A9 = ArticleSnapshot(id=9, name="Saege", price=Decimal("19.00"))


def _line(aid, qty=1):
    ref = None if aid is None else f"/api/articles/{aid}"
    return (aid, OrderLineRequest(article_ref=ref, quantity=qty))


def test_keeps_request_order_not_lookup_order():
    lines = [_line(9), _line(7), _line(8)]
    out = reconcile(lines, [A7, A8, A9])
    assert [li.article.id for li in out] == [9, 7, 8]


def test_empty_found_drops_everything():
    lines = [_line(7), _line(8)]
    assert reconcile(lines, []) == ()
    assert dropped_requests(lines, []) == tuple(req for _, req in lines)


def test_all_found_keeps_every_line_including_duplicates():
    lines = [_line(7, 1), _line(7, 3), _line(8, 2)]
    out = reconcile(lines, [A8, A7])
    assert len(out) == len(lines)
    assert [(li.article.id, li.quantity) for li in out] == [(7, 1), (7, 3), (8, 2)]


def test_unresolved_and_missing_lines_are_dropped():
    lines = [_line(None), _line(7), _line(999), _line(8)]
    out = reconcile(lines, [A7, A8])
    assert [li.article.id for li in out] == [7, 8]
    assert [req.article_ref for req in dropped_requests(lines, [A7, A8])] == [None, "/api/articles/999"]


def test_attaches_the_found_snapshot():
    out = reconcile([_line(7, 2)], [A7])
    assert out[0].article is A7
    assert out[0].quantity == 2


def test_accepts_any_iterable_of_found_articles():
    out = reconcile([_line(7)], (a for a in [A7]))
    assert len(out) == 1
