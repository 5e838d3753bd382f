from decimal import Decimal

from apps.articles.domain import ArticleSnapshot
from apps.customers.domain import CustomerSnapshot
from apps.orders.domain import Order, OrderLine
from apps.orders.links import TRANSITIONAL_RELS, Link, project_links, render_link_header
from apps.orders.references import ReferenceMapper

BASE = "http://shop.example"


def _order(*article_ids, customer=True):
    return Order(
        id=5,
        customer=CustomerSnapshot(id=42, last_name="K", first_name="", email="k@example.com", kind="P")
        if customer
        else None,
        lines=tuple(
            OrderLine(article=ArticleSnapshot(id=a, name=f"A{a}", price=Decimal("1.00")), quantity=1)
            for a in article_ids
        ),
    )


def test_projects_self_add_customer_and_articles():
    links = project_links(_order(7, 8), ReferenceMapper(BASE))
    assert links == [
        Link("self", f"{BASE}/api/orders/5"),
        Link("add", f"{BASE}/api/orders"),
        Link("customer", f"{BASE}/api/customers/42"),
        Link("article", f"{BASE}/api/articles/7"),
        Link("article", f"{BASE}/api/articles/8"),
    ]


def test_repeated_article_yields_one_link():
    links = project_links(_order(7, 7), ReferenceMapper(BASE))
    assert [link.href for link in links if link.rel == "article"] == [f"{BASE}/api/articles/7"]


def test_order_without_customer_has_no_customer_link():
    links = project_links(_order(7, customer=False), ReferenceMapper(BASE))
    assert "customer" not in {link.rel for link in links}


def test_projection_does_not_change_the_order():
    order = _order(7)
    before = repr(order)
    project_links(order, ReferenceMapper(BASE))
    assert repr(order) == before


def test_render_link_header_filters_relations():
    links = project_links(_order(7), ReferenceMapper(BASE))
    header = render_link_header(links, TRANSITIONAL_RELS)
    assert header == f'<{BASE}/api/orders/5>; rel="self", <{BASE}/api/orders>; rel="add"'


def test_render_link_header_all_relations():
    header = render_link_header([Link("self", "/x/1")])
    assert header == '</x/1>; rel="self"'
