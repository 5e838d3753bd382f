"""Integration tests that assert created orders are persisted.

These tests use Django's test client and direct DB assertions to validate
that the HTTP API writes the order row and its line rows together, and
that a failure while writing lines leaves no order behind.
"""

import pytest
from django.db import IntegrityError, connection

from apps.orders.models import OrderLineModel

CREATE_URL = "/api/orders"
BASE = "http://testserver"


@pytest.mark.django_db
def test_create_persists_order_and_line_rows(client, customer, make_article):
    """POST a valid order and assert the rows written to the DB."""
    a, b = make_article("Hammer"), make_article("Zange")
    payload = {
        "customer_uri": f"{BASE}/api/customers/{customer.id}",
        "lines": [
            {"article_uri": f"{BASE}/api/articles/{b.id}", "quantity": 4},
            {"article_uri": f"{BASE}/api/articles/{a.id}", "quantity": 1},
        ],
    }
    r = client.post(CREATE_URL, data=payload, content_type="application/json")
    assert r.status_code == 201
    oid = int(r["Location"].rsplit("/", 1)[-1])

    with connection.cursor() as cur:
        cur.execute("select customer_id, created_at from orders where id = %s", [oid])
        row = cur.fetchone()
        cur.execute(
            "select article_id, quantity, position from order_lines where order_id = %s order by position",
            [oid],
        )
        lines = cur.fetchall()

    assert row is not None
    customer_id, created_at = row
    assert customer_id == customer.id
    assert created_at is not None
    assert [tuple(x) for x in lines] == [(b.id, 4, 0), (a.id, 1, 1)]


@pytest.mark.django_db(transaction=True)
def test_failed_line_write_leaves_no_order(client, customer, make_article, monkeypatch):
    a = make_article("Hammer")

    def boom(*args, **kwargs):
        raise IntegrityError("line insert failed")

    monkeypatch.setattr(OrderLineModel.objects, "bulk_create", boom)
    payload = {
        "customer_uri": f"{BASE}/api/customers/{customer.id}",
        "lines": [{"article_uri": f"{BASE}/api/articles/{a.id}"}],
    }
    r = client.post(CREATE_URL, data=payload, content_type="application/json")
    assert r.status_code == 503

    with connection.cursor() as cur:
        cur.execute("select count(*) from orders")
        assert cur.fetchone()[0] == 0
