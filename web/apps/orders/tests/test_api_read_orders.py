import pytest

from apps.orders.models import OrderLineModel, OrderModel

BASE = "http://testserver"
DETAIL_URL = "/api/orders/{oid}"
LIST_URL = "/api/orders"


def seed_order(customer, *articles):
    o = OrderModel.objects.create(customer=customer)
    for pos, (article, qty) in enumerate(articles):
        OrderLineModel.objects.create(order=o, article=article, quantity=qty, position=pos)
    return o


@pytest.mark.django_db
def test_get_order_by_id_returns_links(client, customer, make_article):
    a, b = make_article("Hammer"), make_article("Zange")
    o = seed_order(customer, (b, 2), (a, 1))

    r = client.get(DETAIL_URL.format(oid=o.id))
    assert r.status_code == 200
    body = r.json()
    assert body["id"] == o.id
    assert body["customer_uri"] == f"{BASE}/api/customers/{customer.id}"
    assert body["lines"] == [
        {"article_uri": f"{BASE}/api/articles/{b.id}", "quantity": 2},
        {"article_uri": f"{BASE}/api/articles/{a.id}", "quantity": 1},
    ]
    assert "created_at" in body
    assert r["Link"] == f'<{BASE}/api/orders/{o.id}>; rel="self", <{BASE}/api/orders>; rel="add"'


@pytest.mark.django_db
def test_created_order_can_be_read_back(client, customer, make_article):
    a = make_article("Hammer")
    payload = {
        "customer_uri": f"{BASE}/api/customers/{customer.id}",
        "lines": [{"article_uri": f"{BASE}/api/articles/{a.id}", "quantity": 3}],
    }
    created = client.post(LIST_URL, data=payload, content_type="application/json")
    assert created.status_code == 201

    r = client.get(created["Location"])
    assert r.status_code == 200
    assert r.json()["customer_uri"] == payload["customer_uri"]
    assert r.json()["lines"] == payload["lines"]


@pytest.mark.django_db
def test_get_order_not_found_returns_404(client):
    r = client.get(DETAIL_URL.format(oid=424242))
    assert r.status_code == 404
    assert r.json()["detail"] == "NOT_FOUND"


@pytest.mark.django_db
def test_get_order_customer(client, make_customer, make_article):
    c = make_customer(last_name="Schmidt", kind="F")
    o = seed_order(c, (make_article("Hammer"), 1))

    r = client.get(f"/api/orders/{o.id}/customer")
    assert r.status_code == 200
    body = r.json()
    assert body["id"] == c.id
    assert body["last_name"] == "Schmidt"
    assert body["kind"] == "F"
    assert r["Link"] == f'<{BASE}/api/customers/{c.id}>; rel="self"'


@pytest.mark.django_db
def test_get_order_customer_not_found(client):
    r = client.get("/api/orders/424242/customer")
    assert r.status_code == 404


@pytest.mark.django_db
@pytest.mark.parametrize("path", ["/api/orders/{oid}", "/api/orders/{oid}/customer"])
def test_identifier_beyond_storage_range_is_not_found(client, path):
    r = client.get(path.format(oid=2**64))
    assert r.status_code == 404
    assert r.json()["detail"] == "NOT_FOUND"


@pytest.mark.django_db
def test_list_orders_returns_paginated_array(client, customer, make_article):
    a = make_article("Hammer")
    first = seed_order(customer, (a, 1))
    second = seed_order(customer, (a, 1), (a, 2))

    r = client.get(LIST_URL)
    assert r.status_code == 200
    body = r.json()
    assert body["count"] == 2
    assert body["page"] == 1
    ids = [x["id"] for x in body["results"]]
    assert set(ids) == {first.id, second.id}
    by_id = {x["id"]: x for x in body["results"]}
    assert by_id[second.id]["line_count"] == 2
    assert by_id[second.id]["uri"] == f"{BASE}/api/orders/{second.id}"


@pytest.mark.django_db
def test_list_orders_page_size(client, customer, make_article):
    a = make_article("Hammer")
    for _ in range(3):
        seed_order(customer, (a, 1))

    r = client.get(LIST_URL, {"page": 2, "page_size": 2})
    body = r.json()
    assert body["count"] == 3
    assert body["page"] == 2
    assert body["page_size"] == 2
    assert len(body["results"]) == 1


@pytest.mark.django_db
def test_list_orders_tolerates_bad_paging_params(client):
    r = client.get(LIST_URL, {"page": "abc", "page_size": "many"})
    assert r.status_code == 200
    assert r.json()["page"] == 1
