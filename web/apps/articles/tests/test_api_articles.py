"""API tests for the article resource."""

from decimal import Decimal

import pytest

from apps.articles.models import ArticleModel

COLLECTION_URL = "/api/articles"
BASE = "http://testserver"


@pytest.mark.django_db
def test_create_article_returns_location(client):
    r = client.post(COLLECTION_URL, data={"name": "Hammer", "price": "12.50"}, content_type="application/json")
    assert r.status_code == 201
    a = ArticleModel.objects.get(name="Hammer")
    assert r["Location"] == f"{BASE}/api/articles/{a.id}"
    assert a.price == Decimal("12.50")
    assert a.available is True


@pytest.mark.django_db
def test_create_article_duplicate_name_conflicts(client, make_article):
    make_article("Hammer")
    r = client.post(COLLECTION_URL, data={"name": "Hammer", "price": "1.00"}, content_type="application/json")
    assert r.status_code == 409
    assert r.json() == {"detail": "NAME_EXISTS", "reference": "Hammer"}


@pytest.mark.django_db
@pytest.mark.parametrize(
    "payload",
    [
        {"name": "", "price": "1.00"},
        {"name": "   ", "price": "1.00"},
        {"name": "Hammer", "price": "-1.00"},
        {"name": "Hammer", "price": "1.001"},
        {"name": "x" * 33, "price": "1.00"},
        {"price": "1.00"},
    ],
)
def test_create_article_validation_error(client, payload):
    r = client.post(COLLECTION_URL, data=payload, content_type="application/json")
    assert r.status_code == 400


@pytest.mark.django_db
def test_get_article_with_self_link(client, make_article):
    a = make_article("Zange", price="4.50", available=False)
    r = client.get(f"/api/articles/{a.id}")
    assert r.status_code == 200
    assert r.json() == {"id": a.id, "name": "Zange", "price": "4.50", "available": False}
    assert r["Link"] == f'<{BASE}/api/articles/{a.id}>; rel="self"'


@pytest.mark.django_db
def test_get_article_not_found(client):
    r = client.get("/api/articles/999999")
    assert r.status_code == 404
    assert r.json()["detail"] == "NOT_FOUND"


@pytest.mark.django_db
def test_get_article_beyond_storage_range_is_not_found(client):
    assert client.get(f"/api/articles/{2**64}").status_code == 404


@pytest.mark.django_db
def test_update_article(client, make_article):
    a = make_article("Hammer", price="10.00")
    payload = {"id": a.id, "name": "Vorschlaghammer", "price": "29.90", "available": False}
    r = client.put(COLLECTION_URL, data=payload, content_type="application/json")
    assert r.status_code == 200
    assert r.json()["name"] == "Vorschlaghammer"
    a.refresh_from_db()
    assert (a.name, a.price, a.available) == ("Vorschlaghammer", Decimal("29.90"), False)


@pytest.mark.django_db
def test_update_article_keeping_its_own_name(client, make_article):
    a = make_article("Hammer", price="10.00")
    r = client.put(COLLECTION_URL, data={"id": a.id, "name": "Hammer", "price": "11.00"}, content_type="application/json")
    assert r.status_code == 200


@pytest.mark.django_db
def test_update_article_not_found(client):
    r = client.put(COLLECTION_URL, data={"id": 999999, "name": "X", "price": "1.00"}, content_type="application/json")
    assert r.status_code == 404
    assert r.json() == {"detail": "NOT_FOUND", "reference": 999999}


@pytest.mark.django_db
def test_update_article_to_taken_name_conflicts(client, make_article):
    make_article("Hammer")
    z = make_article("Zange")
    r = client.put(COLLECTION_URL, data={"id": z.id, "name": "Hammer", "price": "1.00"}, content_type="application/json")
    assert r.status_code == 409
