from decimal import Decimal

import pytest
from django.core.cache import cache

BASE = "http://testserver"


@pytest.fixture(autouse=True)
def reset_throttle_counters():
    # DRF throttles keep their history in the default cache
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def make_customer(db):
    from apps.customers.models import CustomerModel

    counter = {"n": 0}

    def _make(**kwargs):
        counter["n"] += 1
        data = {
            "last_name": "Mustermann",
            "first_name": "Max",
            "email": f"max{counter['n']}@example.com",
        }
        data.update(kwargs)
        return CustomerModel.objects.create(**data)

    return _make


@pytest.fixture
def make_article(db):
    from apps.articles.models import ArticleModel

    def _make(name, price="9.99", **kwargs):
        return ArticleModel.objects.create(name=name, price=Decimal(price), **kwargs)

    return _make


@pytest.fixture
def customer(make_customer):
    return make_customer()
