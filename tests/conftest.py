"""Shared fixtures: the demo catalogue and an API client on a fresh store."""

from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from shop.checkout import CheckoutService
from shop.main import app
from shop.models import Customer, Product
from shop.store import Store, get_store


@pytest.fixture
def cheese() -> Product:
    return Product.shippable("Cheese", 100, 10, weight=0.2)


@pytest.fixture
def biscuits() -> Product:
    return Product.shippable("Biscuits", 150, 5, weight=0.7)


@pytest.fixture
def scratch_card() -> Product:
    return Product.simple("Scratch Card", 50, 20)


@pytest.fixture
def customer() -> Customer:
    return Customer("Ali", Decimal("1000"))


@pytest.fixture
def service() -> CheckoutService:
    return CheckoutService(shipping_fee=30)


@pytest.fixture
def store() -> Store:
    return Store()


@pytest.fixture
def client(store):
    app.dependency_overrides[get_store] = lambda: store
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
