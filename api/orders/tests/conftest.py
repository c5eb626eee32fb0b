from datetime import datetime

import pytest
from fastapi.testclient import TestClient

from fakes import FakeRepositoryWrapper, FakeStore
from main import app
from orders.dependencies import get_repository
from orders.entities import Order, OrderDetail, Product


@pytest.fixture
def store():
    """Orders 1..3; orders 1 and 3 have detail rows, order 2 has none."""
    s = FakeStore()
    s.add_order(Order(order_id=1, customer_id="VINET", ship_name="Vins et alcools Chevalier",
                      ship_country="France", freight=32.38, order_date=datetime(1996, 7, 4)))
    s.add_order(Order(order_id=2, customer_id="TOMSP", ship_name="Toms Spezialitaten",
                      ship_country="Germany", freight=11.61, order_date=datetime(1996, 7, 5)))
    s.add_order(Order(order_id=3, customer_id="HANAR", ship_name="Hanari Carnes",
                      ship_country="Brazil", freight=65.83, order_date=datetime(1996, 7, 8)))
    cabrales = Product(product_id=11, product_name="Queso Cabrales", unit_price=21.0)
    s.details.append(OrderDetail(order_id=1, product_id=11, unit_price=14.0, quantity=12, product=cabrales))
    s.details.append(OrderDetail(order_id=3, product_id=42, unit_price=9.8, quantity=10))
    return s


@pytest.fixture
def repository(store):
    return FakeRepositoryWrapper(store)


@pytest.fixture
def client(repository):
    app.dependency_overrides[get_repository] = lambda: repository
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
