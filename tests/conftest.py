import os
import sys
import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from shopcatalog.app.config import Config
from shopcatalog.app.factory import create_app
from shopcatalog.app.models import Product
from shopcatalog.modules.catalog import source


class TestingConfig(Config):
    TESTING = True
    PRODUCTS_API_URL = "http://catalog.test/products"
    PRODUCTS_API_TIMEOUT = 2.0
    CURRENCY_LABEL = "dh"
    CORS_ORIGINS = []


SAMPLE_PRODUCTS = [
    Product(id=1, title="Backpack", price=109.95, category="men's clothing", image="http://img.test/1.jpg"),
    Product(id=2, title="Slim Fit T-Shirt", price=22.3, category="men's clothing", image="http://img.test/2.jpg"),
    Product(id=3, title="Gold Bracelet", price=695, category="jewelery", image="http://img.test/3.jpg"),
    Product(id=4, title="Silver Ring", price=10.99, category="jewelery", image="http://img.test/4.jpg"),
    Product(id=5, title="SSD 1TB", price=109.95, category="electronics", image="http://img.test/5.jpg"),
]


@pytest.fixture()
def app():
    return create_app(TestingConfig)


@pytest.fixture()
def client(app):
    with app.test_client() as client:
        yield client


@pytest.fixture()
def catalog(monkeypatch):
    """Serve SAMPLE_PRODUCTS instead of calling the remote API.

    Returns the list of (url, timeout) pairs the source was called with.
    """
    calls = []

    def fake_fetch(url, timeout=10):
        calls.append((url, timeout))
        return list(SAMPLE_PRODUCTS)

    monkeypatch.setattr(source, "fetch_products", fake_fetch)
    return calls


@pytest.fixture()
def broken_catalog(monkeypatch):
    def fake_fetch(url, timeout=10):
        raise source.ProductSourceError(url, "connection refused")

    monkeypatch.setattr(source, "fetch_products", fake_fetch)
