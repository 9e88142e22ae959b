"""Pytest configuration and fixtures"""
import json
import os

import pytest

# Set test environment variables
os.environ["CHECKOUT_PROCESSING_DELAY"] = "0"
os.environ["UPSTASH_REDIS_REST_URL"] = ""
os.environ["UPSTASH_REDIS_REST_TOKEN"] = ""

from storefront.cart import CartStore
from storefront.catalog import CatalogRepository, Product, set_catalog
from storefront.db import MemoryStorage, set_storage


SAMPLE_CATALOG = [
    {
        "name": "Laptop",
        "price": 100.00,
        "description": "High performance laptop",
        "image": "images/laptop.jpg",
        "category": "Computers",
    },
    {
        "name": "Mouse",
        "price": 15.00,
        "description": "Wireless optical mouse",
        "image": "images/mouse.jpg",
        "category": "Accessories",
    },
    {
        "name": "Keyboard",
        "price": 45.50,
        "description": "Mechanical keyboard with backlight",
        "category": "Accessories",
    },
    {
        "name": "Headphones",
        "price": 80.00,
        "description": "Noise-cancelling headphones",
        "category": "Audio",
        "discountPercent": 25,
    },
    # Skipped: no name
    {"price": 9.99, "description": "Nameless entry"},
    # Skipped: invalid price
    {"name": "Broken", "price": -5},
]


@pytest.fixture
def sample_catalog():
    """Raw catalog entries as stored in products-data.json"""
    return [dict(entry) for entry in SAMPLE_CATALOG]


@pytest.fixture
def sample_products(sample_catalog):
    """Valid products in catalog order"""
    return [Product.model_validate(entry) for entry in sample_catalog[:4]]


@pytest.fixture
def catalog_file(tmp_path, sample_catalog):
    """Catalog JSON file on disk"""
    path = tmp_path / "products-data.json"
    path.write_text(json.dumps(sample_catalog), encoding="utf-8")
    return path


@pytest.fixture
def catalog(catalog_file):
    """Catalog repository over the sample file"""
    return CatalogRepository(path=str(catalog_file), url="")


@pytest.fixture
def storage():
    """In-process key/value storage"""
    return MemoryStorage()


@pytest.fixture(autouse=True)
def storefront_singletons(storage, catalog):
    """Point the storage and catalog singletons at the test instances"""
    set_storage(storage)
    set_catalog(catalog)
    yield
    set_storage(None)
    set_catalog(None)


@pytest.fixture
def cart_store(storage, catalog):
    """Cart store for a fixed test session"""
    return CartStore("test-session", storage=storage, catalog=catalog)


@pytest.fixture
def make_cart_store(storage, catalog):
    """Factory for cart stores of other sessions sharing the same storage"""
    def _make(session_id: str) -> CartStore:
        return CartStore(session_id, storage=storage, catalog=catalog)
    return _make


@pytest.fixture
def valid_checkout_form():
    """Checkout form data that passes every rule"""
    return {
        "name": "Jane Doe",
        "email": "jane@example.com",
        "mobile": "0412 345 678",
        "address": "1 George Street",
        "city": "Sydney",
        "state": "NSW",
        "postcode": "2000",
        "shippingMethod": "express",
        "cardNumber": "4111 1111 1111 1111",
        "expiryDate": "12/99",
        "cvv": "123",
        "cardName": "Jane Doe",
    }


@pytest.fixture
def valid_contact_form():
    """Contact form data that passes every rule"""
    return {
        "name": "Jane Doe",
        "email": "jane@example.com",
        "phone": "0412 345 678",
        "age": "30",
        "contactPreference": "email",
        "country": "Australia",
        "newsletter": True,
        "message": "I would like to know more about your monitors.",
    }
