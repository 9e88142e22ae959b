"""Tests for the discount policy and money helpers"""
from decimal import Decimal

import pytest
from pydantic import ValidationError

from storefront.catalog import (
    FEATURED_DISCOUNT_PERCENT,
    Product,
    discount,
    discount_percent_for,
    featured_deal,
    price_view,
    product_card,
)
from storefront.services.money import apply_percent_off, divide, round_money, to_decimal


def test_featured_position_gets_twenty_percent():
    """Test first product in a listing is discounted"""
    product = Product(name="Laptop", price=100)

    assert discount_percent_for(product, 0) == FEATURED_DISCOUNT_PERCENT
    assert discount(product, 0) == Decimal("80.00")


def test_other_positions_are_full_price():
    product = Product(name="Mouse", price=15)

    assert discount_percent_for(product, 1) == Decimal("0")
    assert discount(product, 1) == Decimal("15.00")


def test_product_discount_overrides_featured():
    """Test discountPercent on the product"""
    product = Product.model_validate({"name": "Headphones", "price": 80, "discountPercent": 25})

    assert discount(product, 0) == Decimal("60.00")
    assert discount(product, 5) == Decimal("60.00")


def test_zero_discount_falls_back_to_featured_rule():
    """Test discountPercent 0 counts as unset"""
    product = Product.model_validate({"name": "Cable", "price": 10, "discountPercent": 0})

    assert discount(product, 0) == Decimal("8.00")
    assert price_view(product, 0)["has_discount"] is True
    assert discount(product, 1) == Decimal("10.00")
    assert price_view(product, 1)["has_discount"] is False


def test_discounted_price_rounded_to_cents():
    """Test 19.99 * 0.8 = 15.992 rounds to 15.99"""
    product = Product(name="Cable", price=19.99)

    assert discount(product, 0) == Decimal("15.99")


def test_price_view():
    """Test price fields for a card"""
    product = Product(name="Laptop", price=100)

    assert price_view(product, 0) == {
        "original_price": 100.0,
        "price": 80.0,
        "savings": 20.0,
        "discount_percent": 20.0,
        "has_discount": True,
    }
    assert price_view(product, 1)["has_discount"] is False
    assert price_view(product, 1)["savings"] == 0.0


def test_product_card_includes_catalog_fields():
    product = Product(name="Mouse", price=15, description="Wireless", category="Accessories")

    card = product_card(product, 2)

    assert card["name"] == "Mouse"
    assert card["description"] == "Wireless"
    assert card["category"] == "Accessories"
    assert card["price"] == 15.0


def test_featured_deal(sample_products):
    """Test featured deal is the first catalog product"""
    deal = featured_deal(sample_products)

    assert deal["name"] == "Laptop"
    assert deal["price"] == 80.0
    assert featured_deal([]) is None


def test_negative_price_rejected():
    with pytest.raises(ValidationError):
        Product(name="Broken", price=-1)


def test_money_helpers():
    """Test Decimal helpers"""
    assert to_decimal(19.99) == Decimal("19.99")
    assert to_decimal(None) == Decimal("0")
    assert to_decimal("abc") == Decimal("0")
    assert round_money("2.675") == Decimal("2.68")
    assert divide(10, 0) == Decimal("0")
    assert apply_percent_off(50, 10) == Decimal("45.00")
