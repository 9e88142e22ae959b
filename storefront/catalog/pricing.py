"""
Discount Policy

The storefront marks the first product of any listing as "featured" and takes
20% off it. Products may instead carry their own ``discountPercent``. This
module is the one place that rule lives.
"""
from decimal import Decimal
from typing import Any, Optional, Sequence

from storefront.services.money import apply_percent_off, round_money, subtract, to_float
from .models import Product

FEATURED_DISCOUNT_PERCENT = Decimal("20")
FEATURED_POSITION = 0


def discount_percent_for(product: Product, position: int) -> Decimal:
    """Percentage off for ``product`` shown at ``position`` in a listing."""
    # A zero or missing discountPercent falls back to the featured rule
    if product.discount_percent:
        return product.discount_percent
    if position == FEATURED_POSITION:
        return FEATURED_DISCOUNT_PERCENT
    return Decimal("0")


def discount(product: Product, position: int) -> Decimal:
    """Price a customer pays for ``product`` at ``position``, rounded to cents."""
    percent = discount_percent_for(product, position)
    if percent <= 0:
        return round_money(product.price)
    return apply_percent_off(product.price, percent)


def price_view(product: Product, position: int) -> dict[str, Any]:
    """Price fields for rendering a product card."""
    percent = discount_percent_for(product, position)
    original_price = round_money(product.price)
    final_price = discount(product, position)
    return {
        "original_price": to_float(original_price),
        "price": to_float(final_price),
        "savings": to_float(subtract(original_price, final_price)),
        "discount_percent": to_float(percent),
        "has_discount": percent > 0,
    }


def product_card(product: Product, position: int) -> dict[str, Any]:
    """Product as a listing card: catalog fields plus its price view."""
    return {
        "name": product.name,
        "description": product.description,
        "image": product.image,
        "category": product.category,
        **price_view(product, position),
    }


def featured_deal(products: Sequence[Product]) -> Optional[dict[str, Any]]:
    """The featured deal card: the first catalog product with its featured price."""
    if not products:
        return None
    return product_card(products[FEATURED_POSITION], FEATURED_POSITION)
