"""Search and category filtering over an already-loaded product list."""
from typing import Iterable

from .models import Product

ALL_CATEGORIES = "All"


def search_products(products: Iterable[Product], search_term: str | None) -> list[Product]:
    """
    Case-insensitive substring search over name, description and category.

    A blank or missing term returns every product unchanged.
    """
    products = list(products)
    term = (search_term or "").lower().strip()
    if not term:
        return products

    return [
        product for product in products
        if term in product.name.lower()
        or term in product.description.lower()
        or term in product.category.lower()
    ]


def filter_by_category(products: Iterable[Product], category: str | None) -> list[Product]:
    """Exact category match; ``"All"`` (or nothing) keeps every product."""
    products = list(products)
    if not category or category == ALL_CATEGORIES:
        return products
    return [product for product in products if product.category == category]


def categories(products: Iterable[Product]) -> list[str]:
    """Distinct non-empty categories in first-seen catalog order."""
    seen: dict[str, None] = {}
    for product in products:
        if product.category:
            seen.setdefault(product.category, None)
    return list(seen)
