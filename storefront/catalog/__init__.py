"""Catalog package: product model, repository, search, and discount policy."""
from .models import Product
from .repository import CatalogRepository, get_catalog, set_catalog
from .search import search_products, filter_by_category, categories, ALL_CATEGORIES
from .pricing import (
    FEATURED_DISCOUNT_PERCENT,
    discount,
    discount_percent_for,
    price_view,
    product_card,
    featured_deal,
)

__all__ = [
    "Product",
    "CatalogRepository",
    "get_catalog",
    "set_catalog",
    "search_products",
    "filter_by_category",
    "categories",
    "ALL_CATEGORIES",
    "FEATURED_DISCOUNT_PERCENT",
    "discount",
    "discount_percent_for",
    "price_view",
    "product_card",
    "featured_deal",
]
