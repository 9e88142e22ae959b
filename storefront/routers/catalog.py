"""
Storefront Catalog Router

Public product listing. Discount views are attached by position in the
returned list, so the first product of every listing is the featured one.
"""
from typing import Optional

from fastapi import APIRouter, HTTPException, Query

from storefront.catalog import (
    ALL_CATEGORIES,
    categories,
    featured_deal,
    filter_by_category,
    get_catalog,
    product_card,
    search_products,
)
from storefront.errors import CatalogUnavailableError

router = APIRouter(tags=["storefront-catalog"])


async def _load_products():
    try:
        return await get_catalog().list_products()
    except CatalogUnavailableError as e:
        raise HTTPException(status_code=503, detail=e.message)


@router.get("/products")
async def list_products(
    q: Optional[str] = Query(None, description="Search term (name, description, category)"),
    category: Optional[str] = Query(None, description="Category filter; 'All' for every category"),
):
    """Product listing, optionally filtered by category and search term."""
    products = await _load_products()
    products = filter_by_category(products, category)
    products = search_products(products, q)

    return {
        "products": [product_card(product, position) for position, product in enumerate(products)],
        "count": len(products),
        "query": (q or "").strip(),
        "category": category or ALL_CATEGORIES,
    }


@router.get("/products/featured")
async def get_featured_deal():
    """The featured deal: first catalog product at 20% off."""
    deal = featured_deal(await _load_products())
    if deal is None:
        raise HTTPException(status_code=404, detail="No products available")
    return deal


@router.get("/products/categories")
async def list_categories():
    """Category filter buttons, "All" first."""
    products = await _load_products()
    return {"categories": [ALL_CATEGORIES, *categories(products)]}
