"""Tests for catalog loading and search"""
import json
from unittest.mock import AsyncMock, patch

import pytest

from storefront.catalog import (
    ALL_CATEGORIES,
    CatalogRepository,
    categories,
    filter_by_category,
    search_products,
)
from storefront.catalog.models import DEFAULT_IMAGE
from storefront.errors import CatalogUnavailableError


@pytest.mark.asyncio
async def test_list_products_skips_nameless_and_invalid_entries(catalog):
    """Test loading the catalog file"""
    products = await catalog.list_products()

    assert [p.name for p in products] == ["Laptop", "Mouse", "Keyboard", "Headphones"]


@pytest.mark.asyncio
async def test_list_products_fills_defaults(catalog):
    """Test missing optional fields get defaults"""
    products = await catalog.list_products()
    keyboard = products[2]

    assert keyboard.image == DEFAULT_IMAGE
    assert keyboard.discount_percent is None
    assert products[3].discount_percent == 25


@pytest.mark.asyncio
async def test_missing_catalog_file(tmp_path):
    """Test a missing file is reported as unavailable"""
    repo = CatalogRepository(path=str(tmp_path / "missing.json"), url="")

    with pytest.raises(CatalogUnavailableError):
        await repo.list_products()


@pytest.mark.asyncio
async def test_catalog_not_a_list(tmp_path):
    """Test a JSON object instead of a list is rejected"""
    path = tmp_path / "products-data.json"
    path.write_text(json.dumps({"products": []}), encoding="utf-8")
    repo = CatalogRepository(path=str(path), url="")

    with pytest.raises(CatalogUnavailableError):
        await repo.list_products()


@pytest.mark.asyncio
async def test_catalog_invalid_json(tmp_path):
    """Test malformed JSON is reported as unavailable"""
    path = tmp_path / "products-data.json"
    path.write_text("[{", encoding="utf-8")
    repo = CatalogRepository(path=str(path), url="")

    with pytest.raises(CatalogUnavailableError):
        await repo.list_products()


@pytest.mark.asyncio
async def test_remote_catalog_used_when_url_set(sample_catalog):
    """Test the URL source takes precedence over the file"""
    repo = CatalogRepository(path="/nonexistent.json", url="https://example.com/products.json")

    with patch.object(CatalogRepository, "_fetch_remote", AsyncMock(return_value=sample_catalog)):
        products = await repo.list_products()

    assert len(products) == 4


@pytest.mark.asyncio
async def test_find_product_returns_position(catalog):
    """Test product lookup by name"""
    product, position = await catalog.find_product("Keyboard")

    assert product.name == "Keyboard"
    assert position == 2
    assert await catalog.find_product("Nonexistent") is None
    assert await catalog.get_product("Nonexistent") is None


def test_search_is_case_insensitive(sample_products):
    """Test search over the name"""
    results = search_products(sample_products, "MOUSE")

    assert [p.name for p in results] == ["Mouse"]


def test_search_matches_description_and_category(sample_products):
    """Test search over description and category"""
    assert [p.name for p in search_products(sample_products, "mechanical")] == ["Keyboard"]
    assert [p.name for p in search_products(sample_products, "accessories")] == ["Mouse", "Keyboard"]


def test_blank_search_returns_everything(sample_products):
    """Test blank and missing terms"""
    assert search_products(sample_products, "   ") == sample_products
    assert search_products(sample_products, None) == sample_products


def test_search_no_match(sample_products):
    assert search_products(sample_products, "tablet") == []


def test_filter_by_category(sample_products):
    """Test category filter"""
    assert [p.name for p in filter_by_category(sample_products, "Accessories")] == ["Mouse", "Keyboard"]
    assert filter_by_category(sample_products, ALL_CATEGORIES) == sample_products
    assert filter_by_category(sample_products, None) == sample_products


def test_categories_in_catalog_order(sample_products):
    """Test distinct categories keep first-seen order"""
    assert categories(sample_products) == ["Computers", "Accessories", "Audio"]
