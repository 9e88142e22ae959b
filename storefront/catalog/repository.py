"""
Catalog Repository - read-only access to the product list.

The catalog is re-read on every call, either from a JSON file on disk or from
a URL. There is no write path back to it.
"""
import asyncio
import json
import os
from pathlib import Path
from typing import Optional

import httpx
from pydantic import ValidationError
from tenacity import retry, retry_if_exception_type, stop_after_attempt, wait_exponential

from storefront.errors import CatalogUnavailableError
from storefront.logging import get_logger, sanitize_string_for_logging
from .models import Product

logger = get_logger(__name__)

ROOT_DIR = Path(__file__).resolve().parents[2]

CATALOG_PATH = os.environ.get("CATALOG_PATH", str(ROOT_DIR / "data" / "products-data.json"))
CATALOG_URL = os.environ.get("CATALOG_URL", "")


def http_retry():
    return retry(
        reraise=True,
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=0.3, min=0.3, max=3),
        retry=retry_if_exception_type(httpx.TransportError),
    )


class CatalogRepository:
    """Loads products from ``CATALOG_URL`` when set, ``CATALOG_PATH`` otherwise."""

    def __init__(self, path: str | None = None, url: str | None = None, timeout: float = 5.0):
        self.path = Path(path or CATALOG_PATH)
        self.url = CATALOG_URL if url is None else url
        self.timeout = timeout

    def _read_file(self) -> object:
        with open(self.path, "r", encoding="utf-8") as f:
            return json.load(f)

    @http_retry()
    async def _fetch_remote(self) -> object:
        logger.info(f"Fetching catalog from {self.url}")
        async with httpx.AsyncClient(timeout=self.timeout) as client:
            resp = await client.get(self.url)
            resp.raise_for_status()
            return resp.json()

    async def _read_raw(self) -> object:
        if self.url:
            return await self._fetch_remote()
        return await asyncio.to_thread(self._read_file)

    async def list_products(self) -> list[Product]:
        """
        Load every valid product, in catalog order.

        Entries without a name are skipped (the storefront never listed them);
        entries that fail model validation are skipped with a warning.

        Raises:
            CatalogUnavailableError: source missing, unreachable or not a JSON list
        """
        try:
            raw = await self._read_raw()
        except (OSError, ValueError, httpx.HTTPError) as e:
            logger.error(f"Failed to load catalog: {e}")
            raise CatalogUnavailableError() from e

        if not isinstance(raw, list):
            logger.error(f"Catalog is not a list (got {type(raw).__name__})")
            raise CatalogUnavailableError()

        products: list[Product] = []
        for entry in raw:
            if not isinstance(entry, dict) or not entry.get("name"):
                continue
            try:
                products.append(Product.model_validate(entry))
            except ValidationError as e:
                logger.warning(
                    f"Skipping invalid catalog entry {sanitize_string_for_logging(str(entry.get('name')))}: "
                    f"{e.error_count()} error(s)"
                )
        return products

    async def find_product(self, name: str) -> Optional[tuple[Product, int]]:
        """Return the first product named ``name`` with its catalog position."""
        products = await self.list_products()
        for position, product in enumerate(products):
            if product.name == name:
                return product, position
        return None

    async def get_product(self, name: str) -> Optional[Product]:
        found = await self.find_product(name)
        return found[0] if found else None


# Singleton instance
_catalog: Optional[CatalogRepository] = None


def get_catalog() -> CatalogRepository:
    """Get CatalogRepository singleton."""
    global _catalog
    if _catalog is None:
        _catalog = CatalogRepository()
    return _catalog


def set_catalog(catalog: Optional[CatalogRepository]) -> None:
    """Replace the catalog singleton (None resets to the configured source)."""
    global _catalog
    _catalog = catalog
