"""Cart store: in-memory cart mirrored to key/value storage."""
import json
from decimal import Decimal
from typing import Any, Callable, Optional

from storefront.catalog.pricing import discount
from storefront.catalog.repository import CatalogRepository, get_catalog
from storefront.db import KeyValueStorage, StorageKeys, TTL, get_storage
from storefront.errors import ProductNotFoundError
from storefront.logging import get_session_logger, sanitize_string_for_logging
from .models import Cart, CartLineItem

CartListener = Callable[[Cart], None]


class CartStore:
    """
    Explicit store for one session's cart.

    Features:
    - load/save isolate storage; a corrupted or unreadable value loads as empty
    - every mutation rewrites the whole JSON array (no incremental writes)
    - subscribers are called with the cart after each mutation
    """

    def __init__(
        self,
        session_id: str,
        storage: Optional[KeyValueStorage] = None,
        catalog: Optional[CatalogRepository] = None,
    ):
        self.session_id = session_id
        self._storage = storage
        self._catalog = catalog
        self._cart = Cart()
        self._listeners: list[CartListener] = []
        self.log = get_session_logger(__name__, session_id)

    @property
    def storage(self) -> KeyValueStorage:
        if self._storage is None:
            self._storage = get_storage()
        return self._storage

    @property
    def catalog(self) -> CatalogRepository:
        if self._catalog is None:
            self._catalog = get_catalog()
        return self._catalog

    @property
    def key(self) -> str:
        return StorageKeys.cart_key(self.session_id)

    # ==================== STATE ====================

    def get(self) -> Cart:
        """Current in-memory cart."""
        return self._cart

    async def set(self, cart: Cart) -> Cart:
        """Replace the cart, persist it and notify subscribers."""
        self._cart = cart
        await self._commit()
        return self._cart

    def subscribe(self, listener: CartListener) -> Callable[[], None]:
        """Register ``listener``; returns a callable that unregisters it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        for listener in list(self._listeners):
            try:
                listener(self._cart)
            except Exception:
                self.log.exception("Cart listener failed")

    # ==================== STORAGE ====================

    async def load(self) -> Cart:
        """
        Read the cart from storage.

        Missing, unreadable or malformed values all load as an empty cart.
        """
        try:
            raw = await self.storage.get(self.key)
        except Exception as e:
            self.log.error(f"Failed to load cart: {e}")
            self._cart = Cart()
            return self._cart

        if not raw:
            self._cart = Cart()
            return self._cart

        try:
            self._cart = Cart.from_list(json.loads(raw))
        except (json.JSONDecodeError, KeyError, TypeError, ValueError) as e:
            self.log.warning(f"Corrupted cart data, starting empty: {e}")
            self._cart = Cart()
        return self._cart

    async def save(self) -> bool:
        """Overwrite the stored cart with the in-memory one."""
        try:
            await self.storage.set(self.key, json.dumps(self._cart.to_list()), ex=TTL.STORAGE)
            return True
        except Exception as e:
            self.log.error(f"Failed to save cart: {e}")
            return False

    async def _commit(self) -> None:
        await self.save()
        self._notify()

    # ==================== COMMANDS ====================

    async def add(self, product_name: str, discounted_price: Any = None) -> CartLineItem:
        """
        Add one unit of a catalog product.

        Raises:
            ProductNotFoundError: no product with that name; the cart is untouched
        """
        product = await self.catalog.get_product(product_name)
        if product is None:
            self.log.warning(f"Add to cart: product not found {sanitize_string_for_logging(product_name)}")
            raise ProductNotFoundError(product_name)

        item = self._cart.add_product(product, discounted_price)
        await self._commit()
        return item

    async def add_featured(self, product_name: str) -> CartLineItem:
        """Add from a featured/discounted control: price comes from the discount policy."""
        found = await self.catalog.find_product(product_name)
        if found is None:
            self.log.warning(f"Add to cart: product not found {sanitize_string_for_logging(product_name)}")
            raise ProductNotFoundError(product_name)

        product, position = found
        item = self._cart.add_product(product, discount(product, position))
        await self._commit()
        return item

    async def update_quantity(self, product_name: str, quantity: int) -> Optional[CartLineItem]:
        item = self._cart.update_quantity(product_name, quantity)
        await self._commit()
        return item

    async def increment(self, product_name: str) -> Optional[CartLineItem]:
        item = self._cart.increment(product_name)
        await self._commit()
        return item

    async def decrement(self, product_name: str) -> Optional[CartLineItem]:
        item = self._cart.decrement(product_name)
        await self._commit()
        return item

    async def remove(self, product_name: str) -> bool:
        removed = self._cart.remove(product_name)
        await self._commit()
        return removed

    async def clear(self) -> None:
        """Empty the cart and delete its storage key."""
        self._cart.clear()
        try:
            await self.storage.delete(self.key)
        except Exception as e:
            self.log.error(f"Failed to clear cart: {e}")
        self._notify()

    # ==================== QUERIES ====================

    def total(self) -> Decimal:
        return self._cart.total

    def total_savings(self) -> Decimal:
        return self._cart.total_savings

    def item_count(self) -> int:
        return self._cart.item_count


async def open_cart_store(
    session_id: str,
    storage: Optional[KeyValueStorage] = None,
    catalog: Optional[CatalogRepository] = None,
) -> CartStore:
    """Build a store for ``session_id`` and load its cart."""
    store = CartStore(session_id, storage=storage, catalog=catalog)
    await store.load()
    return store
