"""Order history: the session's placed orders, appended after each checkout."""
import json
from typing import Optional

from storefront.db import KeyValueStorage, StorageKeys, TTL, get_storage
from storefront.logging import get_session_logger
from .models import Order


class OrderHistory:
    def __init__(self, session_id: str, storage: Optional[KeyValueStorage] = None):
        self.session_id = session_id
        self._storage = storage
        self.log = get_session_logger(__name__, session_id)

    @property
    def storage(self) -> KeyValueStorage:
        if self._storage is None:
            self._storage = get_storage()
        return self._storage

    @property
    def key(self) -> str:
        return StorageKeys.order_history_key(self.session_id)

    async def _load_raw(self) -> list[dict]:
        try:
            raw = await self.storage.get(self.key)
        except Exception as e:
            self.log.error(f"Failed to load order history: {e}")
            return []
        if not raw:
            return []
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            self.log.warning(f"Corrupted order history, starting empty: {e}")
            return []
        if not isinstance(data, list):
            self.log.warning("Order history is not a list, starting empty")
            return []
        return [entry for entry in data if isinstance(entry, dict)]

    async def list_orders(self) -> list[Order]:
        """Stored orders, oldest first. Entries that no longer parse are skipped."""
        orders = []
        for entry in await self._load_raw():
            try:
                orders.append(Order.from_dict(entry))
            except (KeyError, TypeError, ValueError) as e:
                self.log.warning(f"Skipping unreadable order entry: {e}")
        return orders

    async def append(self, order: Order) -> bool:
        """Append ``order`` and rewrite the whole history."""
        entries = await self._load_raw()
        entries.append(order.to_dict())
        try:
            await self.storage.set(self.key, json.dumps(entries), ex=TTL.STORAGE)
            return True
        except Exception as e:
            self.log.error(f"Failed to save order history: {e}")
            return False
