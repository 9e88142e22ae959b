"""
Storage Module - key/value backends for carts and order history

Provides a singleton key/value store:
- Upstash Redis (async REST client) when UPSTASH_REDIS_REST_URL/TOKEN are set
- An in-process store otherwise, scoped to the running server like a
  browser profile's localStorage is scoped to one browser

Both expose the same async get/set/delete surface and hold plain JSON strings.
"""

import os
from typing import Optional, Protocol

from upstash_redis.asyncio import Redis as AsyncRedis

from storefront.logging import get_logger

logger = get_logger(__name__)


# Upstash Redis - standard env var names per docs
UPSTASH_REDIS_REST_URL = os.environ.get("UPSTASH_REDIS_REST_URL", "")
UPSTASH_REDIS_REST_TOKEN = os.environ.get("UPSTASH_REDIS_REST_TOKEN", "")


class KeyValueStorage(Protocol):
    """Minimal async string store used by the cart and checkout."""

    async def get(self, key: str) -> Optional[str]: ...

    async def set(self, key: str, value: str, ex: Optional[int] = None) -> object: ...

    async def delete(self, *keys: str) -> int: ...


class MemoryStorage:
    """In-process key/value store. Expiry is ignored."""

    def __init__(self):
        self._data: dict[str, str] = {}

    async def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    async def set(self, key: str, value: str, ex: Optional[int] = None) -> bool:
        self._data[key] = value
        return True

    async def delete(self, *keys: str) -> int:
        removed = 0
        for key in keys:
            if self._data.pop(key, None) is not None:
                removed += 1
        return removed

    def keys(self) -> list[str]:
        return list(self._data)


# Singleton instance
_storage: Optional[KeyValueStorage] = None


def get_storage() -> KeyValueStorage:
    """
    Get the key/value storage (singleton).

    Uses Upstash Redis when both UPSTASH_REDIS_REST_URL and
    UPSTASH_REDIS_REST_TOKEN are set, in-process storage otherwise.
    """
    global _storage

    if _storage is None:
        if UPSTASH_REDIS_REST_URL and UPSTASH_REDIS_REST_TOKEN:
            logger.info("Using Upstash Redis storage")
            _storage = AsyncRedis(url=UPSTASH_REDIS_REST_URL, token=UPSTASH_REDIS_REST_TOKEN)
        else:
            logger.info("Upstash Redis not configured, using in-process storage")
            _storage = MemoryStorage()

    return _storage


def set_storage(storage: Optional[KeyValueStorage]) -> None:
    """Replace the storage singleton (None resets to lazy selection)."""
    global _storage
    _storage = storage


class StorageKeys:
    """Storage key names. Values are the JSON shapes the browser storefront used."""

    CART = "cart"  # cart:{session_id} -> JSON array of line items
    ORDER_HISTORY = "orderHistory"  # orderHistory:{session_id} -> JSON array of orders

    @staticmethod
    def cart_key(session_id: str) -> str:
        return f"{StorageKeys.CART}:{session_id}"

    @staticmethod
    def order_history_key(session_id: str) -> str:
        return f"{StorageKeys.ORDER_HISTORY}:{session_id}"


class TTL:
    """Time-to-live constants (in seconds) for Redis keys."""

    STORAGE = int(os.environ.get("STORAGE_TTL", str(30 * 86400)))  # 30 days
