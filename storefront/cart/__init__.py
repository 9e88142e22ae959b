"""Cart package: models and store."""
from .models import CartLineItem, Cart
from .service import CartStore, open_cart_store

__all__ = [
    "CartLineItem",
    "Cart",
    "CartStore",
    "open_cart_store",
]
