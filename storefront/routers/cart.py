"""
Storefront Cart Router

Cart endpoints. Every response carries the whole cart so the client can
re-render from it.
"""
from fastapi import APIRouter, Depends, HTTPException

from storefront.cart import Cart, open_cart_store
from storefront.errors import CatalogUnavailableError, ProductNotFoundError
from storefront.services.money import to_float
from .deps import get_session_id
from .models import AddToCartRequest, CartItemRequest, UpdateCartItemRequest

router = APIRouter(tags=["storefront-cart"])


def format_cart_response(cart: Cart) -> dict:
    """Cart lines plus the totals the cart modal shows."""
    return {
        "items": [
            {
                **item.to_dict(),
                "total_price": to_float(item.total_price),
                "savings": to_float(item.total_savings),
            }
            for item in cart.items
        ],
        "is_empty": cart.is_empty,
        "item_count": cart.item_count,
        "total": to_float(cart.total),
        "total_savings": to_float(cart.total_savings),
        "original_total": to_float(cart.original_total),
    }


@router.get("/cart")
async def get_cart(session_id: str = Depends(get_session_id)):
    """Get the session's cart."""
    store = await open_cart_store(session_id)
    return format_cart_response(store.get())


@router.post("/cart/add")
async def add_to_cart(request: AddToCartRequest, session_id: str = Depends(get_session_id)):
    """Add one unit of a product (featured controls get the discounted price)."""
    store = await open_cart_store(session_id)
    try:
        if request.featured:
            await store.add_featured(request.name)
        else:
            await store.add(request.name)
    except ProductNotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)
    except CatalogUnavailableError as e:
        raise HTTPException(status_code=503, detail=e.message)

    return format_cart_response(store.get())


@router.patch("/cart/item")
async def update_cart_item(request: UpdateCartItemRequest, session_id: str = Depends(get_session_id)):
    """Set a line's quantity (0 or less = remove)."""
    store = await open_cart_store(session_id)
    await store.update_quantity(request.name, request.quantity)
    return format_cart_response(store.get())


@router.post("/cart/item/increment")
async def increment_cart_item(request: CartItemRequest, session_id: str = Depends(get_session_id)):
    store = await open_cart_store(session_id)
    await store.increment(request.name)
    return format_cart_response(store.get())


@router.post("/cart/item/decrement")
async def decrement_cart_item(request: CartItemRequest, session_id: str = Depends(get_session_id)):
    """Take one unit off; the last unit removes the line."""
    store = await open_cart_store(session_id)
    await store.decrement(request.name)
    return format_cart_response(store.get())


@router.delete("/cart/item")
async def remove_cart_item(name: str, session_id: str = Depends(get_session_id)):
    """Remove a line from the cart."""
    store = await open_cart_store(session_id)
    await store.remove(name)
    return format_cart_response(store.get())


@router.delete("/cart")
async def clear_cart(session_id: str = Depends(get_session_id)):
    """Empty the cart."""
    store = await open_cart_store(session_id)
    await store.clear()
    return format_cart_response(store.get())
