"""Storefront HTTP routers."""
from fastapi import APIRouter

from .cart import router as cart_router
from .catalog import router as catalog_router
from .checkout import router as checkout_router
from .contact import router as contact_router

router = APIRouter()
router.include_router(catalog_router)
router.include_router(cart_router)
router.include_router(checkout_router)
router.include_router(contact_router)

__all__ = ["router"]
