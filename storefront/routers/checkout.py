"""
Storefront Checkout Router

Checkout options, live totals, per-field validation and the simulated
payment. Orders never leave the session's order history.
"""
from fastapi import APIRouter, Depends, HTTPException, Query

from storefront.cart import open_cart_store
from storefront.checkout import CheckoutService, OrderHistory, checkout_totals, shipping_options
from storefront.constants import AU_STATES, DEFAULT_SHIPPING_METHOD
from storefront.errors import CheckoutInProgressError, EmptyCartError, FormValidationError
from storefront.forms.contact import first_name
from storefront.validation import CHECKOUT_RULES, FORMATTERS, format_field, validate_field
from .cart import format_cart_response
from .deps import get_session_id
from .models import CheckoutRequest, FieldValidationRequest

router = APIRouter(tags=["storefront-checkout"])


@router.get("/checkout/options")
async def get_checkout_options():
    """Shipping methods and states for the checkout form."""
    return {
        "shipping_options": [option.to_dict() for option in shipping_options()],
        "default_shipping_method": DEFAULT_SHIPPING_METHOD,
        "states": AU_STATES,
    }


@router.get("/checkout/summary")
async def get_checkout_summary(
    shipping_method: str = Query(DEFAULT_SHIPPING_METHOD),
    session_id: str = Depends(get_session_id),
):
    """Cart and order totals for the selected shipping method."""
    store = await open_cart_store(session_id)
    try:
        totals = checkout_totals(store.get(), shipping_method)
    except ValueError as ve:
        raise HTTPException(status_code=400, detail=str(ve))

    return {
        "cart": format_cart_response(store.get()),
        "shipping_method": shipping_method,
        **totals.to_dict(),
    }


@router.post("/checkout/validate")
async def validate_checkout_field(request: FieldValidationRequest):
    """Validate one checkout field (blur / input)."""
    if request.field not in CHECKOUT_RULES:
        raise HTTPException(status_code=400, detail=f"Unknown checkout field: {request.field}")
    error = validate_field(CHECKOUT_RULES, request.field, request.value)
    return {"field": request.field, "valid": error is None, "error": error}


@router.post("/checkout/format")
async def format_checkout_field(request: FieldValidationRequest):
    """Reformat a payment field as it is typed (card number, expiry, CVV)."""
    if request.field not in FORMATTERS:
        raise HTTPException(status_code=400, detail=f"No formatter for field: {request.field}")
    return {"field": request.field, "value": format_field(request.field, request.value)}


@router.post("/checkout")
async def submit_checkout(request: CheckoutRequest, session_id: str = Depends(get_session_id)):
    """Validate the form, simulate payment, record the order and clear the cart."""
    store = await open_cart_store(session_id)
    service = CheckoutService(store)
    form_data = request.model_dump()

    try:
        order = await service.submit(form_data)
    except EmptyCartError as e:
        raise HTTPException(status_code=400, detail=e.message)
    except FormValidationError as e:
        raise HTTPException(status_code=422, detail={"message": e.message, "errors": e.errors})
    except CheckoutInProgressError as e:
        raise HTTPException(status_code=409, detail=e.message)

    return {
        "message": f"Payment Successful! Thank you, {first_name(request.name)}.",
        "state": service.state.value,
        "order": order.to_dict(),
    }


@router.get("/orders")
async def get_order_history(session_id: str = Depends(get_session_id)):
    """Orders placed in this session, oldest first."""
    orders = await OrderHistory(session_id).list_orders()
    return {"orders": [order.to_dict() for order in orders]}
