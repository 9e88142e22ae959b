"""Checkout package: shipping, totals, simulated payment, order history."""
from .models import (
    CheckoutState,
    CheckoutTotals,
    Order,
    ShippingOption,
    checkout_totals,
    generate_order_number,
    shipping_cost,
    shipping_options,
)
from .history import OrderHistory
from .service import CheckoutService

__all__ = [
    "CheckoutState",
    "CheckoutTotals",
    "Order",
    "ShippingOption",
    "checkout_totals",
    "generate_order_number",
    "shipping_cost",
    "shipping_options",
    "OrderHistory",
    "CheckoutService",
]
