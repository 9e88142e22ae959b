"""Checkout models: shipping options, totals, and placed orders."""
from dataclasses import dataclass
from datetime import datetime, timezone
from decimal import Decimal
from enum import Enum
from typing import Any, Optional

from storefront.cart.models import Cart, CartLineItem
from storefront.constants import SHIPPING_OPTIONS
from storefront.services.money import round_money, to_decimal, to_float


class CheckoutState(str, Enum):
    """Checkout submission states."""
    IDLE = "idle"
    VALIDATING = "validating"
    INVALID = "invalid"
    PROCESSING = "processing"
    ORDER_PLACED = "order_placed"


@dataclass(frozen=True)
class ShippingOption:
    value: str
    label: str
    cost: Decimal
    description: str

    def to_dict(self) -> dict:
        return {
            "value": self.value,
            "label": self.label,
            "cost": to_float(self.cost),
            "description": self.description,
        }


def shipping_options() -> list[ShippingOption]:
    return [
        ShippingOption(value=value, label=label, cost=cost, description=description)
        for value, (label, cost, description) in SHIPPING_OPTIONS.items()
    ]


def shipping_cost(method: str) -> Decimal:
    """
    Cost of a shipping method.

    Raises:
        ValueError: unknown method
    """
    if method not in SHIPPING_OPTIONS:
        raise ValueError(f"Unknown shipping method: {method}")
    return SHIPPING_OPTIONS[method][1]


@dataclass
class CheckoutTotals:
    subtotal: Decimal
    savings: Decimal
    shipping: Decimal

    @property
    def total(self) -> Decimal:
        return round_money(self.subtotal + self.shipping)

    @property
    def original_total(self) -> Decimal:
        """Total at catalog prices, shipping included."""
        return round_money(self.subtotal + self.savings + self.shipping)

    def to_dict(self) -> dict:
        return {
            "subtotal": to_float(self.subtotal),
            "savings": to_float(self.savings),
            "shipping": to_float(self.shipping),
            "original_total": to_float(self.original_total),
            "total": to_float(self.total),
        }


def checkout_totals(cart: Cart, shipping_method: str) -> CheckoutTotals:
    return CheckoutTotals(
        subtotal=cart.total,
        savings=cart.total_savings,
        shipping=round_money(shipping_cost(shipping_method)),
    )


def generate_order_number(now: Optional[datetime] = None) -> str:
    """``"TO"`` + the last 8 digits of the millisecond timestamp."""
    now = now or datetime.now(timezone.utc)
    millis = int(now.timestamp() * 1000)
    return "TO" + str(millis)[-8:]


@dataclass
class Order:
    """A simulated order. Only ever kept in the session's order history."""
    order_number: str
    customer_info: dict[str, Any]
    items: list[CartLineItem]
    subtotal: Decimal
    shipping: Decimal
    total: Decimal
    timestamp: str

    def to_dict(self) -> dict:
        """Convert to the stored JSON shape."""
        return {
            "orderNumber": self.order_number,
            "customerInfo": self.customer_info,
            "items": [item.to_dict() for item in self.items],
            "subtotal": to_float(self.subtotal),
            "shipping": to_float(self.shipping),
            "total": to_float(self.total),
            "timestamp": self.timestamp,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Order":
        return cls(
            order_number=data["orderNumber"],
            customer_info=dict(data.get("customerInfo") or {}),
            items=[CartLineItem.from_dict(item) for item in data.get("items", [])],
            subtotal=to_decimal(data.get("subtotal")),
            shipping=to_decimal(data.get("shipping")),
            total=to_decimal(data.get("total")),
            timestamp=data.get("timestamp", ""),
        )
