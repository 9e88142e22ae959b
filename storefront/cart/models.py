"""Cart models with Decimal-based pricing.

Mutations here are pure in-memory operations; persistence lives in the store.
"""
import math
from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from typing import Any, Optional

from storefront.catalog.models import Product
from storefront.services.money import to_decimal, to_float, round_money, multiply, subtract


def _stored_price(value: Any) -> Decimal:
    """
    Parse a price read back from storage.

    Raises:
        ValueError: not a finite, non-negative number
    """
    if isinstance(value, bool) or not isinstance(value, (int, float, str, Decimal)):
        raise ValueError("line item price must be a number")
    try:
        price = Decimal(str(value))
    except InvalidOperation:
        raise ValueError(f"line item price is not a number: {value!r}") from None
    if not price.is_finite() or price < 0:
        raise ValueError(f"line item price out of range: {value!r}")
    return price


@dataclass
class CartLineItem:
    """One cart row, keyed by product name, with a price snapshot."""
    name: str
    price: Decimal  # snapshot at add time, possibly discounted
    quantity: int = 1
    original_price: Optional[Decimal] = None  # catalog price at add time
    is_discounted: bool = False

    def __post_init__(self):
        self.price = to_decimal(self.price)
        if self.original_price is None:
            self.original_price = self.price
        self.original_price = to_decimal(self.original_price)

    @property
    def unit_savings(self) -> Decimal:
        """originalPrice - price for discounted lines, zero otherwise."""
        if not self.is_discounted:
            return Decimal("0")
        return subtract(self.original_price, self.price)

    @property
    def total_price(self) -> Decimal:
        return round_money(multiply(self.price, self.quantity))

    @property
    def total_savings(self) -> Decimal:
        return round_money(multiply(self.unit_savings, self.quantity))

    def to_dict(self) -> dict:
        """Convert to the stored JSON shape."""
        return {
            "name": self.name,
            "price": to_float(self.price),
            "quantity": self.quantity,
            "originalPrice": to_float(self.original_price),
            "isDiscounted": self.is_discounted,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "CartLineItem":
        """
        Create from the stored JSON shape.

        Raises:
            KeyError, TypeError, ValueError: the value is not a line item
        """
        if not isinstance(data, dict):
            raise TypeError(f"line item must be an object, got {type(data).__name__}")
        name = data["name"]
        if not isinstance(name, str) or not name:
            raise ValueError("line item name must be a non-empty string")
        quantity = data["quantity"]
        if (
            isinstance(quantity, bool)
            or not isinstance(quantity, (int, float))
            or not math.isfinite(quantity)
            or int(quantity) != quantity
        ):
            raise ValueError("line item quantity must be an integer")
        if quantity < 1:
            raise ValueError("line item quantity must be >= 1")
        price = _stored_price(data["price"])
        return cls(
            name=name,
            price=price,
            quantity=int(quantity),
            original_price=_stored_price(data.get("originalPrice", price)),
            is_discounted=bool(data.get("isDiscounted", False)),
        )


@dataclass
class Cart:
    """Insertion-ordered cart. At most one line per product name."""
    items: list[CartLineItem] = field(default_factory=list)

    def find(self, name: str) -> Optional[CartLineItem]:
        return next((item for item in self.items if item.name == name), None)

    def add_product(self, product: Product, discounted_price: Any = None) -> CartLineItem:
        """
        Add one unit of ``product``.

        An existing line is incremented and keeps its original price snapshot.
        A new line snapshots ``discounted_price`` when given, else the catalog price.
        """
        existing = self.find(product.name)
        if existing:
            existing.quantity += 1
            return existing

        catalog_price = round_money(product.price)
        if discounted_price is None:
            price = catalog_price
        else:
            price = round_money(discounted_price)
        item = CartLineItem(
            name=product.name,
            price=price,
            quantity=1,
            original_price=catalog_price,
            is_discounted=discounted_price is not None and price < catalog_price,
        )
        self.items.append(item)
        return item

    def update_quantity(self, name: str, quantity: int) -> Optional[CartLineItem]:
        """Set a line's quantity; ``quantity <= 0`` removes the line."""
        if quantity <= 0:
            self.remove(name)
            return None
        item = self.find(name)
        if item:
            item.quantity = quantity
        return item

    def increment(self, name: str) -> Optional[CartLineItem]:
        item = self.find(name)
        if item:
            item.quantity += 1
        return item

    def decrement(self, name: str) -> Optional[CartLineItem]:
        """Take one unit off; the last unit removes the line."""
        item = self.find(name)
        if item is None:
            return None
        if item.quantity > 1:
            item.quantity -= 1
            return item
        self.remove(name)
        return None

    def remove(self, name: str) -> bool:
        before = len(self.items)
        self.items = [item for item in self.items if item.name != name]
        return len(self.items) != before

    def clear(self) -> None:
        self.items = []

    @property
    def is_empty(self) -> bool:
        return not self.items

    @property
    def item_count(self) -> int:
        """Total number of units in the cart."""
        return sum(item.quantity for item in self.items)

    @property
    def total(self) -> Decimal:
        """Sum of price x quantity over every line."""
        return round_money(sum((item.price * item.quantity for item in self.items), Decimal("0")))

    @property
    def total_savings(self) -> Decimal:
        return round_money(sum((item.unit_savings * item.quantity for item in self.items), Decimal("0")))

    @property
    def original_total(self) -> Decimal:
        """What the cart would cost at catalog prices."""
        return round_money(self.total + self.total_savings)

    def to_list(self) -> list[dict]:
        """Convert to the stored JSON array."""
        return [item.to_dict() for item in self.items]

    @classmethod
    def from_list(cls, data: Any) -> "Cart":
        """
        Create from the stored JSON array.

        Raises:
            KeyError, TypeError, ValueError: the value is not a valid cart
        """
        if not isinstance(data, list):
            raise TypeError(f"cart must be a list, got {type(data).__name__}")
        items = [CartLineItem.from_dict(entry) for entry in data]
        names = [item.name for item in items]
        if len(names) != len(set(names)):
            raise ValueError("cart contains duplicate product lines")
        return cls(items=items)
