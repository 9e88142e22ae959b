"""
Checkout Service

Simulated payment flow for one session:

    IDLE -> VALIDATING -> INVALID
                       -> PROCESSING (simulated delay) -> ORDER_PLACED

The empty-cart check comes first and does not depend on the form: an empty
cart blocks checkout even when every field is valid. Nothing is charged or
transmitted.
"""
import asyncio
import os
from datetime import datetime, timezone
from typing import Any, Callable, Mapping, Optional

from storefront.cart.service import CartStore
from storefront.errors import CheckoutInProgressError, EmptyCartError, FormValidationError
from storefront.logging import get_session_logger
from storefront.validation.rules import CHECKOUT_RULES, normalize_card_number, validate_form
from .history import OrderHistory
from .models import CheckoutState, Order, checkout_totals, generate_order_number

CHECKOUT_PROCESSING_DELAY = float(os.environ.get("CHECKOUT_PROCESSING_DELAY", "2.0"))

# Sessions whose checkout is inside the processing delay
_processing_sessions: set[str] = set()


def mask_card_number(card_number: str) -> str:
    digits = normalize_card_number(card_number)
    return f"**** **** **** {digits[-4:]}"


def customer_snapshot(form_data: Mapping[str, Any]) -> dict[str, Any]:
    """Form fields as kept on the order. The CVV is dropped and the card masked."""
    snapshot = {
        field: str(form_data.get(field, "")).strip()
        for field in CHECKOUT_RULES
        if field not in ("cardNumber", "cvv")
    }
    snapshot["cardNumber"] = mask_card_number(str(form_data.get("cardNumber", "")))
    return snapshot


class CheckoutService:
    def __init__(
        self,
        cart_store: CartStore,
        history: Optional[OrderHistory] = None,
        processing_delay: Optional[float] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self.cart_store = cart_store
        self.history = history or OrderHistory(cart_store.session_id, storage=cart_store.storage)
        self.processing_delay = CHECKOUT_PROCESSING_DELAY if processing_delay is None else processing_delay
        self.clock = clock or (lambda: datetime.now(timezone.utc))
        self.state = CheckoutState.IDLE
        self.errors: dict[str, str] = {}
        self.log = get_session_logger(__name__, cart_store.session_id)

    @property
    def session_id(self) -> str:
        return self.cart_store.session_id

    async def submit(self, form_data: Mapping[str, Any]) -> Order:
        """
        Validate the form and place a simulated order.

        Raises:
            CheckoutInProgressError: this session is already processing a payment
            EmptyCartError: the cart has no lines
            FormValidationError: one or more fields failed (``errors`` per field)
        """
        if self.session_id in _processing_sessions:
            raise CheckoutInProgressError()

        # Claimed before the first await so a concurrent submit sees it
        _processing_sessions.add(self.session_id)
        try:
            order = await self._place_order(form_data)
        finally:
            _processing_sessions.discard(self.session_id)

        self.state = CheckoutState.ORDER_PLACED
        self.log.info(f"Order {order.order_number} placed")
        return order

    async def _place_order(self, form_data: Mapping[str, Any]) -> Order:
        cart = await self.cart_store.load()
        if cart.is_empty:
            self.state = CheckoutState.IDLE
            raise EmptyCartError()

        self.state = CheckoutState.VALIDATING
        self.errors = validate_form(CHECKOUT_RULES, form_data)
        if self.errors:
            self.state = CheckoutState.INVALID
            self.log.info(f"Checkout rejected: {sorted(self.errors)}")
            raise FormValidationError(dict(self.errors))

        self.state = CheckoutState.PROCESSING
        try:
            await asyncio.sleep(self.processing_delay)
            order = self._build_order(form_data)
            await self.history.append(order)
            await self.cart_store.clear()
        except BaseException:
            self.state = CheckoutState.IDLE
            raise
        return order

    def _build_order(self, form_data: Mapping[str, Any]) -> Order:
        cart = self.cart_store.get()
        totals = checkout_totals(cart, str(form_data["shippingMethod"]))
        now = self.clock()
        return Order(
            order_number=generate_order_number(now),
            customer_info=customer_snapshot(form_data),
            items=list(cart.items),
            subtotal=totals.subtotal,
            shipping=totals.shipping,
            total=totals.total,
            timestamp=now.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z"),
        )
