"""
Storefront API Pydantic Models

Request bodies for all storefront endpoints. Form fields keep the names the
browser forms post (camelCase).
"""
from typing import Any

from pydantic import BaseModel


# ==================== CART MODELS ====================

class AddToCartRequest(BaseModel):
    name: str
    featured: bool = False  # added from a featured/discounted control


class UpdateCartItemRequest(BaseModel):
    name: str
    quantity: int = 1  # 0 or less removes the line


class CartItemRequest(BaseModel):
    name: str


# ==================== FORM MODELS ====================

class FieldValidationRequest(BaseModel):
    field: str
    value: Any = None


class ContactFormRequest(BaseModel):
    name: str = ""
    email: str = ""
    phone: str = ""
    age: Any = None
    contactPreference: str = ""
    country: str = ""
    newsletter: bool = False
    message: str = ""


class CheckoutRequest(BaseModel):
    name: str = ""
    email: str = ""
    mobile: str = ""
    address: str = ""
    city: str = ""
    state: str = ""
    postcode: str = ""
    shippingMethod: str = "standard"
    cardNumber: str = ""
    expiryDate: str = ""
    cvv: str = ""
    cardName: str = ""
