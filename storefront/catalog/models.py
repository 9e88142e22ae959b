"""Catalog models - products as supplied by the read-only catalog file."""
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from storefront.services.money import to_decimal

DEFAULT_IMAGE = "images/default.svg"


class Product(BaseModel):
    """
    Product model.

    ``name`` is the only identity a product has; the cart keys lines by it.
    """
    name: str
    price: Decimal = Decimal("0")
    description: str = ""
    image: str = DEFAULT_IMAGE
    category: str = ""
    # Per-product override of the featured discount (JSON: discountPercent)
    discount_percent: Optional[Decimal] = Field(default=None, alias="discountPercent")

    class Config:
        extra = "ignore"
        populate_by_name = True

    @field_validator("price", mode="before")
    @classmethod
    def convert_price_to_decimal(cls, v):
        price = to_decimal(v)
        if price < 0:
            raise ValueError("price must be >= 0")
        return price

    @field_validator("discount_percent", mode="before")
    @classmethod
    def convert_discount_to_decimal(cls, v):
        if v is None or v == "":
            return None
        return to_decimal(v)

    @field_validator("description", "category", mode="before")
    @classmethod
    def empty_if_missing(cls, v):
        return v or ""

    @field_validator("image", mode="before")
    @classmethod
    def default_image(cls, v):
        return v or DEFAULT_IMAGE
