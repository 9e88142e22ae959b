"""
Common Error Constants and Exceptions

User-facing messages live here so routers, services and tests share one wording.
"""

# Catalog errors
ERROR_PRODUCT_NOT_FOUND = "Product not found!"
ERROR_CATALOG_UNAVAILABLE = "Failed to load products. Please try again."

# Cart errors
ERROR_CART_EMPTY = "Your cart is empty."

# Form errors
ERROR_FORM_INVALID = "Please correct the highlighted fields."
ERROR_CHECKOUT_IN_PROGRESS = "Your payment is already being processed."


class StorefrontError(Exception):
    """Base error for storefront operations."""

    def __init__(self, message: str, code: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.code = code


class ProductNotFoundError(StorefrontError):
    """Requested product name is not in the catalog."""

    def __init__(self, product_name: str) -> None:
        super().__init__(ERROR_PRODUCT_NOT_FOUND, code="PRODUCT_NOT_FOUND")
        self.product_name = product_name


class CatalogUnavailableError(StorefrontError):
    """Catalog source could not be read or parsed."""

    def __init__(self, message: str = ERROR_CATALOG_UNAVAILABLE) -> None:
        super().__init__(message, code="CATALOG_UNAVAILABLE")


class EmptyCartError(StorefrontError):
    """Checkout submitted with nothing in the cart."""

    def __init__(self) -> None:
        super().__init__(ERROR_CART_EMPTY, code="CART_EMPTY")


class CheckoutInProgressError(StorefrontError):
    """A checkout for this session is still in its processing delay."""

    def __init__(self) -> None:
        super().__init__(ERROR_CHECKOUT_IN_PROGRESS, code="CHECKOUT_IN_PROGRESS")


class FormValidationError(StorefrontError):
    """One or more form fields failed validation."""

    def __init__(self, errors: dict[str, str]) -> None:
        super().__init__(ERROR_FORM_INVALID, code="VALIDATION_FAILED")
        self.errors = errors
