"""Fixed option sets offered by the storefront forms."""
from decimal import Decimal

COUNTRIES = [
    "Australia",
    "United States",
    "United Kingdom",
    "Canada",
    "Germany",
    "France",
    "Japan",
    "Singapore",
    "New Zealand",
    "Other",
]

CONTACT_PREFERENCES = {
    "email": "Email",
    "phone": "Phone",
    "sms": "SMS",
}

AU_STATES = ["NSW", "VIC", "QLD", "SA", "WA", "TAS", "NT", "ACT"]

# value -> (label, cost, description)
SHIPPING_OPTIONS = {
    "standard": ("Standard Shipping", Decimal("0"), "Free, 5-7 business days"),
    "express": ("Express Shipping", Decimal("15"), "$15.00, 2-3 business days"),
    "overnight": ("Overnight Shipping", Decimal("35"), "$35.00, Next business day"),
}

DEFAULT_SHIPPING_METHOD = "standard"
