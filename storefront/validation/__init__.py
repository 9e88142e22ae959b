"""Validation package: field rules, form tables and input formatters."""
from .rules import (
    Validator,
    CONTACT_RULES,
    CHECKOUT_RULES,
    validate_field,
    validate_form,
    validate_name,
    validate_card_name,
    validate_email,
    validate_phone,
    validate_mobile,
    validate_age,
    validate_message,
    validate_address,
    validate_city,
    validate_state,
    validate_postcode,
    validate_card_number,
    validate_expiry_date,
    validate_cvv,
    validate_country,
    validate_contact_preference,
    validate_shipping_method,
    normalize_card_number,
)
from .formatters import FORMATTERS, format_field, format_card_number, format_expiry_date, format_cvv

__all__ = [
    "Validator",
    "CONTACT_RULES",
    "CHECKOUT_RULES",
    "validate_field",
    "validate_form",
    "validate_name",
    "validate_card_name",
    "validate_email",
    "validate_phone",
    "validate_mobile",
    "validate_age",
    "validate_message",
    "validate_address",
    "validate_city",
    "validate_state",
    "validate_postcode",
    "validate_card_number",
    "validate_expiry_date",
    "validate_cvv",
    "validate_country",
    "validate_contact_preference",
    "validate_shipping_method",
    "normalize_card_number",
    "FORMATTERS",
    "format_field",
    "format_card_number",
    "format_expiry_date",
    "format_cvv",
]
