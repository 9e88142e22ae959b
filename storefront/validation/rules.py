"""
Form validation rules.

Every rule is a pure function ``value -> error message | None``. Forms are
described as tables mapping field name to rule; ``validate_form`` runs every
rule of a table (no short-circuit) so each field gets its own message.
"""
import re
from datetime import date
from typing import Any, Callable, Iterable, Mapping, Optional

from storefront.constants import CONTACT_PREFERENCES, COUNTRIES, SHIPPING_OPTIONS

Validator = Callable[[Any], Optional[str]]

# Patterns are matched with re.fullmatch; [0-9] keeps to ASCII digits
NAME_PATTERN = re.compile(r"[a-zA-Z\s'-]+")
EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
PHONE_CHARS_PATTERN = re.compile(r"[0-9\s+\-()]+")
POSTCODE_PATTERN = re.compile(r"[0-9]{4}")
CARD_NUMBER_PATTERN = re.compile(r"[0-9]{16}")
EXPIRY_PATTERN = re.compile(r"([0-9]{2})/([0-9]{2})")
CVV_PATTERN = re.compile(r"[0-9]{3,4}")
AGE_PATTERN = re.compile(r"[+-]?[0-9]+")

NAME_MIN_LENGTH = 2
MESSAGE_MIN_LENGTH = 10
MESSAGE_MAX_LENGTH = 1000
MAX_AGE = 120


def _text(value: Any) -> str:
    return "" if value is None else str(value)


def _person_name(empty_message: str, short_message: str) -> Validator:
    def validate(value: Any) -> Optional[str]:
        text = _text(value)
        if not text.strip():
            return empty_message
        if len(text.strip()) < NAME_MIN_LENGTH:
            return short_message
        if not NAME_PATTERN.fullmatch(text):
            return "Name can only contain letters, spaces, apostrophes, and hyphens"
        return None

    return validate


validate_name = _person_name(
    "Please enter your full name",
    "Name must be at least 2 characters long",
)
validate_card_name = _person_name(
    "Please enter the name on your card",
    "Name on card must be at least 2 characters long",
)


def validate_email(value: Any) -> Optional[str]:
    text = _text(value)
    if not text.strip():
        return "Please enter your email address"
    if not EMAIL_PATTERN.fullmatch(text):
        return "Please enter a valid email address"
    return None


def _phone_number(label: str, min_digits: int, max_digits: int = 15) -> Validator:
    def validate(value: Any) -> Optional[str]:
        text = _text(value)
        if not text.strip():
            return f"Please enter your {label.lower()}"
        digits = re.sub(r"[^0-9]", "", text)
        if len(digits) < min_digits:
            return f"{label} must be at least {min_digits} digits"
        if len(digits) > max_digits:
            return f"{label} cannot exceed {max_digits} digits"
        if not PHONE_CHARS_PATTERN.fullmatch(text):
            return f"{label} contains invalid characters"
        return None

    return validate


validate_phone = _phone_number("Phone number", min_digits=7)
validate_mobile = _phone_number("Mobile number", min_digits=8)


def parse_age(value: Any) -> Optional[int]:
    """Whole-number age from form input, or None when it is not an integer."""
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    text = str(value).strip()
    if not AGE_PATTERN.fullmatch(text):
        return None
    return int(text)


def validate_age(value: Any) -> Optional[str]:
    if value is None or _text(value).strip() == "":
        return "Please enter your age"
    age = parse_age(value)
    if age is None or age <= 0:
        return "Please enter a valid age (positive number)"
    if age > MAX_AGE:
        return "Please enter a realistic age"
    return None


def validate_message(value: Any) -> Optional[str]:
    text = _text(value).strip()
    if not text:
        return "Please enter your message or inquiry"
    if len(text) < MESSAGE_MIN_LENGTH:
        return f"Message must be at least {MESSAGE_MIN_LENGTH} characters long"
    if len(text) > MESSAGE_MAX_LENGTH:
        return f"Message cannot exceed {MESSAGE_MAX_LENGTH} characters"
    return None


def _required(message: str) -> Validator:
    def validate(value: Any) -> Optional[str]:
        if not _text(value).strip():
            return message
        return None

    return validate


validate_address = _required("Please enter your full address")
validate_city = _required("Please enter your city")
validate_state = _required("Please select your state")


def validate_postcode(value: Any) -> Optional[str]:
    text = _text(value)
    if not text.strip():
        return "Please enter your postcode"
    if not POSTCODE_PATTERN.fullmatch(text):
        return "Please enter a valid 4-digit postcode"
    return None


def normalize_card_number(value: Any) -> str:
    """Card number with the display spaces removed."""
    return _text(value).replace(" ", "")


def validate_card_number(value: Any) -> Optional[str]:
    if not _text(value).strip():
        return "Please enter your card number"
    if not CARD_NUMBER_PATTERN.fullmatch(normalize_card_number(value)):
        return "Card number must be 16 digits"
    return None


def validate_expiry_date(value: Any, today: Optional[date] = None) -> Optional[str]:
    """
    ``MM/YY`` with a real month, not before the current month.

    A card expiring this month is still accepted.
    """
    text = _text(value)
    if not text.strip():
        return "Please enter the expiry date"
    match = EXPIRY_PATTERN.fullmatch(text)
    if not match:
        return "Expiry must be MM/YY"
    month, year = int(match.group(1)), int(match.group(2))
    if month < 1 or month > 12:
        return "Invalid month"
    today = today or date.today()
    if (2000 + year, month) < (today.year, today.month):
        return "Card is expired"
    return None


def validate_cvv(value: Any) -> Optional[str]:
    text = _text(value)
    if not text.strip():
        return "Please enter the CVV"
    if not CVV_PATTERN.fullmatch(text):
        return "CVV must be 3 or 4 digits"
    return None


def _selection(options: Iterable[str], empty_message: str, invalid_message: str) -> Validator:
    allowed = frozenset(options)

    def validate(value: Any) -> Optional[str]:
        text = _text(value)
        if not text:
            return empty_message
        if text not in allowed:
            return invalid_message
        return None

    return validate


validate_country = _selection(
    COUNTRIES, "Please select a country", "Please select a country from the list"
)
validate_contact_preference = _selection(
    CONTACT_PREFERENCES, "Please select a contact preference", "Please select a valid contact preference"
)
validate_shipping_method = _selection(
    SHIPPING_OPTIONS, "Please select a shipping method", "Please select a valid shipping method"
)


CONTACT_RULES: dict[str, Validator] = {
    "name": validate_name,
    "email": validate_email,
    "phone": validate_phone,
    "age": validate_age,
    "contactPreference": validate_contact_preference,
    "country": validate_country,
    "message": validate_message,
}

CHECKOUT_RULES: dict[str, Validator] = {
    "name": validate_name,
    "email": validate_email,
    "mobile": validate_mobile,
    "address": validate_address,
    "city": validate_city,
    "state": validate_state,
    "postcode": validate_postcode,
    "shippingMethod": validate_shipping_method,
    "cardNumber": validate_card_number,
    "expiryDate": validate_expiry_date,
    "cvv": validate_cvv,
    "cardName": validate_card_name,
}


def validate_field(rules: Mapping[str, Validator], field: str, value: Any) -> Optional[str]:
    """
    Run one field's rule (blur / input validation).

    Raises:
        KeyError: ``field`` is not part of the form
    """
    return rules[field](value)


def validate_form(rules: Mapping[str, Validator], data: Mapping[str, Any]) -> dict[str, str]:
    """
    Validate every field of a form.

    Returns:
        Field name -> error message for each failing field; empty when valid
    """
    errors: dict[str, str] = {}
    for field, rule in rules.items():
        message = rule(data.get(field))
        if message:
            errors[field] = message
    return errors
