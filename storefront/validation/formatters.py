"""As-you-type input formatting for payment fields."""
import re
from typing import Any

CARD_NUMBER_DIGITS = 16
CARD_GROUP_SIZE = 4


def _digits(value: Any) -> str:
    return re.sub(r"[^0-9]", "", "" if value is None else str(value))


def format_card_number(value: Any) -> str:
    """``"4111111111111111"`` -> ``"4111 1111 1111 1111"``; extra digits are dropped."""
    digits = _digits(value)[:CARD_NUMBER_DIGITS]
    groups = [digits[i:i + CARD_GROUP_SIZE] for i in range(0, len(digits), CARD_GROUP_SIZE)]
    return " ".join(groups)


def format_expiry_date(value: Any) -> str:
    """``"1228"`` -> ``"12/28"``; the slash appears once a third digit is typed."""
    digits = _digits(value)[:4]
    if len(digits) >= 3:
        return f"{digits[:2]}/{digits[2:]}"
    return digits


def format_cvv(value: Any) -> str:
    """Digits only, at most four."""
    return _digits(value)[:4]


# Checkout fields that are reformatted as the customer types
FORMATTERS = {
    "cardNumber": format_card_number,
    "expiryDate": format_expiry_date,
    "cvv": format_cvv,
}


def format_field(field: str, value: Any) -> str:
    """
    Apply a field's as-you-type formatter.

    Raises:
        KeyError: ``field`` has no formatter
    """
    return FORMATTERS[field](value)
