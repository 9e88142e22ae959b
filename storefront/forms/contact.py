"""
Contact Form

Holds the state of one contact form: per-field errors and the success
acknowledgment. The acknowledgment stays until the form is reset, edited or
submitted again. Nothing is sent anywhere.
"""
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

from storefront.logging import get_logger
from storefront.validation.rules import CONTACT_RULES, parse_age, validate_field, validate_form

logger = get_logger(__name__)


@dataclass
class ContactSubmission:
    """Outcome of one submit."""
    success: bool
    errors: dict[str, str] = field(default_factory=dict)
    acknowledgment: Optional[str] = None
    submitted_data: Optional[dict[str, Any]] = None

    def to_dict(self) -> dict:
        return {
            "success": self.success,
            "errors": self.errors,
            "acknowledgment": self.acknowledgment,
            "submitted_data": self.submitted_data,
        }


def first_name(full_name: str) -> str:
    parts = full_name.strip().split(" ")
    return parts[0] if parts else ""


class ContactForm:
    def __init__(self):
        self.errors: dict[str, str] = {}
        self.acknowledgment: Optional[str] = None
        self.submitted_data: Optional[dict[str, Any]] = None

    @property
    def show_success(self) -> bool:
        return self.acknowledgment is not None

    def check_field(self, field_name: str, value: Any) -> Optional[str]:
        """Blur/input validation of a single field; updates the field's error."""
        message = validate_field(CONTACT_RULES, field_name, value)
        if message:
            self.errors[field_name] = message
        else:
            self.errors.pop(field_name, None)
        return message

    def submit(self, data: Mapping[str, Any]) -> ContactSubmission:
        # A resubmission never shows the previous acknowledgment
        self.acknowledgment = None
        self.submitted_data = None

        self.errors = validate_form(CONTACT_RULES, data)
        if self.errors:
            logger.info(f"Contact form rejected: {sorted(self.errors)}")
            return ContactSubmission(success=False, errors=dict(self.errors))

        self.submitted_data = {
            "name": str(data["name"]).strip(),
            "email": str(data["email"]).strip(),
            "phone": str(data["phone"]).strip(),
            "age": parse_age(data["age"]),
            "contactPreference": data["contactPreference"],
            "country": data["country"],
            "newsletter": bool(data.get("newsletter", False)),
            "message": str(data["message"]).strip(),
        }
        self.acknowledgment = (
            f"Thank you, {first_name(self.submitted_data['name'])}! "
            "Your message has been successfully validated."
        )
        logger.info("Contact form accepted")
        return ContactSubmission(
            success=True,
            acknowledgment=self.acknowledgment,
            submitted_data=dict(self.submitted_data),
        )

    def touch(self) -> None:
        """A field was edited after a successful submit: hide the acknowledgment."""
        if self.show_success:
            self.acknowledgment = None
            self.submitted_data = None

    def reset(self) -> None:
        """Back to a blank form ("Submit another message")."""
        self.errors = {}
        self.acknowledgment = None
        self.submitted_data = None
