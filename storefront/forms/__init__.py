"""Forms package: stateful form handling on top of the validation rules."""
from .contact import ContactForm, ContactSubmission

__all__ = ["ContactForm", "ContactSubmission"]
