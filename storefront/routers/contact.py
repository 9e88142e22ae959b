"""
Storefront Contact Router

Contact form validation. Submissions are validated and acknowledged only;
no message is sent.
"""
from fastapi import APIRouter, HTTPException

from storefront.constants import CONTACT_PREFERENCES, COUNTRIES
from storefront.errors import ERROR_FORM_INVALID
from storefront.forms import ContactForm
from storefront.validation import CONTACT_RULES
from .models import ContactFormRequest, FieldValidationRequest

router = APIRouter(tags=["storefront-contact"])


@router.get("/contact/options")
async def get_contact_options():
    return {
        "countries": COUNTRIES,
        "contact_preferences": [
            {"value": value, "label": label} for value, label in CONTACT_PREFERENCES.items()
        ],
    }


@router.post("/contact/validate")
async def validate_contact_field(request: FieldValidationRequest):
    """Validate one contact field (blur / input)."""
    if request.field not in CONTACT_RULES:
        raise HTTPException(status_code=400, detail=f"Unknown contact field: {request.field}")
    error = ContactForm().check_field(request.field, request.value)
    return {"field": request.field, "valid": error is None, "error": error}


@router.post("/contact")
async def submit_contact(request: ContactFormRequest):
    """Validate every field; on success return the acknowledgment and submitted data."""
    submission = ContactForm().submit(request.model_dump())
    if not submission.success:
        raise HTTPException(
            status_code=422,
            detail={"message": ERROR_FORM_INVALID, "errors": submission.errors},
        )
    return submission.to_dict()
