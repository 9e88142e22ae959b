"""Tests for the contact form"""
from storefront.forms import ContactForm
from storefront.forms.contact import first_name


def test_valid_submit_shows_acknowledgment(valid_contact_form):
    """Test successful submission"""
    form = ContactForm()

    result = form.submit(valid_contact_form)

    assert result.success is True
    assert result.errors == {}
    assert result.acknowledgment == "Thank you, Jane! Your message has been successfully validated."
    assert form.show_success is True
    assert result.submitted_data["age"] == 30
    assert result.submitted_data["newsletter"] is True


def test_valid_submit_clears_previous_errors(valid_contact_form):
    form = ContactForm()
    form.submit({**valid_contact_form, "email": "nope"})
    assert form.errors == {"email": "Please enter a valid email address"}

    form.submit(valid_contact_form)

    assert form.errors == {}
    assert form.show_success is True


def test_invalid_submit_reports_every_field():
    form = ContactForm()

    result = form.submit({})

    assert result.success is False
    assert set(result.errors) == {
        "name", "email", "phone", "age", "contactPreference", "country", "message",
    }
    assert result.acknowledgment is None


def test_resubmit_clears_prior_acknowledgment(valid_contact_form):
    """Test a failing resubmission hides the earlier acknowledgment"""
    form = ContactForm()
    form.submit(valid_contact_form)

    form.submit({**valid_contact_form, "message": "short"})

    assert form.show_success is False
    assert form.submitted_data is None
    assert "message" in form.errors


def test_acknowledgment_persists_until_touched(valid_contact_form):
    form = ContactForm()
    form.submit(valid_contact_form)

    # Blur validation does not dismiss it
    form.check_field("email", "jane@example.com")
    assert form.show_success is True

    form.touch()
    assert form.show_success is False


def test_reset_clears_everything(valid_contact_form):
    form = ContactForm()
    form.submit({**valid_contact_form, "name": ""})

    form.reset()

    assert form.errors == {}
    assert form.acknowledgment is None
    assert form.submitted_data is None


def test_check_field_sets_and_clears_error():
    form = ContactForm()

    assert form.check_field("phone", "123") == "Phone number must be at least 7 digits"
    assert form.errors["phone"] == "Phone number must be at least 7 digits"

    assert form.check_field("phone", "1234567") is None
    assert "phone" not in form.errors


def test_newsletter_defaults_to_false(valid_contact_form):
    del valid_contact_form["newsletter"]

    result = ContactForm().submit(valid_contact_form)

    assert result.submitted_data["newsletter"] is False


def test_first_name():
    assert first_name("  Jane Mary Doe ") == "Jane"
    assert first_name("Cher") == "Cher"
