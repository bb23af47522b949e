from __future__ import annotations

import re

from paddelup.application.exceptions import ClientValidationError
from paddelup.application.ports.service_catalog import ServiceCatalogPort
from paddelup.domain.entities.booking_draft import BookingDraft, WizardStep


# Matched with fullmatch so a trailing newline is never accepted.
EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
PHONE_PATTERN = re.compile(r"\+?[0-9\s-]{7,15}")

SERVICE_REQUIRED = "Please select a service option."
DATE_TIME_REQUIRED = "Please select both a date and a time."
CONTACT_REQUIRED = "All contact fields are required."
INVALID_EMAIL = "Please enter a valid email address."
INVALID_PHONE = "Please enter a valid phone number."


def is_valid_email(email: str) -> bool:
    return EMAIL_PATTERN.fullmatch(email) is not None


def is_valid_phone(phone: str) -> bool:
    return PHONE_PATTERN.fullmatch(phone) is not None


def validate_service(draft: BookingDraft, catalog: ServiceCatalogPort) -> None:
    if not draft.service or catalog.get_service(draft.service) is None:
        raise ClientValidationError(SERVICE_REQUIRED)


def validate_date_time(draft: BookingDraft) -> None:
    if not draft.date or not draft.time:
        raise ClientValidationError(DATE_TIME_REQUIRED)


def validate_contact(draft: BookingDraft) -> None:
    if not draft.name or not draft.email or not draft.phone:
        raise ClientValidationError(CONTACT_REQUIRED)
    if not is_valid_email(draft.email):
        raise ClientValidationError(INVALID_EMAIL)
    if not is_valid_phone(draft.phone):
        raise ClientValidationError(INVALID_PHONE)


def validate_step(step: WizardStep, draft: BookingDraft, catalog: ServiceCatalogPort) -> None:
    """Raise ClientValidationError if the draft cannot leave the given step."""
    if step == WizardStep.SELECT_SERVICE:
        validate_service(draft, catalog)
    elif step == WizardStep.SELECT_DATE_TIME:
        validate_date_time(draft)
    else:
        validate_contact(draft)
