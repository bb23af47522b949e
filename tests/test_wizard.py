from __future__ import annotations

from dataclasses import replace

import pytest

from paddelup.application.use_cases.wizard import (
    FAILURE_PREFIX,
    SUCCESS_MESSAGE,
    BackRequested,
    FieldChanged,
    NextRequested,
    ServiceSelected,
    SubmissionFailed,
    SubmissionSucceeded,
    SubmitRequested,
    reduce,
)
from paddelup.domain.entities.booking_draft import BookingDraft, WizardStep
from paddelup.domain.entities.wizard_state import WizardState
from paddelup.infrastructure.knowledge.service_catalog_data import SERVICE_CATALOG
from paddelup.infrastructure.knowledge.service_catalog_store import ServiceCatalogStore


CATALOG = ServiceCatalogStore()

FULL_DRAFT = BookingDraft(
    service="1 hour with training",
    price=35,
    date="2025-06-01",
    time="18:00",
    name="Amine",
    email="amine@example.com",
    phone="+21650112233",
)


def _apply(state: WizardState, *events) -> WizardState:
    for event in events:
        state = reduce(state, event, CATALOG)
    return state


@pytest.mark.parametrize(
    "service,price",
    [(option.service, option.price) for option in SERVICE_CATALOG.values()],
)
def test_selecting_service_sets_paired_price(service, price):
    """Selecting a service sets exactly its catalog price."""
    state = _apply(WizardState(), ServiceSelected(service))
    assert state.draft.service == service
    assert state.draft.price == price


def test_catalog_prices():
    """The catalog offers the three padel sessions at their fixed prices."""
    prices = {option.service: option.price for option in CATALOG.list_services()}
    assert prices == {
        "1 hour without training": 20,
        "1 hour with training": 35,
        "1 hour with training and suivi": 45,
    }


def test_reselecting_service_replaces_price():
    """Changing the service changes the price with it."""
    state = _apply(
        WizardState(),
        ServiceSelected("1 hour with training and suivi"),
        ServiceSelected("1 hour without training"),
    )
    assert (state.draft.service, state.draft.price) == ("1 hour without training", 20)


def test_unknown_service_leaves_draft_unchanged():
    """An unknown service is refused and the draft keeps its previous choice."""
    state = _apply(WizardState(), ServiceSelected("1 hour with training"), ServiceSelected("free session"))
    assert (state.draft.service, state.draft.price) == ("1 hour with training", 35)
    assert state.message_type == "error"


def test_price_cannot_be_edited_directly():
    """Service and price cannot be set as free-text fields."""
    for name in ("price", "service"):
        with pytest.raises(ValueError):
            reduce(WizardState(), FieldChanged(name, "0"), CATALOG)


def test_step1_blocked_without_service():
    """Next on step 1 without a service shows an error and stays put."""
    state = _apply(WizardState(), NextRequested())
    assert state.step == WizardStep.SELECT_SERVICE
    assert state.message == "Please select a service option."
    assert state.message_type == "error"


def test_step1_advances_and_clears_message():
    """Next on step 1 with a service moves on and clears the error."""
    state = _apply(WizardState(), NextRequested(), ServiceSelected("1 hour with training"), NextRequested())
    assert state.step == WizardStep.SELECT_DATE_TIME
    assert state.message == ""
    assert state.message_type == ""


@pytest.mark.parametrize("date,time", [("", ""), ("2025-06-01", ""), ("", "18:00")])
def test_step2_blocked_without_date_and_time(date, time):
    """Next on step 2 stays put unless both date and time are set."""
    start = WizardState(step=WizardStep.SELECT_DATE_TIME, draft=BookingDraft(date=date, time=time))
    state = _apply(start, NextRequested())
    assert state.step == WizardStep.SELECT_DATE_TIME
    assert state.message == "Please select both a date and a time."


def test_step2_advances_with_date_and_time():
    """Next on step 2 with date and time moves to contact info."""
    start = WizardState(step=WizardStep.SELECT_DATE_TIME)
    state = _apply(start, FieldChanged("date", "2025-06-01"), FieldChanged("time", "18:00"), NextRequested())
    assert state.step == WizardStep.CONTACT_INFO


def test_back_is_unconditional_and_clears_message():
    """Back always moves one step and clears the message, stopping at step 1."""
    start = WizardState(step=WizardStep.CONTACT_INFO, message="boom", message_type="error")
    state = _apply(start, BackRequested())
    assert state.step == WizardStep.SELECT_DATE_TIME
    assert state.message == ""

    state = _apply(state, BackRequested())
    assert state.step == WizardStep.SELECT_SERVICE

    assert _apply(state, BackRequested()).step == WizardStep.SELECT_SERVICE


def test_back_keeps_draft():
    """Going back keeps everything already entered."""
    start = WizardState(step=WizardStep.CONTACT_INFO, draft=FULL_DRAFT)
    assert _apply(start, BackRequested()).draft == FULL_DRAFT


def test_next_on_last_step_is_noop():
    """Next on the contact step does nothing; submit is separate."""
    start = WizardState(step=WizardStep.CONTACT_INFO, draft=FULL_DRAFT)
    assert _apply(start, NextRequested()) == start


def test_submit_blocked_on_invalid_contact():
    """Invalid contact details block the submission with an error."""
    start = WizardState(step=WizardStep.CONTACT_INFO, draft=replace(FULL_DRAFT, email="amine@example"))
    state = _apply(start, SubmitRequested())
    assert not state.is_submitting
    assert state.message == "Please enter a valid email address."


def test_submit_only_from_contact_step():
    """Submit is ignored outside the contact step."""
    start = WizardState(step=WizardStep.SELECT_DATE_TIME, draft=FULL_DRAFT)
    assert _apply(start, SubmitRequested()) == start


def test_submit_starts_in_flight_and_clears_message():
    """A valid submit enters the in-flight state and clears the message."""
    start = WizardState(step=WizardStep.CONTACT_INFO, draft=FULL_DRAFT, message="old", message_type="error")
    state = _apply(start, SubmitRequested())
    assert state.is_submitting
    assert state.message == ""
    assert state.draft == FULL_DRAFT


def test_in_flight_ignores_back_and_second_submit():
    """Back and submit are ignored while a submission is in flight."""
    submitting = WizardState(step=WizardStep.CONTACT_INFO, draft=FULL_DRAFT, is_submitting=True)
    assert _apply(submitting, BackRequested()) == submitting
    assert _apply(submitting, SubmitRequested()) == submitting


def test_success_resets_to_empty_step1():
    """A successful submission resets to an empty step 1 with a success message."""
    submitting = WizardState(step=WizardStep.CONTACT_INFO, draft=FULL_DRAFT, is_submitting=True)
    state = _apply(submitting, SubmissionSucceeded({"message": "ok"}))
    assert state.step == WizardStep.SELECT_SERVICE
    assert state.draft == BookingDraft()
    assert state.message == SUCCESS_MESSAGE
    assert state.message_type == "success"
    assert not state.is_submitting


def test_failure_keeps_draft_on_step3():
    """A failed submission keeps the draft on step 3 with an error message."""
    submitting = WizardState(step=WizardStep.CONTACT_INFO, draft=FULL_DRAFT, is_submitting=True)
    state = _apply(submitting, SubmissionFailed("Failed to submit to Grist"))
    assert state.step == WizardStep.CONTACT_INFO
    assert state.draft == FULL_DRAFT
    assert state.message == f"{FAILURE_PREFIX}Failed to submit to Grist"
    assert state.message_type == "error"
    assert not state.is_submitting


def test_settlement_without_submission_is_ignored():
    """Late success or failure events without a submission change nothing."""
    start = WizardState(step=WizardStep.CONTACT_INFO, draft=FULL_DRAFT)
    assert _apply(start, SubmissionSucceeded()) == start
    assert _apply(start, SubmissionFailed("late")) == start


def test_service_selection_only_on_step1():
    """Services can only be chosen on step 1."""
    start = WizardState(step=WizardStep.SELECT_DATE_TIME, draft=FULL_DRAFT)
    assert _apply(start, ServiceSelected("1 hour without training")) == start


def test_unknown_event_rejected():
    """Unknown events are rejected."""
    with pytest.raises(ValueError):
        reduce(WizardState(), object(), CATALOG)
