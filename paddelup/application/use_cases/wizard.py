from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Any, Union

from paddelup.application.exceptions import ClientValidationError
from paddelup.application.ports.service_catalog import ServiceCatalogPort
from paddelup.application.utils.state_helpers import clear_message, reset_wizard, with_error
from paddelup.application.utils.validation import SERVICE_REQUIRED, validate_step
from paddelup.domain.entities.booking_draft import EDITABLE_FIELDS, WizardStep
from paddelup.domain.entities.wizard_state import WizardState


SUCCESS_MESSAGE = "Booking successfully submitted!"
FAILURE_PREFIX = "Failed to submit booking: "

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ServiceSelected:
    service: str


@dataclass(frozen=True)
class FieldChanged:
    name: str
    value: str


@dataclass(frozen=True)
class NextRequested:
    pass


@dataclass(frozen=True)
class BackRequested:
    pass


@dataclass(frozen=True)
class SubmitRequested:
    pass


@dataclass(frozen=True)
class SubmissionSucceeded:
    detail: Any = None


@dataclass(frozen=True)
class SubmissionFailed:
    reason: str


WizardEvent = Union[
    ServiceSelected,
    FieldChanged,
    NextRequested,
    BackRequested,
    SubmitRequested,
    SubmissionSucceeded,
    SubmissionFailed,
]


def reduce(state: WizardState, event: WizardEvent, catalog: ServiceCatalogPort) -> WizardState:
    """
    Apply one wizard event and return the next state.

    Forward moves run the current step's validator first; a failed check only
    sets an error message. Back moves are unconditional. While a submission is
    in flight only its settlement events and field edits are accepted.
    """
    if isinstance(event, ServiceSelected):
        return _select_service(state, event.service, catalog)

    if isinstance(event, FieldChanged):
        if event.name not in EDITABLE_FIELDS:
            raise ValueError(f"Field '{event.name}' cannot be edited directly")
        return replace(state, draft=replace(state.draft, **{event.name: event.value}))

    if isinstance(event, NextRequested):
        if state.is_submitting or state.step == WizardStep.CONTACT_INFO:
            return state
        try:
            validate_step(state.step, state.draft, catalog)
        except ClientValidationError as e:
            return with_error(state, str(e))
        return clear_message(replace(state, step=WizardStep(state.step + 1)))

    if isinstance(event, BackRequested):
        if state.is_submitting or state.step == WizardStep.SELECT_SERVICE:
            return state
        return clear_message(replace(state, step=WizardStep(state.step - 1)))

    if isinstance(event, SubmitRequested):
        if state.is_submitting or state.step != WizardStep.CONTACT_INFO:
            return state
        try:
            validate_step(state.step, state.draft, catalog)
        except ClientValidationError as e:
            return with_error(state, str(e))
        return clear_message(replace(state, is_submitting=True))

    if isinstance(event, SubmissionSucceeded):
        if not state.is_submitting:
            return state
        return reset_wizard(message=SUCCESS_MESSAGE, message_type="success")

    if isinstance(event, SubmissionFailed):
        if not state.is_submitting:
            return state
        return with_error(replace(state, is_submitting=False), f"{FAILURE_PREFIX}{event.reason}")

    raise ValueError(f"Unknown wizard event: {event!r}")


def _select_service(state: WizardState, service: str, catalog: ServiceCatalogPort) -> WizardState:
    if state.step != WizardStep.SELECT_SERVICE:
        return state
    option = catalog.get_service(service)
    if option is None:
        logger.info("Rejected unknown service", extra={"service": service})
        return with_error(state, SERVICE_REQUIRED)
    return replace(state, draft=replace(state.draft, service=option.service, price=option.price))
