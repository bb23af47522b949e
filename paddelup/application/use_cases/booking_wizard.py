from __future__ import annotations

import logging

from paddelup.application.dto.booking_record import BookingRecordDTO
from paddelup.application.exceptions import BookingSubmissionError
from paddelup.application.ports.booking_gateway import BookingGatewayPort
from paddelup.application.ports.service_catalog import ServiceCatalogPort
from paddelup.application.use_cases.wizard import (
    BackRequested,
    FieldChanged,
    NextRequested,
    ServiceSelected,
    SubmissionFailed,
    SubmissionSucceeded,
    SubmitRequested,
    WizardEvent,
    reduce,
)
from paddelup.domain.entities.wizard_state import WizardState


class BookingWizard:
    """Holds the wizard state for one user session and performs the submission call."""

    def __init__(
        self,
        gateway: BookingGatewayPort,
        catalog: ServiceCatalogPort,
        state: WizardState | None = None,
    ) -> None:
        self._gateway = gateway
        self._catalog = catalog
        self._state = state or WizardState()
        self._logger = logging.getLogger(__name__)

    @property
    def state(self) -> WizardState:
        return self._state

    def dispatch(self, event: WizardEvent) -> WizardState:
        self._state = reduce(self._state, event, self._catalog)
        return self._state

    def select_service(self, service: str) -> WizardState:
        return self.dispatch(ServiceSelected(service=service))

    def set_field(self, name: str, value: str) -> WizardState:
        return self.dispatch(FieldChanged(name=name, value=value))

    def next_step(self) -> WizardState:
        return self.dispatch(NextRequested())

    def previous_step(self) -> WizardState:
        return self.dispatch(BackRequested())

    def submit(self) -> WizardState:
        if self._state.is_submitting:
            self._logger.warning("Submission already in flight; ignoring submit")
            return self._state

        self.dispatch(SubmitRequested())
        if not self._state.is_submitting:
            return self._state

        record = BookingRecordDTO.from_draft(self._state.draft)
        self._logger.info(
            "Submitting booking",
            extra={"service": self._state.draft.service, "step": int(self._state.step)},
        )
        try:
            result = self._gateway.submit(record.model_dump(mode="json"))
        except BookingSubmissionError as e:
            self._logger.error("Booking submission failed", extra={"reason": str(e)})
            return self.dispatch(SubmissionFailed(reason=str(e)))
        except Exception as e:
            self._logger.exception("Unexpected error submitting booking", extra={"reason": str(e)})
            return self.dispatch(SubmissionFailed(reason=str(e) or type(e).__name__))

        self._logger.info("Booking API accepted submission")
        return self.dispatch(SubmissionSucceeded(detail=result))
