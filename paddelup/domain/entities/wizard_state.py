from __future__ import annotations

from dataclasses import dataclass

from paddelup.domain.entities.booking_draft import BookingDraft, WizardStep


@dataclass(frozen=True)
class WizardState:
    step: WizardStep = WizardStep.SELECT_SERVICE
    draft: BookingDraft = BookingDraft()
    message: str = ""
    message_type: str = ""  # "", "success", "error"
    is_submitting: bool = False

    @property
    def total_steps(self) -> int:
        return len(WizardStep)
