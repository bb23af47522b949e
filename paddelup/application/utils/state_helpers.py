from __future__ import annotations

from dataclasses import replace

from paddelup.domain.entities.wizard_state import WizardState


def with_error(state: WizardState, message: str) -> WizardState:
    return replace(state, message=message, message_type="error")


def clear_message(state: WizardState) -> WizardState:
    return replace(state, message="", message_type="")


def reset_wizard(message: str = "", message_type: str = "") -> WizardState:
    """Fresh wizard on step 1 with an empty draft, optionally carrying a message."""
    return WizardState(message=message, message_type=message_type)
