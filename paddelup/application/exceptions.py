from __future__ import annotations

from typing import Any


GENERIC_SUBMISSION_ERROR = "Something went wrong with the booking submission."


class ClientValidationError(ValueError):
    """Raised when a wizard step fails validation. Never leaves the wizard."""
    pass


class BookingSubmissionError(RuntimeError):
    """Base for failures of the wizard's call to the booking API."""
    pass


class TransportError(BookingSubmissionError):
    """Raised when the booking API cannot be reached (network errors, timeouts)."""
    pass


class UpstreamRejection(BookingSubmissionError):
    """Raised when the booking API answers with a non-success status."""

    def __init__(self, status_code: int, body: Any = None) -> None:
        self.status_code = status_code
        self.body = body
        message = body.get("message") if isinstance(body, dict) else None
        super().__init__(message or GENERIC_SUBMISSION_ERROR)


class MalformedResponseError(BookingSubmissionError):
    """Raised when the booking API answers with a body that is not JSON."""
    pass
