from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class BookingGatewayPort(ABC):
    @abstractmethod
    def submit(self, record: dict[str, Any]) -> dict[str, Any]:
        """
        Send a BookingRecord to the booking API and return its decoded reply.
        Raises BookingSubmissionError subclasses on any failure.
        """
        raise NotImplementedError
