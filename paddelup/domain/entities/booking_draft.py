from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class WizardStep(IntEnum):
    SELECT_SERVICE = 1
    SELECT_DATE_TIME = 2
    CONTACT_INFO = 3


# Fields the user can type into directly; service and price only change together.
EDITABLE_FIELDS = ("date", "time", "name", "email", "phone")


@dataclass(frozen=True)
class BookingDraft:
    service: str = ""
    price: int = 0  # always the price paired with service
    date: str = ""  # YYYY-MM-DD
    time: str = ""  # HH:MM
    name: str = ""
    email: str = ""
    phone: str = ""
