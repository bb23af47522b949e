from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ServiceOption:
    service: str  # wire value, also shown to the user
    price: int  # dinars
    currency_label: str = "dt"

    @property
    def label(self) -> str:
        return f"{self.service} - {self.price}{self.currency_label}"
