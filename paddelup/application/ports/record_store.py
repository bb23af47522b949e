from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class RecordStoreResponse:
    status_code: int
    body: Any

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300


class RecordStorePort(ABC):
    @abstractmethod
    def create_records(self, payload: Any) -> RecordStoreResponse:
        """Forward a records payload unchanged. Returns the store's status and decoded body."""
        raise NotImplementedError
