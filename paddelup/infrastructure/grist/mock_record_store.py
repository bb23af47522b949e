from __future__ import annotations

import logging
from typing import Any

from paddelup.application.ports.record_store import RecordStorePort, RecordStoreResponse


class MockRecordStore(RecordStorePort):
    def __init__(self) -> None:
        self._rows: dict[int, dict[str, Any]] = {}
        self._logger = logging.getLogger(__name__)

    @property
    def rows(self) -> dict[int, dict[str, Any]]:
        return dict(self._rows)

    def create_records(self, payload: Any) -> RecordStoreResponse:
        records = payload.get("records") if isinstance(payload, dict) else None
        if not isinstance(records, list):
            return RecordStoreResponse(status_code=400, body={"error": "Invalid payload: records must be a list"})

        created: list[dict[str, int]] = []
        for record in records:
            row_id = len(self._rows) + 1
            self._rows[row_id] = dict((record or {}).get("fields") or {})
            created.append({"id": row_id})

        self._logger.info("Mock records created", extra={"record_count": len(created)})
        return RecordStoreResponse(status_code=200, body={"records": created})
