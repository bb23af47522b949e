from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any

from paddelup.application.ports.record_store import RecordStorePort


@dataclass(frozen=True)
class ProxyResult:
    status_code: int
    body: dict[str, Any]


class ForwardBookingUseCase:
    """
    Re-issue an inbound BookingRecord to the record store and translate the outcome.
    The payload is forwarded exactly as decoded; field names and values are not touched.
    """

    def __init__(self, store: RecordStorePort) -> None:
        self._store = store
        self._logger = logging.getLogger(__name__)

    def execute(self, raw_body: bytes) -> ProxyResult:
        try:
            payload = json.loads(raw_body, parse_constant=_reject_constant)
            self._logger.info("Booking received", extra={"record_count": _record_count(payload)})

            response = self._store.create_records(payload)
            self._logger.info("Record store responded", extra={"status": response.status_code})

            if not response.ok:
                self._logger.warning(
                    "Record store rejected booking",
                    extra={"status": response.status_code, "reason": response.body},
                )
                return ProxyResult(
                    status_code=response.status_code,
                    body={"message": "Failed to submit to Grist", "gristError": response.body},
                )

            return ProxyResult(
                status_code=200,
                body={"message": "Booking successfully submitted!", "data": response.body},
            )
        except Exception as e:
            self._logger.exception("Error forwarding booking", extra={"reason": str(e)})
            return ProxyResult(
                status_code=500,
                body={"message": "Internal Server Error", "error": str(e)},
            )


def _record_count(payload: Any) -> int | None:
    if isinstance(payload, dict) and isinstance(payload.get("records"), list):
        return len(payload["records"])
    return None


def _reject_constant(name: str) -> Any:
    # NaN and Infinity are not JSON; json.loads would otherwise accept them.
    raise ValueError(f"Invalid JSON constant: {name}")
