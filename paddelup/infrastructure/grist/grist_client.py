from __future__ import annotations

import logging
from typing import Any

import httpx

from paddelup.application.ports.record_store import RecordStorePort, RecordStoreResponse
from paddelup.core.config import GristConfig


class GristRecordStore(RecordStorePort):
    def __init__(self, config: GristConfig, client: httpx.Client | None = None) -> None:
        self._config = config
        self._client = client or httpx.Client(timeout=config.timeout_seconds)
        self._logger = logging.getLogger(__name__)

    def create_records(self, payload: Any) -> RecordStoreResponse:
        headers = {
            "Authorization": f"Bearer {self._config.api_key.get_secret_value()}",
            "Content-Type": "application/json",
        }
        resp = self._client.post(self._config.records_url, json=payload, headers=headers)

        if not resp.is_success:
            try:
                error_body: Any = resp.json()
            except ValueError:
                # Grist proxies and gateways sometimes answer with HTML or plain text.
                error_body = resp.text
            self._logger.error(
                "Grist create records failed",
                extra={"status": resp.status_code, "reason": error_body},
            )
            return RecordStoreResponse(status_code=resp.status_code, body=error_body)

        return RecordStoreResponse(status_code=resp.status_code, body=resp.json())
