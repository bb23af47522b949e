from __future__ import annotations

import logging
from typing import Any

import httpx

from paddelup.application.exceptions import MalformedResponseError, TransportError, UpstreamRejection
from paddelup.application.ports.booking_gateway import BookingGatewayPort


class HttpBookingGateway(BookingGatewayPort):
    def __init__(self, endpoint: str, client: httpx.Client | None = None, timeout: float = 15.0) -> None:
        self._endpoint = endpoint
        self._client = client or httpx.Client(timeout=timeout)
        self._logger = logging.getLogger(__name__)

    def submit(self, record: dict[str, Any]) -> dict[str, Any]:
        try:
            resp = self._client.post(
                self._endpoint,
                json=record,
                headers={"Content-Type": "application/json"},
            )
        except (httpx.RequestError, httpx.InvalidURL) as e:
            # Network failures, redirect loops and undecodable bodies all mean no usable reply.
            self._logger.error("Booking API request failed", extra={"reason": str(e)})
            raise TransportError(str(e) or type(e).__name__) from e

        if not resp.is_success:
            try:
                error_body: Any = resp.json()
            except ValueError:
                error_body = None
            raise UpstreamRejection(resp.status_code, error_body)

        try:
            body = resp.json()
        except ValueError as e:
            raise MalformedResponseError("Booking API returned an invalid response") from e
        if not isinstance(body, dict):
            raise MalformedResponseError("Booking API returned an invalid response")
        return body
