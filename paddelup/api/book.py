from __future__ import annotations

import logging

from fastapi import APIRouter, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse

from paddelup.wiring.dependencies import get_forward_booking_use_case


router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/api/book")
async def book(request: Request) -> JSONResponse:
    try:
        use_case = get_forward_booking_use_case()
    except Exception as e:
        logger.exception("Failed to initialize booking proxy", extra={"reason": str(e)})
        return JSONResponse(
            status_code=500,
            content={"message": "Internal Server Error", "error": str(e)},
        )

    body = await request.body()
    result = await run_in_threadpool(use_case.execute, body)
    return JSONResponse(status_code=result.status_code, content=result.body)
