"""
exception_handlers.py
- Purpose: Convert AppError, request validation failures and generic exceptions
  into the same {"error": {...}} envelope.

Also logs errors with request context so failures are diagnosable.
"""

from __future__ import annotations

import logging

from fastapi import Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from order_timeline.core import AppError, ErrorCode, ErrorReason

logger = logging.getLogger("app.exceptions")


def _where(request: Request) -> dict:
    return {"path": str(getattr(request.url, "path", "")), "method": request.method}


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    logger.warning(
        "app_error",
        extra={
            **_where(request),
            "status_code": exc.status_code,
            "code": getattr(exc.code, "value", exc.code),
            "reason": getattr(exc.reason, "value", exc.reason),
        },
    )
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    err = AppError(
        code=ErrorCode.VALIDATION_ERROR,
        reason=ErrorReason.INVALID_INPUT.value,
        status_code=422,
        details={"fields": jsonable_encoder(exc.errors())},
    )
    logger.info("request_validation_error", extra={**_where(request), "errors": len(exc.errors())})
    return JSONResponse(status_code=err.status_code, content=err.to_dict())


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("unhandled_exception", extra=_where(request))
    return JSONResponse(
        status_code=500,
        content={"error": {"code": ErrorCode.INTERNAL_ERROR.value, "reason": ErrorReason.INTERNAL_ERROR.value}},
    )
