"""
request_logging.py
- Purpose: One log line per request and per response, correlated by request id.
- Upstream ids are honoured: x-request-id, and x-transaction-id (order/booking id)
  when the order-details view sends it.
"""

from __future__ import annotations

import logging
import time
import uuid

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from order_timeline.core.request_context import clear_context, set_context

logger = logging.getLogger("app.http")

REQUEST_ID_HEADER = "x-request-id"
TRANSACTION_ID_HEADER = "x-transaction-id"


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        rid = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
        set_context(request_id=rid, transaction_id=request.headers.get(TRANSACTION_ID_HEADER))

        started = time.perf_counter()
        try:
            logger.info(
                "http.request",
                extra={"method": request.method, "path": request.url.path, "query": str(request.url.query)},
            )
            response: Response = await call_next(request)

            level = logging.WARNING if response.status_code >= 500 else logging.INFO
            logger.log(
                level,
                "http.response",
                extra={
                    "method": request.method,
                    "path": request.url.path,
                    "status_code": response.status_code,
                    "duration_ms": int((time.perf_counter() - started) * 1000),
                },
            )

            response.headers[REQUEST_ID_HEADER] = rid
            return response
        finally:
            clear_context()
