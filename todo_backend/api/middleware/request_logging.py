"""Request Logging Middleware

Logs every request/response pair with method, path, status and duration.
"""

import time
import uuid
from typing import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from todo_backend.app.core.logging import clear_log_context, get_logger, log_context

logger = get_logger(__name__)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Request/response debug logging"""

    async def dispatch(
        self,
        request: Request,
        call_next: Callable,
    ) -> Response:
        request_id = request.headers.get("x-request-id") or uuid.uuid4().hex
        log_context(request_id=request_id)

        logger.info(
            "Request",
            method=request.method,
            path=request.url.path,
            origin=request.headers.get("origin"),
        )
        start_time = time.time()

        try:
            response = await call_next(request)
            duration_ms = (time.time() - start_time) * 1000

            logger.info(
                "Response",
                method=request.method,
                path=request.url.path,
                status_code=response.status_code,
                duration_ms=round(duration_ms, 2),
            )
            response.headers["X-Request-ID"] = request_id
            return response

        finally:
            clear_log_context()
