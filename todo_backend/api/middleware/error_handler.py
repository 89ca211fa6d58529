"""Error Handler Middleware

Global error handling
"""

from typing import Callable

from fastapi import FastAPI, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from todo_backend.app.core.config import settings
from todo_backend.app.core.errors import (
    ErrorCode,
    ErrorDetail,
    TodoNotFoundError,
)
from todo_backend.app.core.logging import get_logger

logger = get_logger(__name__)


class ErrorHandlerMiddleware(BaseHTTPMiddleware):
    """Catches anything the route handlers let escape"""

    async def dispatch(
        self,
        request: Request,
        call_next: Callable,
    ) -> Response:
        try:
            return await call_next(request)

        except Exception as e:
            logger.exception(
                "Unexpected error",
                path=request.url.path,
                error=str(e),
            )

            return JSONResponse(
                status_code=500,
                content={
                    "success": False,
                    "error": ErrorDetail.for_code(
                        ErrorCode.INTERNAL_ERROR,
                        details={"error": str(e)} if settings.DEBUG else {},
                    ).model_dump(),
                },
            )


def setup_error_handlers(app: FastAPI) -> None:
    """Register error handlers

    Args:
        app: FastAPI app
    """
    app.add_middleware(ErrorHandlerMiddleware)

    @app.exception_handler(TodoNotFoundError)
    async def todo_not_found_handler(
        request: Request,
        exc: TodoNotFoundError,
    ) -> Response:
        """Missing todo -> 404 with an empty body"""
        logger.info("Todo not found", todo_id=exc.todo_id, path=request.url.path)
        return Response(status_code=404)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        """Undecodable or wrongly typed body -> 400"""
        errors = exc.errors()
        code = ErrorCode.VALIDATION_ERROR
        if any(error.get("type") == "json_invalid" for error in errors):
            code = ErrorCode.MALFORMED_BODY

        logger.warning(
            "Request validation failed",
            path=request.url.path,
            error_code=code.value,
        )

        return JSONResponse(
            status_code=400,
            content={
                "success": False,
                "error": ErrorDetail.for_code(
                    code,
                    details={
                        "errors": [
                            {"loc": list(error.get("loc", ())), "msg": error.get("msg", "")}
                            for error in errors
                        ]
                    },
                ).model_dump(),
            },
        )
