"""API Middleware Package"""

from .error_handler import ErrorHandlerMiddleware, setup_error_handlers
from .request_logging import RequestLoggingMiddleware

__all__ = [
    "ErrorHandlerMiddleware",
    "RequestLoggingMiddleware",
    "setup_error_handlers",
]
