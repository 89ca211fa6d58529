"""Structured Logging Configuration

structlog on top of stdlib logging. The app's own loggers and uvicorn's
server loggers end up on one stdout handler, rendered as JSON or as
console lines depending on Settings.
"""

import logging
import sys
from typing import Any

import structlog
from structlog.types import Processor

from todo_backend.app.core.config import Settings, settings

# uvicorn attaches its own handlers to these; they are re-routed to the root
UVICORN_LOGGERS = ("uvicorn", "uvicorn.error")

NOISY_LOGGERS = ("httpx", "asyncio")


def resolve_level(config: Settings) -> int:
    """DEBUG forces debug output, otherwise LOG_LEVEL applies"""
    if config.DEBUG:
        return logging.DEBUG
    return getattr(logging, config.LOG_LEVEL.upper())


def build_renderer(config: Settings) -> Processor:
    """JSON lines for LOG_FORMAT=json, coloured console output otherwise"""
    if config.LOG_FORMAT == "json" and not config.DEBUG:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty())


def setup_logging(config: Settings = settings) -> None:
    """Configure structured logging for the app and the uvicorn server"""

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    renderer = build_renderer(config)
    if isinstance(renderer, structlog.processors.JSONRenderer):
        shared_processors.append(structlog.processors.format_exc_info)

    structlog.configure(
        processors=shared_processors + [
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    level = resolve_level(config)
    root_logger = logging.getLogger()
    root_logger.handlers = [handler]
    root_logger.setLevel(level)

    for name in UVICORN_LOGGERS:
        server_logger = logging.getLogger(name)
        server_logger.handlers = []
        server_logger.propagate = True
        server_logger.setLevel(level)

    # RequestLoggingMiddleware writes one line per request already
    access_logger = logging.getLogger("uvicorn.access")
    access_logger.handlers = []
    access_logger.propagate = True
    access_logger.setLevel(logging.WARNING if config.LOG_REQUESTS else level)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    structlog.get_logger(__name__).debug(
        "Logging configured",
        level=logging.getLevelName(level),
        renderer=type(renderer).__name__,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance"""
    return structlog.get_logger(name)


def log_context(**kwargs: Any) -> None:
    """Add context to all subsequent log messages in this context"""
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_log_context() -> None:
    """Clear all context variables"""
    structlog.contextvars.clear_contextvars()
