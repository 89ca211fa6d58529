"""FastAPI Application

Main application entry point
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from todo_backend.api.middleware import RequestLoggingMiddleware, setup_error_handlers
from todo_backend.api.routes import health_router, todos_router
from todo_backend.app.core.config import settings
from todo_backend.app.core.logging import get_logger, setup_logging
from todo_backend.app.core.todo_store import TodoStore, get_todo_store

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler

    Startup: Configure logging
    Shutdown: Report what the in-memory store is dropping
    """
    # === Startup ===
    setup_logging()

    logger.info(
        "Starting application",
        app_name=settings.APP_NAME,
        version=settings.APP_VERSION,
        environment=settings.ENVIRONMENT,
        base_url=app.state.todo_store.base_url,
    )

    yield

    # === Shutdown ===
    logger.info(
        "Application shutdown complete",
        todos_discarded=app.state.todo_store.count(),
    )


def create_app(store: Optional[TodoStore] = None) -> FastAPI:
    """Create FastAPI application

    Args:
        store: Todo store to serve; defaults to the process-wide store
    """

    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        description="Todo-Backend reference implementation",
        lifespan=lifespan,
    )
    app.state.todo_store = store or get_todo_store()

    # Error handling (innermost)
    setup_error_handlers(app)

    # Request/response debug logging
    if settings.LOG_REQUESTS:
        app.add_middleware(RequestLoggingMiddleware)

    # CORS middleware (outermost, so error responses carry the headers too)
    allow_any_origin = "*" in settings.CORS_ORIGINS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=not allow_any_origin,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Include routers (health first so /health is not taken as a todo id)
    app.include_router(health_router)
    app.include_router(todos_router)

    return app


# Application instance
app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "todo_backend.api.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
    )
