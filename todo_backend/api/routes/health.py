"""Health Check Routes"""

from datetime import datetime
from typing import Any

from fastapi import APIRouter, Request

from todo_backend.api.schemas.response import HealthDetailResponse, HealthResponse
from todo_backend.app.core.config import settings

router = APIRouter(prefix="/health", tags=["Health"])


def _check_store(request: Request) -> dict[str, Any]:
    """Todo store status"""
    store = getattr(request.app.state, "todo_store", None)
    if store is None:
        return {
            "status": "error",
            "message": "Todo store not initialized",
        }
    return {
        "status": "ok",
        "message": f"Todos stored: {store.count()}",
        "todos": store.count(),
        "base_url": store.base_url,
    }


@router.get("", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Basic health check"""
    return HealthResponse(
        status="ok",
        version=settings.APP_VERSION,
        timestamp=datetime.utcnow(),
    )


@router.get("/ready", response_model=HealthDetailResponse)
async def readiness_check(request: Request) -> HealthDetailResponse:
    """Readiness check (dependencies)"""
    checks = {
        "todo_store": _check_store(request),
    }

    statuses = [c["status"] for c in checks.values()]
    overall_status = "ok" if all(s == "ok" for s in statuses) else "degraded"

    return HealthDetailResponse(
        status=overall_status,
        version=settings.APP_VERSION,
        timestamp=datetime.utcnow(),
        checks=checks,
    )


@router.get("/live", response_model=HealthResponse)
async def liveness_check() -> HealthResponse:
    """Liveness check (process alive)"""
    return HealthResponse(
        status="ok",
        version=settings.APP_VERSION,
        timestamp=datetime.utcnow(),
    )
