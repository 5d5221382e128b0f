"""
Health check endpoints for the application.
"""

from datetime import datetime, timezone
from typing import Any, Dict

from fastapi import APIRouter, HTTPException, status
from fastapi.responses import Response

from tradie_agent.api.dependencies import AssistantDep
from tradie_agent.config.settings import settings
from tradie_agent.infrastructure.monitoring.metrics import (
    get_metrics,
    get_metrics_content_type,
)

router = APIRouter(prefix="/health", tags=["health"])


@router.get("")
async def health_check(assistant: AssistantDep) -> Dict[str, Any]:
    """Basic health check endpoint."""
    return {
        "status": "healthy",
        "version": settings.APP_VERSION,
        "active_job": assistant.get_active_job() is not None,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


@router.get("/metrics")
async def metrics() -> Response:
    """Prometheus metrics endpoint."""
    if not settings.ENABLE_METRICS:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Metrics are disabled"
        )
    return Response(content=get_metrics(), media_type=get_metrics_content_type())
