"""Health routes - liveness and wiring summary."""

from fastapi import APIRouter, Request

from app.core.config import settings
from app.schemas.api import HealthResponse

router = APIRouter(prefix="/health", tags=["health"])


@router.get("", response_model=HealthResponse)
def health(request: Request):
    """Liveness probe; also reports whether the service runs in demo mode."""
    return HealthResponse(
        status="ok",
        store="demo" if request.app.state.session_factory is None else "database",
        relay_configured=bool(settings.ZAPIER_WEBHOOK_URL),
        pending_background_tasks=request.app.state.task_runner.pending,
    )
