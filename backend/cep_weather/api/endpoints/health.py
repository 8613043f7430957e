"""Health Check Endpoint."""

from fastapi import APIRouter, Request

from ...core.constants import ApiEndpoints

router = APIRouter()


@router.get(ApiEndpoints.HEALTH)
async def health_check(request: Request):
    """Health check endpoint for container readiness/liveness probes."""
    settings = request.app.state.settings
    return {
        "status": "healthy",
        "service": request.app.state.service_name,
        "version": settings.APP_VERSION,
        "environment": settings.ENVIRONMENT
    }
