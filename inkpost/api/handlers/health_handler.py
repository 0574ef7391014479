"""
Health Check Handler

Provides health check endpoints for monitoring and load balancers.
Mounted at the root of every service; the service name comes from
app.state.service.
"""

from fastapi import APIRouter, Request

from inkpost.config.settings import settings
from inkpost.shared.schemas.common import HealthResponse


router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health_check(request: Request):
    """
    Basic health check endpoint.

    Returns:
        HealthResponse with service status
    """
    return HealthResponse(
        status="healthy",
        service=request.app.state.service,
        version=settings.APP_VERSION,
    )


@router.get("/ready")
async def readiness_check():
    """
    Readiness check for Kubernetes/load balancers.

    Connectivity is verified once in the lifespan; a service that failed
    to reach its database never starts serving.
    """
    return {"status": "ready"}


@router.get("/live")
async def liveness_check():
    """
    Liveness check for Kubernetes.
    """
    return {"status": "alive"}
