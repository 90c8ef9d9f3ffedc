"""
Health check endpoints for monitoring and orchestration (K8s, Docker, etc.)

Provides multiple health check endpoints:
- /health: Basic liveness check (always returns 200)
- /health/live: Alias of /health
- /health/ready: Readiness check (contact store answers queries)
"""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from app.api.dependencies import get_contact_repo
from app.application.interfaces.contact_repo import ContactRepo

logger = logging.getLogger(__name__)

router = APIRouter()

SERVICE_NAME = "contacts-api"


@router.get("/health")
async def health_check():
    """
    Basic liveness probe.

    Returns 200 OK if the application is running.
    """
    return {"status": "ok", "service": SERVICE_NAME}


@router.get("/health/live")
async def health_check_live():
    """Alias for /health for orchestrators using the /health/live convention."""
    return {"status": "ok", "service": SERVICE_NAME}


@router.get("/health/ready")
async def health_check_ready(contact_repo: ContactRepo = Depends(get_contact_repo)):
    """
    Readiness probe.

    Runs a listing against the contact store (in-memory or database).
    Returns 503 if the store cannot answer.
    """
    health_status = {"status": "ready", "checks": {}}

    try:
        await contact_repo.list()
        health_status["checks"]["contact_store"] = "healthy"
    except Exception as e:
        logger.error("Readiness check: contact store unhealthy", exc_info=e)
        health_status["status"] = "not_ready"
        health_status["checks"]["contact_store"] = "unhealthy"
        return JSONResponse(status_code=503, content=health_status)

    return health_status
