"""
Health Check Endpoints

Endpoints:
- /health/live  - Basic liveness (app is running)
- /health/ready - Readiness check (configuration valid, record collections loaded)
"""

from fastapi import APIRouter, HTTPException, Request, status
from datetime import datetime
from typing import Dict, Any

from campushub.core.config import settings
from campushub.core.logging_config import logger


router = APIRouter(prefix="/health", tags=["Health Checks"])

PLACEHOLDER_SECRETS = ["CHANGE_ME", "your-secret-key"]


def check_critical_env_vars() -> Dict[str, Any]:
    """Verify all critical environment variables are set"""
    missing = []
    warnings = []

    critical_vars = {
        "SECRET_KEY": settings.SECRET_KEY,
        "JWT_SECRET_KEY": settings.JWT_SECRET_KEY,
    }

    # Without this only study question generation is affected
    important_vars = {
        "ANTHROPIC_API_KEY": settings.ANTHROPIC_API_KEY,
    }

    for name, value in critical_vars.items():
        if not value or value in PLACEHOLDER_SECRETS:
            missing.append(name)

    for name, value in important_vars.items():
        if not value or "CHANGE_ME" in str(value):
            warnings.append(name)

    if missing:
        return {
            "status": "unhealthy",
            "missing_critical": missing,
            "warnings": warnings,
            "message": f"Missing critical env vars: {', '.join(missing)}"
        }
    elif warnings:
        return {
            "status": "degraded",
            "missing_critical": [],
            "warnings": warnings,
            "message": f"Some env vars not configured: {', '.join(warnings)}"
        }
    return {
        "status": "healthy",
        "missing_critical": [],
        "warnings": [],
        "message": "All critical environment variables configured"
    }


def check_registry(request: Request) -> Dict[str, Any]:
    """Verify the record collections were built at startup"""
    registry = getattr(request.app.state, "registry", None)
    if registry is None:
        return {"status": "unhealthy", "message": "Record collections not loaded"}
    return {
        "status": "healthy",
        "collections": registry.counts(),
        "active_sessions": len(request.app.state.sessions),
    }


@router.get("/live")
async def liveness_check():
    """
    Liveness probe - indicates the application is running.
    """
    return {
        "status": "alive",
        "timestamp": datetime.utcnow().isoformat(),
        "app": settings.APP_NAME,
        "version": settings.API_VERSION
    }


@router.get("/ready")
async def readiness_check(request: Request):
    """
    Readiness probe - indicates the application can handle requests.

    Returns 503 unless configuration is valid and the record collections
    are loaded.
    """
    env_check = check_critical_env_vars()
    registry_check = check_registry(request)

    is_ready = env_check["status"] != "unhealthy" and registry_check["status"] == "healthy"

    response = {
        "status": "ready" if is_ready else "not_ready",
        "timestamp": datetime.utcnow().isoformat(),
        "checks": {
            "environment": env_check,
            "records": registry_check,
        }
    }

    if not is_ready:
        logger.warning(f"[HealthCheck] Readiness check failed: {response}")
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=response
        )

    return response
