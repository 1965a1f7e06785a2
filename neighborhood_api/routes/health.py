# neighborhood_api/routes/health.py
"""
Health check endpoints.
Readiness only inspects configuration; upstreams are not called.
"""

import time

from fastapi import APIRouter

from neighborhood_api.config import settings

router = APIRouter()


@router.get("/healthz")
async def healthz():
    """Basic health check - always returns 200 if app is running."""
    return {"status": "ok", "service": "neighborhood-api"}


@router.get("/readyz")
async def readyz():
    """Readiness check covering required configuration."""
    checks = {}

    config_issues = []

    if not settings.NEIGHBORHOOD_AIRTABLE_API_KEY:
        config_issues.append("NEIGHBORHOOD_AIRTABLE_API_KEY not set")

    if not settings.NEIGHBORHOOD_AIRTABLE_BASE_ID:
        config_issues.append("NEIGHBORHOOD_AIRTABLE_BASE_ID not set")

    config_ok = not config_issues
    checks["configuration"] = {
        "ok": config_ok,
        "issues": config_issues if config_issues else None,
        "environment": settings.environment,
        "hackatime_base_url": settings.HACKATIME_BASE_URL,
    }

    return {"overall_ok": config_ok, "checks": checks, "timestamp": time.time()}
