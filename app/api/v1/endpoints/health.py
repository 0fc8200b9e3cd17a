"""
Health check endpoint.
"""

from datetime import datetime, timezone
from fastapi import APIRouter
from typing import Dict, Any

from app.api.v1.schemas.meeting import HealthCheckResponse
from app.core.config import Settings
from app.core.dependencies import SettingsDep

router = APIRouter()


@router.get("/health", response_model=HealthCheckResponse, tags=["Health"])
async def health_check(settings: Settings = SettingsDep) -> Dict[str, Any]:
    """
    Health check endpoint.

    Returns:
        Health status with timestamp and version
    """
    return {
        "status": "ok",
        "timestamp": datetime.now(timezone.utc),
        "version": settings.version,
    }
