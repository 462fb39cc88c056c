"""Health check endpoints"""

from datetime import datetime

from fastapi import APIRouter, Depends, Request, status
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from survey_schedule.config import settings
from survey_schedule.database import get_db

router = APIRouter(tags=["Health"])


@router.get("/health", status_code=status.HTTP_200_OK)
async def basic_health_check():
    """
    Basic liveness check

    Returns simple health status and timestamp
    """
    return {
        "status": "OK",
        "timestamp": datetime.utcnow().isoformat() + "Z"
    }


@router.get("/api/health", status_code=status.HTTP_200_OK)
async def detailed_health_check(request: Request, db: AsyncSession = Depends(get_db)):
    """
    Detailed health check with storage status

    Reports "degraded" when the database cannot be reached
    """
    services = {}
    overall_status = "OK"

    if getattr(request.app.state, "project_store", None) is not None:
        services["projects"] = "memory"
    else:
        services["projects"] = "database"

    try:
        result = await db.execute(text("SELECT 1"))
        result.scalar_one()
        services["database"] = "connected"
    except Exception as e:
        services["database"] = f"disconnected: {str(e)}"
        overall_status = "degraded"

    return {
        "status": overall_status,
        "environment": settings.environment,
        "timestamp": datetime.utcnow().isoformat() + "Z",
        "services": services
    }
