"""
Health check endpoints for monitoring and orchestration.

- /health, /health/live: liveness (no dependencies)
- /health/ready: readiness, including database connectivity in SQL mode
"""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse, PlainTextResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from travel_api.api.deps import get_db_session

logger = logging.getLogger(__name__)

router = APIRouter()

SERVICE_NAME = "travel-booking-api"


@router.get("/", response_class=PlainTextResponse)
async def root() -> str:
    return "Travel booking API is running"


@router.get("/health")
async def health_check():
    return {"status": "ok", "service": SERVICE_NAME}


@router.get("/health/live")
async def health_check_live():
    """Alias for /health; some orchestrators prefer the /live naming."""
    return {"status": "ok", "service": SERVICE_NAME}


@router.get("/health/ready")
async def health_check_ready(session: AsyncSession | None = Depends(get_db_session)):
    """Returns 503 when the database does not answer."""
    health_status = {"status": "ready", "checks": {}}

    if session is None:
        health_status["checks"]["database"] = "in-memory"
        return health_status

    try:
        result = await session.execute(text("SELECT 1"))
        result.scalar()
        health_status["checks"]["database"] = "healthy"
    except SQLAlchemyError as e:
        logger.error("Readiness check: Database unhealthy", exc_info=e)
        health_status["status"] = "not_ready"
        health_status["checks"]["database"] = "unhealthy"
        return JSONResponse(status_code=503, content=health_status)

    return health_status
