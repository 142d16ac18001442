"""
Health check router.

``/health`` answers as long as the process is up. ``/health/ready``
also round-trips the database and reports 503 while it is unreachable,
so the load balancer stops routing uploads to an instance that would
fail them.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine

from app.core.config import settings
from app.infrastructure.database import ping
from app.interfaces.resources import get_engine

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/health", tags=["health"])


class HealthResponse(BaseModel):
    status: str
    version: str
    database: Optional[str] = None


@router.get("", response_model=HealthResponse, summary="Liveness probe")
def health_check() -> HealthResponse:
    return HealthResponse(status="ok", version=settings.version)


@router.get(
    "/ready",
    response_model=HealthResponse,
    responses={503: {"model": HealthResponse}},
    summary="Readiness probe",
)
async def readiness_check(engine: AsyncEngine = Depends(get_engine)):
    """Report whether the database accepts queries."""
    try:
        await ping(engine)
    except (SQLAlchemyError, OSError) as exc:
        logger.warning("Readiness check failed: %s", type(exc).__name__)
        body = HealthResponse(status="unavailable", version=settings.version, database="down")
        return JSONResponse(status_code=503, content=body.model_dump())
    return HealthResponse(status="ok", version=settings.version, database="up")
