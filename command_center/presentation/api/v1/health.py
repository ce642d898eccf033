"""Liveness endpoint reporting the service version and database reachability."""

from typing import Literal

from fastapi import APIRouter
from pydantic import BaseModel

from command_center.core.config import settings
from command_center.infrastructure.database import db_manager

health_router = APIRouter()


class HealthResponse(BaseModel):
    status: Literal["healthy", "degraded"]
    database: Literal["ok", "unavailable"]
    version: str


@health_router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health Check",
    description="Always answers 200; `status` is `degraded` when the database cannot be reached.",
)
async def health_check() -> HealthResponse:
    database_ok = await db_manager.ping()
    return HealthResponse(
        status="healthy" if database_ok else "degraded",
        database="ok" if database_ok else "unavailable",
        version=settings.app_version,
    )
