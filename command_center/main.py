"""
Life Command Center - application entry point.

Serves the personal dashboard API: BNPL plans, debts, friend IOUs,
daily spending, prayers and Quran reading, each scoped to the user
named in the identity header.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

import structlog
from fastapi import FastAPI, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import RedirectResponse

from command_center.core.config import settings
from command_center.core.logging import setup_logging
from command_center.core.metrics import get_metrics, get_metrics_content_type
from command_center.infrastructure.database import db_manager
from command_center.presentation.api import api_router
from command_center.presentation.middleware import (
    LoggingMiddleware,
    RequestContextMiddleware,
    error_handler_middleware,
)

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Configure logging, open the database, and dispose of it on shutdown."""
    setup_logging()
    db_manager.init()
    if settings.db_create_tables:
        await db_manager.create_tables()

    logger.info(
        "application_started",
        version=settings.app_version,
        metrics_enabled=settings.metrics_enabled,
        user_id_header=settings.user_id_header,
    )

    try:
        yield
    finally:
        await db_manager.close()
        logger.info("application_stopped")


def create_app() -> FastAPI:
    application = FastAPI(
        title="Life Command Center",
        description="Personal finance and ibadah tracking API",
        version=settings.app_version,
        lifespan=lifespan,
    )

    # Added last runs first: request ids exist before anything is logged
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=[RequestContextMiddleware.HEADER_NAME],
    )
    application.add_middleware(LoggingMiddleware)
    application.add_middleware(RequestContextMiddleware)

    error_handler_middleware(application)
    application.include_router(api_router)

    @application.get("/metrics", include_in_schema=False)
    async def metrics() -> Response:
        if not settings.metrics_enabled:
            return Response(status_code=404)
        return Response(content=get_metrics(), media_type=get_metrics_content_type())

    @application.get("/", include_in_schema=False)
    async def root() -> RedirectResponse:
        return RedirectResponse(url="/docs")

    return application


app = create_app()
