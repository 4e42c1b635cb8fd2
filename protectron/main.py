"""FastAPI application entry point for the Protectron scoring service."""

import time
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from protectron.api.middleware.error_handler import global_exception_handler
from protectron.api.middleware.logging import StructuredLoggingMiddleware
from protectron.api.routes.assessments import router as assessments_router
from protectron.api.routes.certifications import router as certifications_router
from protectron.api.routes.health import router as health_router
from protectron.api.routes.requirements import router as requirements_router
from protectron.config import settings
from protectron.shared.logging import setup_logging

logger = structlog.get_logger()

# Track app start time for uptime calculation
APP_START_TIME: float = 0.0


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan: startup and shutdown logic."""
    global APP_START_TIME
    APP_START_TIME = time.time()
    setup_logging(settings.log_level, settings.log_format)

    logger.info(
        "protectron_starting",
        app_name=settings.app_name,
        version=settings.app_version,
        debug=settings.debug,
    )

    yield

    logger.info("protectron_shutting_down")


app = FastAPI(
    title="Protectron Scoring",
    description="EU AI Act risk classification, requirement progress and certification grading",
    version=settings.app_version,
    lifespan=lifespan,
)

# CORS for local development
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"] if settings.debug else [],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Structured logging middleware
app.add_middleware(StructuredLoggingMiddleware)

# Domain errors map to 4xx; anything else is a 500
for exc_type in (ValueError, PermissionError, LookupError, Exception):
    app.add_exception_handler(exc_type, global_exception_handler)

# Register routers
app.include_router(health_router)
app.include_router(assessments_router)
app.include_router(requirements_router)
app.include_router(certifications_router)


def get_uptime() -> int:
    """Get application uptime in seconds."""
    if APP_START_TIME == 0.0:
        return 0
    return int(time.time() - APP_START_TIME)


def run() -> None:
    """Console entry point: serve the app with uvicorn."""
    import uvicorn

    uvicorn.run("protectron.main:app", host=settings.host, port=settings.port)
