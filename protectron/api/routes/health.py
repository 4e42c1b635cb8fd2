"""Health and readiness endpoints."""

from fastapi import APIRouter

from protectron.config import settings

router = APIRouter(tags=["health"])


@router.get("/health")
async def health() -> dict:
    from protectron.main import get_uptime

    return {
        "status": "healthy",
        "version": settings.app_version,
        "uptime_seconds": get_uptime(),
    }


@router.get("/ready")
async def ready() -> dict:
    # Scoring is pure and in-process; nothing external to wait for
    return {"status": "ready"}
