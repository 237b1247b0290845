"""Health check endpoint — no dependencies, always available."""

from fastapi import APIRouter

from link_uploader.config import get_settings

router = APIRouter(tags=["Health"])


@router.get("/health")
async def health_check() -> dict:
    """Returns the current application health status."""
    settings = get_settings()
    return {
        "status": "healthy",
        "app": settings.app_title,
        "version": settings.app_version,
        "environment": settings.app_env,
    }
