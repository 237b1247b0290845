"""V1 API router — aggregates all v1 endpoint routers."""

from fastapi import APIRouter

from link_uploader.presentation.api.v1.endpoints.health import router as health_router
from link_uploader.presentation.api.v1.endpoints.links import router as links_router
from link_uploader.presentation.api.v1.endpoints.users import router as users_router

router = APIRouter(prefix="/v1")
router.include_router(health_router)
router.include_router(links_router)
router.include_router(users_router)
