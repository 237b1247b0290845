"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager
from collections.abc import AsyncIterator

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from link_uploader.config import get_settings
from link_uploader.domain.exceptions import StorageError
from link_uploader.infrastructure.database import Base, engine
from link_uploader.infrastructure.dependencies import get_enrichment_scheduler
from link_uploader.infrastructure.logging.log_config import setup_logging
from link_uploader.presentation.api.router import router as api_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan — create tables, then drain enrichment on shutdown."""
    setup_logging()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database schema ready")

    yield

    # Shutdown
    await get_enrichment_scheduler().shutdown()
    await engine.dispose()


async def _storage_error_handler(request: Request, exc: StorageError) -> JSONResponse:
    """Map persistence failures to a generic 500 without leaking driver details."""
    logger.error("Storage error on %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": f"Storage failure during {exc.operation}"},
    )


def create_app() -> FastAPI:
    """Factory function that builds and configures the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(StorageError, _storage_error_handler)
    app.include_router(api_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "link_uploader.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
    )
