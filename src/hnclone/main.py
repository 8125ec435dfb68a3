"""FastAPI application entry point."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import JSONResponse

from hnclone import __version__
from hnclone.api.dependencies import Container
from hnclone.api.v1.router import router as api_router
from hnclone.api.web.views import router as web_router
from hnclone.config import get_settings
from hnclone.scheduler.jobs import SchedulerService

settings = get_settings()

# Configure logging
logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler for startup/shutdown."""
    container: Container = app.state.container

    logger.info("Starting hnclone application...")
    logger.info(f"Environment: {settings.environment}")

    scheduler = None
    if settings.enable_scheduler:
        scheduler = SchedulerService(container.hooks)
        scheduler.start()

    yield

    if scheduler is not None:
        scheduler.shutdown()
    await container.client.close()
    logger.info("Shutting down hnclone application...")


def create_app(container: Container | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        container: Pre-wired services (defaults to a container built from
            settings)
    """
    docs_kwargs = {}
    if settings.is_production:
        docs_kwargs = {"docs_url": None, "redoc_url": None, "openapi_url": None}

    app = FastAPI(
        title="hnclone",
        description="A read-only Hacker News client",
        version=__version__,
        lifespan=lifespan,
        **docs_kwargs,
    )
    app.state.container = container or Container.build(settings)

    # Registered before the web router so /{category} does not shadow it
    @app.get("/health")
    async def health_check() -> JSONResponse:
        """Lightweight liveness check."""
        return JSONResponse({"status": "healthy"})

    # Include routers
    app.include_router(api_router)
    app.include_router(web_router)

    return app


# Create app instance
app = create_app()
