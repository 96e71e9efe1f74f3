"""Main application entry point for the Aries Virgo service."""

import logging
from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import FastAPI, Request

from aries.router import router as aries_router
from config.settings import get_settings
from core.dependencies import close_solr_client, flush_posthog, shutdown_posthog
from core.logging import default_log_file, setup_logging
from core.sentry import init_sentry
from routers.health import router as health_router

load_dotenv()

settings = get_settings()

init_sentry(
    dsn=settings.sentry_dsn,
    environment="production" if settings.log_level != "DEBUG" else "development",
    release=settings.app_version,
)

setup_logging(level=settings.log_level, log_file=default_log_file(settings.log_level))

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifespan with proper startup and shutdown."""
    logger.info("===> Aries Virgo service starting up <===")
    logger.info(f"Start {settings.app_name} v{settings.app_version} on port {settings.port}")
    logger.info(f"Solr: {settings.solr_url}/{settings.solr_core}")

    yield

    logger.info("Shutting down application")
    shutdown_posthog()
    await close_solr_client()
    logger.info("All services shut down")


app = FastAPI(
    title=settings.app_name,
    description="Resolves external identifiers to Virgo catalog access, metadata and service URLs",
    version=settings.app_version,
    lifespan=lifespan,
)


@app.middleware("http")
async def posthog_flush_middleware(request: Request, call_next):
    """Flush PostHog events after each request to prevent data loss."""
    response = await call_next(request)
    flush_posthog()
    return response


app.include_router(health_router, prefix="", tags=["health"])
app.include_router(aries_router, prefix="/api", tags=["aries"])

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )
