"""
FastAPI application setup.

The phrase index, translation cache, remote client and history log are built
once in the lifespan and shared by every request through app.state.
"""

from fastapi import FastAPI, Request
import logging
import time
import uuid
from contextlib import asynccontextmanager
from typing import Optional

from phrase_router.config.settings import Settings, get_settings
from phrase_router.core.error_handlers import setup_error_handlers
from phrase_router.core.logging import configure_logging
from phrase_router.services import create_translation_router
from phrase_router.services.remote_client import BaseRemoteTranslationClient
from phrase_router.services.translation_cache import CacheSweeper

logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    client: Optional[BaseRemoteTranslationClient] = None
) -> FastAPI:
    """
    Create and configure FastAPI application.

    Args:
        settings: Application settings (will use global settings if None)
        client: Optional remote translation client, mainly for tests

    Returns:
        FastAPI: Configured application instance
    """
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        configure_logging(settings.log_level.value, settings.log_format)
        logger.info(f"Starting {settings.app_name} v{settings.app_version}")

        engine = create_translation_router(settings, client=client)
        app.state.translation_router = engine

        sweeper = None
        if settings.cache.sweep_interval_seconds:
            sweeper = CacheSweeper(engine.cache, settings.cache.sweep_interval_seconds)
            sweeper.start()

        logger.info("Application startup complete")
        try:
            yield
        finally:
            logger.info("Shutting down application")
            if sweeper is not None:
                await sweeper.stop()
            await engine.client.aclose()
            logger.info("Application shutdown complete")

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        debug=settings.debug,
        lifespan=lifespan
    )

    setup_error_handlers(app)

    @app.middleware("http")
    async def logging_middleware(request: Request, call_next):
        """Log requests and responses with timing information."""
        request_id = str(uuid.uuid4())
        request.state.request_id = request_id
        start_time = time.time()

        response = await call_next(request)

        processing_time = (time.time() - start_time) * 1000
        logger.info(
            f"{request.method} {request.url.path} -> {response.status_code} ({processing_time:.2f}ms)",
            extra={
                'request_id': request_id,
                'status_code': response.status_code,
                'processing_time_ms': processing_time
            }
        )
        return response

    from phrase_router.api import health_router, phrasebook_router, translation_router
    app.include_router(health_router)
    app.include_router(translation_router)
    app.include_router(phrasebook_router)

    return app


# Create application instance
app = create_app()
