"""
Health check API endpoint.

Reports whether the phrase index is loaded and the remote provider is
configured; the service stays usable offline without a provider key.
"""

from fastapi import APIRouter, Request
import logging
import time
from datetime import datetime, timezone

from phrase_router.config.settings import get_settings
from phrase_router.core.error_handlers import error_handler

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])

# Application start time for uptime calculation
_app_start_time = time.time()


@router.get("/health", summary="Basic health check")
async def health_check(request: Request):
    settings = get_settings()
    engine = getattr(request.app.state, "translation_router", None)

    if engine is None:
        return {
            "status": "unhealthy",
            "message": "Translation router not initialized",
            "version": settings.app_version,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }

    validate = getattr(engine.client, "validate_config", None)
    provider = validate() if validate else {"is_valid": True, "error": None}
    phrase_count = len(engine.matcher.index)

    # without a provider only offline matching works
    status = "healthy" if provider["is_valid"] and phrase_count else "degraded"
    if status != "healthy":
        logger.warning(f"Health check degraded: provider={provider}, phrases={phrase_count}")

    return {
        "status": status,
        "version": settings.app_version,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "uptime_seconds": round(time.time() - _app_start_time, 1),
        "details": {
            "phrase_index": {"entries": phrase_count},
            "provider": provider,
            "cache": {"size": len(engine.cache)},
            "errors": error_handler.get_error_statistics(),
        },
    }
