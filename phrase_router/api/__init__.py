# API endpoints and routers

from .translation_endpoints import router as translation_router
from .phrasebook_endpoints import router as phrasebook_router
from .health_endpoints import router as health_router

__all__ = [
    "translation_router",
    "phrasebook_router",
    "health_router",
]
