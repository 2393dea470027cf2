# Phrase matching and translation routing services

from typing import Optional

from .phrase_catalog import (
    PHRASE_CATALOG,
    CATEGORY_METADATA,
    get_catalog,
    phrases_by_category,
    catalog_stats,
)
from .phrase_index import PhraseIndex
from .similarity import edit_distance, similarity, match_score
from .fuzzy_matcher import FuzzyMatcher
from .translation_cache import TranslationCache, CacheSweeper
from .remote_client import (
    BaseRemoteTranslationClient,
    DeepSeekTranslationClient,
    RetryPolicy,
    RETRY_POLICIES,
)
from .translation_history_service import HistoryLog
from .translation_router import TranslationRouter
from .lang_detect import detect_language
from .romanizer import romanize_korean


# Factory functions for dependency injection
def create_translation_router(
    settings=None,
    client: Optional[BaseRemoteTranslationClient] = None,
    catalog=None
) -> TranslationRouter:
    """
    Factory function to build the router and its long-lived collaborators.

    Args:
        settings: Application settings (will use global settings if None)
        client: Optional remote client (DeepSeekTranslationClient if None)
        catalog: Optional phrase catalog (PHRASE_CATALOG if None)

    Returns:
        TranslationRouter wired with a built index, a fresh cache and a history log
    """
    from phrase_router.config.settings import get_settings

    settings = settings or get_settings()
    index = PhraseIndex.from_catalog(
        catalog if catalog is not None else PHRASE_CATALOG,
        min_bucket_size=settings.matcher.min_bucket_size,
    )

    return TranslationRouter(
        matcher=FuzzyMatcher(index),
        cache=TranslationCache(ttl_seconds=settings.cache.ttl_seconds),
        client=client or DeepSeekTranslationClient(settings.provider),
        history=HistoryLog(max_size=settings.history.max_size),
        offline_threshold=settings.matcher.offline_threshold,
        degraded_threshold=settings.matcher.degraded_threshold,
        max_text_length=settings.provider.max_text_length,
    )


__all__ = [
    'PHRASE_CATALOG',
    'CATEGORY_METADATA',
    'get_catalog',
    'phrases_by_category',
    'catalog_stats',
    'PhraseIndex',
    'edit_distance',
    'similarity',
    'match_score',
    'FuzzyMatcher',
    'TranslationCache',
    'CacheSweeper',
    'BaseRemoteTranslationClient',
    'DeepSeekTranslationClient',
    'RetryPolicy',
    'RETRY_POLICIES',
    'HistoryLog',
    'TranslationRouter',
    'detect_language',
    'romanize_korean',
    'create_translation_router',
]
