"""
Value types for the phrase router.
"""

from .internal_models import (
    Language,
    LANGUAGE_NAMES,
    PhraseCategory,
    PhraseEntry,
    MatchResult,
    CacheEntry,
    TranslationRequest,
    TranslationResult,
    HistoryRecord,
    BatchOutcome,
)

__all__ = [
    "Language",
    "LANGUAGE_NAMES",
    "PhraseCategory",
    "PhraseEntry",
    "MatchResult",
    "CacheEntry",
    "TranslationRequest",
    "TranslationResult",
    "HistoryRecord",
    "BatchOutcome",
]
