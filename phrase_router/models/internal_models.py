"""
Internal data models and enums for the phrase router.

This module contains the value types shared by the matcher, the cache, the
remote client and the router: catalog entries, match results, cache entries,
translation requests/results and history records.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple
from enum import Enum
import time
import uuid

from phrase_router.core.exceptions import TranslationEngineError


class Language(str, Enum):
    """The two languages the engine routes between"""
    CHINESE = "zh"
    KOREAN = "ko"

    @property
    def other(self) -> "Language":
        return Language.KOREAN if self is Language.CHINESE else Language.CHINESE

    @property
    def display_name(self) -> str:
        return LANGUAGE_NAMES[self]


LANGUAGE_NAMES = {
    Language.CHINESE: "Chinese",
    Language.KOREAN: "Korean",
}


class PhraseCategory(str, Enum):
    """Closed set of catalog categories"""
    RESTAURANT = "restaurant"
    SHOPPING = "shopping"
    TRANSPORTATION = "transportation"
    EMERGENCY = "emergency"
    ACCOMMODATION = "accommodation"
    GREETING = "greeting"


@dataclass(frozen=True)
class PhraseEntry:
    """A curated bilingual phrase. primary_text is Chinese, secondary_text Korean."""
    id: str
    primary_text: str
    secondary_text: str
    secondary_pronunciation: str
    category: PhraseCategory

    def text_for(self, language: Language) -> str:
        """Get the field holding this phrase in the given language"""
        if language is Language.CHINESE:
            return self.primary_text
        return self.secondary_text

    def pronunciation_for(self, language: Language) -> Optional[str]:
        """Romanization is only catalogued for the Korean field"""
        if language is Language.KOREAN and self.secondary_pronunciation:
            return self.secondary_pronunciation
        return None


@dataclass(frozen=True)
class MatchResult:
    """Best catalog match for one fuzzy-matching call"""
    phrase: PhraseEntry
    similarity: float
    matched_lang: Language

    def __post_init__(self):
        if not 0.0 <= self.similarity <= 1.0:
            raise ValueError("Similarity must be between 0.0 and 1.0")


@dataclass
class CacheEntry:
    """A remote translation held by the translation cache"""
    translated_text: str
    created_at: float

    def is_expired(self, now: float, ttl_seconds: float) -> bool:
        return now - self.created_at > ttl_seconds


@dataclass(frozen=True)
class TranslationRequest:
    text: str
    source_language: Language
    target_language: Language
    auto_detect: bool = False


@dataclass
class TranslationResult:
    """
    Outcome of one routed translation.

    is_offline=True means the text came from the phrase catalog; in that case
    matched_phrase is always set and romanization (if any) is the catalog's.
    Online results into Korean carry a romanization generated from the translation.
    """
    translated_text: str
    is_offline: bool
    source_language: Language
    target_language: Language
    romanization: Optional[str] = None
    matched_phrase: Optional[PhraseEntry] = None
    similarity: Optional[float] = None

    def __post_init__(self):
        if self.is_offline and self.matched_phrase is None:
            raise ValueError("Offline results must reference the matched phrase")


@dataclass
class HistoryRecord:
    """One resolved translation kept for display"""
    source_text: str
    target_text: str
    source_language: Language
    target_language: Language
    is_offline: bool
    romanization: Optional[str] = None
    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    timestamp: float = field(default_factory=time.time)


@dataclass
class BatchOutcome:
    """Per-item outcome of a batch translation, keyed by input position"""
    results: List[Tuple[int, TranslationResult]] = field(default_factory=list)
    failures: List[Tuple[int, TranslationEngineError]] = field(default_factory=list)
