"""
Fuzzy matching of free-form input against the phrase catalog.
"""
import logging
from typing import List, Optional

from phrase_router.models.internal_models import Language, MatchResult
from phrase_router.services.phrase_index import PhraseIndex
from phrase_router.services.similarity import match_score

logger = logging.getLogger(__name__)

DEFAULT_THRESHOLD = 0.8
RELAXATION_FACTOR = 0.8
RELAXATION_FLOOR = 0.5
MAX_PASSES = 2
SUGGESTION_MIN_SCORE = 0.3


class FuzzyMatcher:
    """
    Best-match search over a built PhraseIndex.

    Matching is a pure function of (index, input, language, threshold); the
    matcher keeps no per-call state and may be shared between requests.
    """

    def __init__(self, index: PhraseIndex):
        self.index = index

    def match(
        self,
        input_text: str,
        source_lang: Language,
        threshold: float = DEFAULT_THRESHOLD
    ) -> Optional[MatchResult]:
        """
        Find the single best catalog entry for input_text.

        When nothing reaches the threshold and the threshold is above 0.5, one
        more pass runs at threshold * 0.8. Ties keep the first candidate in
        catalog order.

        Args:
            input_text: Raw user input
            source_lang: Language the input is written in
            threshold: Minimum score to accept

        Returns:
            MatchResult or None when no candidate qualifies
        """
        if not input_text or not input_text.strip():
            return None

        trimmed = input_text.strip()
        candidates = self.index.candidates_for(source_lang, trimmed)

        current_threshold = threshold
        for _ in range(MAX_PASSES):
            best = None
            best_score = -1.0
            for phrase in candidates:
                score = match_score(trimmed, phrase.text_for(source_lang))
                if score >= current_threshold and score > best_score:
                    best = phrase
                    best_score = score

            if best is not None:
                return MatchResult(phrase=best, similarity=best_score, matched_lang=source_lang)

            if current_threshold <= RELAXATION_FLOOR:
                break
            current_threshold = current_threshold * RELAXATION_FACTOR
            logger.debug(
                f"No match at threshold {threshold}, relaxing to {current_threshold:.3f}"
            )

        return None

    def match_many(
        self,
        inputs: List[str],
        source_lang: Language,
        threshold: float = DEFAULT_THRESHOLD
    ) -> List[Optional[MatchResult]]:
        return [self.match(text, source_lang, threshold) for text in inputs]

    def find_similar(
        self,
        input_text: str,
        source_lang: Language,
        limit: int = 5
    ) -> List[MatchResult]:
        """
        Rank catalog entries resembling input_text, for suggestions.

        Args:
            input_text: Raw user input
            source_lang: Language the input is written in
            limit: Maximum number of results

        Returns:
            Entries scoring above 0.3, best first
        """
        if not input_text or not input_text.strip():
            return []

        trimmed = input_text.strip()
        matches = []
        for phrase in self.index.all_entries():
            score = match_score(trimmed, phrase.text_for(source_lang))
            if score > SUGGESTION_MIN_SCORE:
                matches.append(MatchResult(phrase=phrase, similarity=score, matched_lang=source_lang))

        # sorted() is stable, so equal scores keep catalog order
        matches = sorted(matches, key=lambda m: m.similarity, reverse=True)
        return matches[:limit]
