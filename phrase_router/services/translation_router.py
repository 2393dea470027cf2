"""
Translation router: offline phrase catalog first, remote provider second.

Routing for one request:
    1. validate and trim the input (auto-detect the source language if asked)
    2. fuzzy match against the phrase catalog        -> offline result
    3. look the text up in the translation cache     -> cached result
    4. call the remote provider, store in the cache  -> remote result
    5. on remote failure, retry the offline match at the degraded threshold
       -> offline result, or the remote error with connectivity guidance
"""

import asyncio
import logging
from collections import Counter
from typing import List, Optional

from phrase_router.core.exceptions import (
    TranslationEngineError,
    TranslationCancelledError,
    UnknownTranslationError,
)
from phrase_router.core.metrics import increment, record_latency
from phrase_router.core.validation import (
    DEFAULT_MAX_TEXT_LENGTH,
    validate_language_pair,
    validate_text_length,
)
from phrase_router.models.internal_models import (
    BatchOutcome,
    Language,
    MatchResult,
    TranslationRequest,
    TranslationResult,
)
from phrase_router.services.fuzzy_matcher import FuzzyMatcher
from phrase_router.services.lang_detect import detect_language
from phrase_router.services.remote_client import BaseRemoteTranslationClient
from phrase_router.services.romanizer import romanize_korean
from phrase_router.services.translation_cache import TranslationCache
from phrase_router.services.translation_history_service import HistoryLog

logger = logging.getLogger(__name__)

OFFLINE_MATCH_THRESHOLD = 0.8
DEGRADED_MATCH_THRESHOLD = 0.6
CONNECTIVITY_GUIDANCE = "Please check your network connection or try again later."


class TranslationRouter:
    """
    Top-level translation entry point.

    The phrase matcher and the cache are long-lived objects shared by every
    request; the router itself keeps only counters.
    """

    def __init__(
        self,
        matcher: FuzzyMatcher,
        cache: TranslationCache,
        client: BaseRemoteTranslationClient,
        history: Optional[HistoryLog] = None,
        offline_threshold: float = OFFLINE_MATCH_THRESHOLD,
        degraded_threshold: float = DEGRADED_MATCH_THRESHOLD,
        max_text_length: int = DEFAULT_MAX_TEXT_LENGTH
    ):
        """
        Initialize the router.

        Args:
            matcher: Fuzzy matcher over the built phrase index
            cache: Translation cache for remote results
            client: Remote translation client
            history: Optional sink receiving every resolved translation
            offline_threshold: Minimum match score for the offline lookup
            degraded_threshold: Minimum match score for the post-failure offline retry
            max_text_length: Maximum accepted input length
        """
        self.matcher = matcher
        self.cache = cache
        self.client = client
        self.history = history
        self.offline_threshold = offline_threshold
        self.degraded_threshold = degraded_threshold
        self.max_text_length = max_text_length
        self._paths = Counter()

    async def translate(
        self,
        text: str,
        source_lang: Language,
        target_lang: Language,
        auto_detect: bool = False
    ) -> TranslationResult:
        """
        Translate text, preferring the offline phrase catalog.

        Args:
            text: Text to translate
            source_lang: Language of the text (ignored when auto_detect is set)
            target_lang: Language to translate into (ignored when auto_detect is set)
            auto_detect: Detect the source language from the script and
                translate into the other language

        Returns:
            TranslationResult tagged offline or online

        Raises:
            InvalidInputError: If the text is empty, too long or the pair is invalid
            TranslationCancelledError: If the call is cancelled during the remote request
            TranslationEngineError: If the remote provider fails and no degraded match exists
        """
        request = self._prepare_request(text, source_lang, target_lang, auto_detect)

        with record_latency("translation.route"):
            result = await self._route(request)

        if self.history is not None:
            self.history.record(request.text, result)
        return result

    async def translate_batch(
        self,
        texts: List[str],
        source_lang: Language,
        target_lang: Language,
        auto_detect: bool = False
    ) -> List[TranslationResult]:
        """
        Translate several texts independently, skipping failures.

        Returns:
            Results for the texts that translated, in input order

        Raises:
            TranslationCancelledError: If the batch is cancelled; remaining items are not attempted
        """
        outcome = await self.translate_batch_detailed(texts, source_lang, target_lang, auto_detect)
        return [result for _, result in outcome.results]

    async def translate_batch_detailed(
        self,
        texts: List[str],
        source_lang: Language,
        target_lang: Language,
        auto_detect: bool = False
    ) -> BatchOutcome:
        """Translate several texts, keeping each result and failure with its input index."""
        outcome = BatchOutcome()
        for i, text in enumerate(texts):
            try:
                result = await self.translate(text, source_lang, target_lang, auto_detect)
            except TranslationCancelledError:
                logger.info(f"Batch translation cancelled at item {i}")
                raise
            except TranslationEngineError as e:
                logger.error(f"Batch translation failed for item {i}, skipping: {e.message}")
                outcome.failures.append((i, e))
                continue
            outcome.results.append((i, result))

        logger.info(f"Batch translation completed: {len(outcome.results)}/{len(texts)} successful")
        return outcome

    def get_stats(self) -> dict:
        return {
            "offline": self._paths["offline"],
            "cached": self._paths["cached"],
            "remote": self._paths["remote"],
            "degraded": self._paths["degraded"],
            "failed": self._paths["failed"],
        }

    def _prepare_request(
        self,
        text: str,
        source_lang: Language,
        target_lang: Language,
        auto_detect: bool
    ) -> TranslationRequest:
        trimmed = validate_text_length(text, self.max_text_length)

        if auto_detect:
            source_lang = detect_language(trimmed)
            target_lang = source_lang.other
            logger.debug(f"Auto-detected source language: {source_lang.value}")
        else:
            source_lang = Language(source_lang)
            target_lang = Language(target_lang)
            validate_language_pair(source_lang, target_lang)

        return TranslationRequest(
            text=trimmed,
            source_language=source_lang,
            target_language=target_lang,
            auto_detect=auto_detect,
        )

    async def _route(self, request: TranslationRequest) -> TranslationResult:
        text = request.text
        src = request.source_language
        dst = request.target_language

        match = self.matcher.match(text, src, self.offline_threshold)
        if match is not None:
            logger.debug(f"Offline match {match.phrase.id} ({match.similarity:.3f})")
            return self._offline_result(match, request, "offline")

        cached = self.cache.get(text, src, dst)
        if cached is not None:
            logger.debug("Serving translation from cache")
            self._count("cached")
            return self._online_result(cached, request)

        try:
            with record_latency("translation.remote"):
                translated = await self.client.translate(text, src, dst)
        except asyncio.CancelledError:
            logger.info("Translation cancelled during remote call")
            self._count("failed")
            raise TranslationCancelledError(details={"source_language": src.value})
        except TranslationEngineError as error:
            return self._degraded_fallback(request, error)
        except Exception as e:
            logger.error(f"Unexpected remote client error ({type(e).__name__}): {e}")
            return self._degraded_fallback(request, UnknownTranslationError(str(e)))

        self.cache.put(text, src, dst, translated)
        self._count("remote")
        return self._online_result(translated, request)

    def _online_result(self, translated: str, request: TranslationRequest) -> TranslationResult:
        dst = request.target_language
        romanization = romanize_korean(translated) if dst is Language.KOREAN else None
        return TranslationResult(
            translated_text=translated,
            is_offline=False,
            source_language=request.source_language,
            target_language=dst,
            romanization=romanization,
        )

    def _degraded_fallback(
        self, request: TranslationRequest, error: TranslationEngineError
    ) -> TranslationResult:
        match = self.matcher.match(request.text, request.source_language, self.degraded_threshold)
        if match is not None:
            logger.warning(
                f"Remote translation failed ({error.error_code.value}), "
                f"falling back to offline phrase {match.phrase.id}"
            )
            return self._offline_result(match, request, "degraded")

        self._count("failed")
        logger.error(f"Translation failed ({error.error_code.value}): {error.message}")
        raise error.with_message(f"{error.message}. {CONNECTIVITY_GUIDANCE}") from error

    def _offline_result(
        self, match: MatchResult, request: TranslationRequest, path: str
    ) -> TranslationResult:
        self._count(path)
        dst = request.target_language
        return TranslationResult(
            translated_text=match.phrase.text_for(dst),
            is_offline=True,
            source_language=request.source_language,
            target_language=dst,
            romanization=match.phrase.pronunciation_for(dst),
            matched_phrase=match.phrase,
            similarity=match.similarity,
        )

    def _count(self, path: str) -> None:
        self._paths[path] += 1
        increment(f"translation.{path}")
