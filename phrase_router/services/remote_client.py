"""
Remote translation client for a DeepSeek-compatible chat completions API.

The client is a pure request/response boundary: it knows nothing about the
phrase catalog or the translation cache. Failures are classified into the
ErrorCode taxonomy and retried at most once for rate limiting, server errors
and timeouts. When the retry also fails, the original classified error is
raised so callers always see a stable error class.
"""

import asyncio
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Awaitable, Callable, Dict, Optional

import httpx

from phrase_router.config.settings import ProviderSettings, get_settings
from phrase_router.core.exceptions import (
    ErrorCode,
    TranslationEngineError,
    ProviderRateLimitedError,
    ProviderServerError,
    NetworkTimeoutError,
    ProviderUnauthorizedError,
    ProviderMalformedResponseError,
    EmptyTranslationError,
    UnknownTranslationError,
)
from phrase_router.core.validation import validate_text_length
from phrase_router.models.internal_models import Language

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = (
    "You are a professional Chinese-Korean translation assistant.\n"
    "Rules:\n"
    "- Return only the translation, with no explanation\n"
    "- Keep the tone and level of politeness of the original\n"
    "- For Chinese to Korean: use natural Korean expressions\n"
    "- For Korean to Chinese: use idiomatic Chinese expressions"
)


@dataclass(frozen=True)
class RetryPolicy:
    """How long to wait before retrying an error class, and how many times"""
    delay_seconds: float
    max_retries: int


NO_RETRY = RetryPolicy(delay_seconds=0.0, max_retries=0)

# Every ErrorCode has an entry.
RETRY_POLICIES: Dict[ErrorCode, RetryPolicy] = {
    ErrorCode.INVALID_INPUT: NO_RETRY,
    ErrorCode.PROVIDER_RATE_LIMITED: RetryPolicy(delay_seconds=2.0, max_retries=1),
    ErrorCode.PROVIDER_SERVER_ERROR: RetryPolicy(delay_seconds=1.0, max_retries=1),
    ErrorCode.NETWORK_TIMEOUT: RetryPolicy(delay_seconds=3.0, max_retries=1),
    ErrorCode.PROVIDER_UNAUTHORIZED: NO_RETRY,
    ErrorCode.PROVIDER_MALFORMED_RESPONSE: NO_RETRY,
    ErrorCode.EMPTY_TRANSLATION: NO_RETRY,
    ErrorCode.CANCELLED: NO_RETRY,
    ErrorCode.UNKNOWN: NO_RETRY,
}


class BaseRemoteTranslationClient(ABC):
    """Abstract base class for remote translation providers"""

    @abstractmethod
    async def translate(self, text: str, source_lang: Language, target_lang: Language) -> str:
        """Translate text, raising TranslationEngineError on failure"""
        pass

    async def aclose(self) -> None:
        """Release any transport resources"""
        pass


class DeepSeekTranslationClient(BaseRemoteTranslationClient):
    """
    Chat-completions translation client with per-error-class retry.
    """

    def __init__(
        self,
        settings: Optional[ProviderSettings] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep
    ):
        """
        Initialize the client.

        Args:
            settings: Provider settings (optional, uses global settings if not provided)
            transport: Custom httpx transport, e.g. httpx.MockTransport in tests
            sleep: Coroutine used to wait between attempts
        """
        self.settings = settings or get_settings().provider
        self._sleep = sleep
        self._client = httpx.AsyncClient(
            base_url=self.settings.base_url,
            timeout=self.settings.timeout_seconds,
            transport=transport,
        )
        self.attempts = 0

        if not self.settings.api_key:
            logger.warning(
                "Translation provider API key not configured. "
                "Set PROVIDER_API_KEY in .env file."
            )

    def validate_config(self) -> dict:
        """Check that an API key is configured and looks like a DeepSeek key."""
        api_key = self.settings.api_key
        if not api_key:
            return {
                "is_valid": False,
                "error": "Translation provider API key not configured. Set PROVIDER_API_KEY.",
            }
        if not api_key.startswith("sk-"):
            return {
                "is_valid": False,
                "error": "Translation provider API key has an invalid format (expected sk- prefix)",
            }
        return {"is_valid": True, "error": None}

    async def translate(self, text: str, source_lang: Language, target_lang: Language) -> str:
        """
        Translate text through the provider.

        Args:
            text: Text to translate (non-empty, at most max_text_length characters)
            source_lang: Language of the text
            target_lang: Language to translate into

        Returns:
            The translated text

        Raises:
            TranslationEngineError: Classified failure, after at most one retry
        """
        validate_text_length(text, self.settings.max_text_length)

        try:
            return await self._request_translation(text, source_lang, target_lang)
        except TranslationEngineError as error:
            policy = RETRY_POLICIES[error.error_code]
            if policy.max_retries == 0:
                raise

            for retry in range(1, policy.max_retries + 1):
                logger.warning(
                    f"Translation request failed ({error.error_code.value}), "
                    f"retrying in {policy.delay_seconds}s"
                )
                await self._sleep(policy.delay_seconds)
                try:
                    return await self._request_translation(text, source_lang, target_lang)
                except TranslationEngineError as retry_error:
                    logger.error(
                        f"Retry {retry} failed ({retry_error.error_code.value}): {retry_error.message}"
                    )
            raise error

    def build_messages(self, text: str, source_lang: Language, target_lang: Language) -> list:
        return [
            {"role": "system", "content": SYSTEM_PROMPT},
            {"role": "user", "content": f"Translate into {Language(target_lang).display_name}: {text}"},
        ]

    async def _request_translation(
        self, text: str, source_lang: Language, target_lang: Language
    ) -> str:
        if not self.settings.api_key:
            raise ProviderUnauthorizedError(
                "Translation provider API key not configured. Set PROVIDER_API_KEY."
            )

        payload = {
            "model": self.settings.model,
            "messages": self.build_messages(text, source_lang, target_lang),
            "temperature": self.settings.temperature,
            "max_tokens": self.settings.max_tokens,
        }
        headers = {"Authorization": f"Bearer {self.settings.api_key}"}

        self.attempts += 1
        try:
            response = await self._client.post("/chat/completions", json=payload, headers=headers)
        except httpx.TimeoutException:
            raise NetworkTimeoutError(self.settings.timeout_seconds)
        except httpx.HTTPError as e:
            raise UnknownTranslationError(
                f"translation request failed, check the network connection ({e})"
            )

        if response.status_code != 200:
            raise self._classify_status(response)

        try:
            data = response.json()
        except ValueError:
            raise ProviderMalformedResponseError(details={"body": response.text[:200]})

        choices = data.get("choices") if isinstance(data, dict) else None
        if not isinstance(choices, list):
            raise ProviderMalformedResponseError(details={"reason": "missing choices"})
        if not choices:
            raise EmptyTranslationError()

        try:
            content = choices[0]["message"]["content"]
        except (KeyError, TypeError):
            raise ProviderMalformedResponseError(details={"reason": "missing message content"})

        if not isinstance(content, str) or not content.strip():
            raise EmptyTranslationError()

        return content.strip()

    def _classify_status(self, response: httpx.Response) -> TranslationEngineError:
        status = response.status_code
        provider_message = _provider_error_message(response)
        details = {"status_code": status}

        if status == 429:
            return ProviderRateLimitedError(details=details)
        if status in (401, 403):
            return ProviderUnauthorizedError(details=details)
        if status == 503:
            return ProviderServerError(
                "Translation provider is temporarily unavailable, please try again later",
                details=details,
            )
        if status >= 500:
            return ProviderServerError(details=details)
        return UnknownTranslationError(f"({status}) {provider_message}", details=details)

    async def aclose(self) -> None:
        await self._client.aclose()


def _provider_error_message(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return response.text[:200]
    if isinstance(body, dict) and isinstance(body.get("error"), dict):
        return str(body["error"].get("message", ""))
    return str(body)[:200]
