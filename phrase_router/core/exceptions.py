"""
Custom exceptions for the phrase router.

Only the remote translation client and input validation raise these; the
fuzzy matcher and the translation cache report absence as None.
"""

from typing import Optional, Dict, Any
from enum import Enum


class ErrorCode(str, Enum):
    """Standardized error codes for translation failures."""

    # Input errors
    INVALID_INPUT = "INVALID_INPUT"

    # Provider errors (retried once)
    PROVIDER_RATE_LIMITED = "PROVIDER_RATE_LIMITED"
    PROVIDER_SERVER_ERROR = "PROVIDER_SERVER_ERROR"
    NETWORK_TIMEOUT = "NETWORK_TIMEOUT"

    # Provider errors (never retried)
    PROVIDER_UNAUTHORIZED = "PROVIDER_UNAUTHORIZED"
    PROVIDER_MALFORMED_RESPONSE = "PROVIDER_MALFORMED_RESPONSE"
    EMPTY_TRANSLATION = "EMPTY_TRANSLATION"

    # Generic errors
    CANCELLED = "CANCELLED"
    UNKNOWN = "UNKNOWN"


class TranslationEngineError(Exception):
    """Base exception for the phrase router."""

    def __init__(
        self,
        message: str,
        error_code: ErrorCode,
        details: Optional[Dict[str, Any]] = None,
        status_code: int = 500
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        self.status_code = status_code

    def with_message(self, message: str) -> "TranslationEngineError":
        """Copy of this error with a different message but the same class and code."""
        clone = self.__class__.__new__(self.__class__)
        TranslationEngineError.__init__(
            clone,
            message=message,
            error_code=self.error_code,
            details=dict(self.details),
            status_code=self.status_code,
        )
        return clone


class InvalidInputError(TranslationEngineError):
    """Raised when the text is empty, oversized or the language pair is invalid."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            message=message,
            error_code=ErrorCode.INVALID_INPUT,
            details=details,
            status_code=400
        )


class ProviderRateLimitedError(TranslationEngineError):
    """Raised when the provider answers HTTP 429."""

    def __init__(self, message: str = "Too many requests, please try again later",
                 details: Optional[Dict[str, Any]] = None):
        super().__init__(
            message=message,
            error_code=ErrorCode.PROVIDER_RATE_LIMITED,
            details=details,
            status_code=429
        )


class ProviderServerError(TranslationEngineError):
    """Raised when the provider answers with a 5xx status."""

    def __init__(self, message: str = "Translation provider server error, please try again later",
                 details: Optional[Dict[str, Any]] = None):
        super().__init__(
            message=message,
            error_code=ErrorCode.PROVIDER_SERVER_ERROR,
            details=details,
            status_code=502
        )


class NetworkTimeoutError(TranslationEngineError):
    """Raised when the transport times out before the provider answers."""

    def __init__(self, timeout_seconds: float, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            message=f"Translation request timed out after {timeout_seconds} seconds",
            error_code=ErrorCode.NETWORK_TIMEOUT,
            details=details or {"timeout_seconds": timeout_seconds},
            status_code=504
        )


class ProviderUnauthorizedError(TranslationEngineError):
    """Raised when the API key is missing, invalid or lacks access."""

    def __init__(self, message: str = "API key is invalid or has no access",
                 details: Optional[Dict[str, Any]] = None):
        super().__init__(
            message=message,
            error_code=ErrorCode.PROVIDER_UNAUTHORIZED,
            details=details,
            status_code=502
        )


class ProviderMalformedResponseError(TranslationEngineError):
    """Raised when the provider response cannot be parsed."""

    def __init__(self, message: str = "Translation provider returned a malformed response",
                 details: Optional[Dict[str, Any]] = None):
        super().__init__(
            message=message,
            error_code=ErrorCode.PROVIDER_MALFORMED_RESPONSE,
            details=details,
            status_code=502
        )


class EmptyTranslationError(TranslationEngineError):
    """Raised when the provider returns no usable text."""

    def __init__(self, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            message="Translation result is empty",
            error_code=ErrorCode.EMPTY_TRANSLATION,
            details=details,
            status_code=502
        )


class TranslationCancelledError(TranslationEngineError):
    """Raised when an in-flight translation is cancelled by the caller."""

    def __init__(self, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            message="Translation was cancelled",
            error_code=ErrorCode.CANCELLED,
            details=details,
            status_code=499
        )


class UnknownTranslationError(TranslationEngineError):
    """Catch-all wrapping an unexpected failure message."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            message=f"Translation failed: {message}",
            error_code=ErrorCode.UNKNOWN,
            details=details,
            status_code=500
        )
