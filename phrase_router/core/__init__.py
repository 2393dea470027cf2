# Core infrastructure: exceptions, validation, logging and metrics

from .exceptions import (
    ErrorCode,
    TranslationEngineError,
    InvalidInputError,
    ProviderRateLimitedError,
    ProviderServerError,
    NetworkTimeoutError,
    ProviderUnauthorizedError,
    ProviderMalformedResponseError,
    EmptyTranslationError,
    TranslationCancelledError,
    UnknownTranslationError,
)

__all__ = [
    'ErrorCode',
    'TranslationEngineError',
    'InvalidInputError',
    'ProviderRateLimitedError',
    'ProviderServerError',
    'NetworkTimeoutError',
    'ProviderUnauthorizedError',
    'ProviderMalformedResponseError',
    'EmptyTranslationError',
    'TranslationCancelledError',
    'UnknownTranslationError',
]
