"""
Error handlers for the FastAPI application.

Translation failures are rendered in the {status, data, error} envelope used
by every endpoint.
"""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging
from typing import Dict

from phrase_router.core.exceptions import ErrorCode, TranslationEngineError

logger = logging.getLogger(__name__)


class ErrorHandler:
    """
    Maps engine exceptions to envelope responses and counts them by code.
    """

    def __init__(self):
        self.error_counts: Dict[str, int] = {}

    async def handle_translation_engine_error(
        self,
        request: Request,
        exc: TranslationEngineError
    ) -> JSONResponse:
        """
        Handle TranslationEngineError with logging.

        Args:
            request: FastAPI request object
            exc: TranslationEngineError instance

        Returns:
            JSONResponse with the error envelope
        """
        logger.error(
            f"TranslationEngineError on {request.url.path}: {exc.message}",
            extra={
                'error_code': exc.error_code.value,
                'status_code': exc.status_code,
                'request_path': request.url.path,
                'request_method': request.method,
            }
        )
        self._track_error(exc.error_code.value)

        return self._create_error_response(
            error_code=exc.error_code.value,
            message=exc.message,
            status_code=exc.status_code
        )

    async def handle_validation_error(
        self,
        request: Request,
        exc: RequestValidationError
    ) -> JSONResponse:
        """Handle request body validation failures."""
        logger.warning(f"Validation error on {request.url.path}: {exc.errors()}")
        self._track_error(ErrorCode.INVALID_INPUT.value)

        first = exc.errors()[0] if exc.errors() else {}
        location = ".".join(str(part) for part in first.get("loc", ()))
        message = f"{location}: {first.get('msg', 'invalid request')}" if location else "invalid request"
        return self._create_error_response(
            error_code=ErrorCode.INVALID_INPUT.value,
            message=message,
            status_code=422
        )

    async def handle_http_exception(
        self,
        request: Request,
        exc: StarletteHTTPException
    ) -> JSONResponse:
        self._track_error(f"HTTP_{exc.status_code}")
        return self._create_error_response(
            error_code=f"HTTP_{exc.status_code}",
            message=str(exc.detail),
            status_code=exc.status_code
        )

    def get_error_statistics(self) -> Dict[str, int]:
        return dict(self.error_counts)

    def _track_error(self, error_code: str) -> None:
        self.error_counts[error_code] = self.error_counts.get(error_code, 0) + 1

    def _create_error_response(
        self,
        error_code: str,
        message: str,
        status_code: int
    ) -> JSONResponse:
        return JSONResponse(
            status_code=status_code,
            content={
                "status": "error",
                "data": None,
                "error": f"{error_code}: {message}",
            },
        )


error_handler = ErrorHandler()


def setup_error_handlers(app: FastAPI) -> None:
    """Register the envelope error handlers on the application."""
    app.add_exception_handler(TranslationEngineError, error_handler.handle_translation_engine_error)
    app.add_exception_handler(RequestValidationError, error_handler.handle_validation_error)
    app.add_exception_handler(StarletteHTTPException, error_handler.handle_http_exception)
    logger.info("Error handlers configured")
