"""
Fallback handlers for errors raised by the response helpers.

When a helper fails, no JSON envelope could be produced, so the fallback
is a plain-text 500 response. Registering these handlers means endpoints
can return the helpers' result directly without try/except blocks.
"""

from fastapi import Request, status
from fastapi.responses import PlainTextResponse

from json_response.core.exceptions import (
    AppException,
    ResponseBuildError,
    SerializationError,
    UnknownStatusCodeError,
)
from json_response.utils.logger import get_logger

logger = get_logger(__name__)

FALLBACK_BODY = "Internal Server Error"


def _fallback() -> PlainTextResponse:
    return PlainTextResponse(FALLBACK_BODY, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)


async def serialization_exception_handler(
        request: Request, exc: SerializationError
) -> PlainTextResponse:
    """
    Handle SerializationError (response data had no JSON form).
    Maps to a plain-text 500.
    """
    logger.error(
        "Could not serialize response for %s %s: %s",
        request.method,
        request.url.path,
        exc.message,
        exc_info=exc,
    )
    return _fallback()


async def response_build_exception_handler(
        request: Request, exc: ResponseBuildError
) -> PlainTextResponse:
    """
    Handle ResponseBuildError (response object could not be constructed).
    Maps to a plain-text 500.
    """
    logger.error(
        "Could not build response for %s %s: %s",
        request.method,
        request.url.path,
        exc.message,
        exc_info=exc,
    )
    return _fallback()


async def unknown_status_exception_handler(
        request: Request, exc: UnknownStatusCodeError
) -> PlainTextResponse:
    """
    Handle UnknownStatusCodeError.

    This is a programming error in the endpoint: failure responses must use
    a registered status code.
    """
    logger.critical(
        "Endpoint %s %s used unregistered status code %r",
        request.method,
        request.url.path,
        exc.code,
    )
    return _fallback()


async def app_exception_handler(request: Request, exc: AppException) -> PlainTextResponse:
    """Fallback handler for any AppException not caught by a more specific handler."""
    logger.error("Unhandled %s: %s", type(exc).__name__, exc.message, exc_info=exc)
    return _fallback()


# Register all handlers at once in main.py
EXCEPTION_HANDLERS = {
    SerializationError: serialization_exception_handler,
    ResponseBuildError: response_build_exception_handler,
    UnknownStatusCodeError: unknown_status_exception_handler,
    AppException: app_exception_handler,
}
