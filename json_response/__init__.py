"""Standardized JSON response envelopes for FastAPI/Starlette handlers."""

from json_response.core.exceptions import (
    AppException,
    ResponseBuildError,
    SerializationError,
    UnknownStatusCodeError,
)
from json_response.responses import (
    failure_response,
    failure_response_with_message,
    success_response,
    success_response_with_code,
)
from json_response.schemas.common import (
    STATUS_FAILED,
    STATUS_SUCCESS,
    FailureEnvelope,
    SuccessEnvelope,
)

__version__ = "0.1.0"

__all__ = [
    "AppException",
    "FailureEnvelope",
    "ResponseBuildError",
    "STATUS_FAILED",
    "STATUS_SUCCESS",
    "SerializationError",
    "SuccessEnvelope",
    "UnknownStatusCodeError",
    "failure_response",
    "failure_response_with_message",
    "success_response",
    "success_response_with_code",
]
