"""
Envelope builders.

Both builders are pure: they return a fresh, frozen envelope and never
touch the caller's data.
"""

from typing import Any, Optional

from json_response.core.status import StatusCode, canonical_reason
from json_response.schemas.common import FailureEnvelope, SuccessEnvelope


def build_success(code: StatusCode, data: Any) -> SuccessEnvelope:
    """
    Wrap ``data`` in a success envelope.

    ``code`` is not validated here; the assembler rejects codes that cannot
    appear on a status line. ``data`` is held by reference and serialized
    later, so it has to stay JSON-serializable until then.
    """
    return SuccessEnvelope(code=int(code), data=data)


def build_failure(code: StatusCode, message: Optional[str] = None) -> FailureEnvelope:
    """
    Build a failure envelope carrying the canonical reason phrase for ``code``.

    Args:
        code: A status code from the standard registry
        message: Optional detail appended as "<reason>: <message>"

    Raises:
        UnknownStatusCodeError: if ``code`` has no canonical reason phrase.

    Example:
        >>> build_failure(500, "db down").message
        'Internal Server Error: db down'
    """
    reason = canonical_reason(code)
    if message is not None:
        reason = f"{reason}: {message}"
    return FailureEnvelope(code=int(code), message=reason)
