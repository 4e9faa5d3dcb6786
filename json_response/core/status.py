from http import HTTPStatus
from typing import Union

from json_response.core.exceptions import UnknownStatusCodeError

StatusCode = Union[int, HTTPStatus]


def resolve_status(code: StatusCode) -> HTTPStatus:
    """
    Look up a status code in the standard registry.

    Raises:
        UnknownStatusCodeError: if the code is not a registered HTTP status.
    """
    if isinstance(code, bool) or not isinstance(code, int):
        raise UnknownStatusCodeError(code)
    try:
        return HTTPStatus(code)
    except ValueError:
        raise UnknownStatusCodeError(code) from None


def canonical_reason(code: StatusCode) -> str:
    """Return the canonical reason phrase for ``code`` (404 -> "Not Found")."""
    return resolve_status(code).phrase
