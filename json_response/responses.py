"""
Public helpers for request handlers.

Success responses have the form::

    {"status": "success", "code": <status_code>, "data": <data>}

Failure responses have the form::

    {"status": "failed", "code": <status_code>, "message": "<reason>[: <message>]"}

Every helper returns a complete starlette Response (``Content-Type:
application/json; charset=utf-8`` plus an exact ``Content-Length``) or
raises an AppException subclass for the enclosing handler to turn into a
fallback response.

Example:
    @router.get("/users")
    def list_users():
        users = ["Alice", "John"]
        # {"status":"success","code":200,"data":["Alice","John"]}
        return success_response(users)
"""

from http import HTTPStatus
from typing import Any, Type

from starlette.responses import Response

from json_response.core.envelope import build_failure, build_success
from json_response.core.response import gen_response
from json_response.core.status import StatusCode


def success_response_with_code(
    code: StatusCode,
    data: Any,
    *,
    response_class: Type[Response] = Response,
) -> Response:
    """
    Success envelope with a caller-chosen status code.

    Example:
        >>> success_response_with_code(HTTPStatus.CREATED, ["Alice", "John"]).body
        b'{"status":"success","code":201,"data":["Alice","John"]}'
    """
    return gen_response(code, build_success(code, data), response_class=response_class)


def success_response(data: Any, *, response_class: Type[Response] = Response) -> Response:
    """Success envelope with ``200 OK``."""
    return success_response_with_code(HTTPStatus.OK, data, response_class=response_class)


def failure_response(code: StatusCode, *, response_class: Type[Response] = Response) -> Response:
    """
    Failure envelope whose message is the canonical reason phrase.

    Example:
        >>> failure_response(HTTPStatus.NOT_FOUND).body
        b'{"status":"failed","code":404,"message":"Not Found"}'
    """
    return gen_response(code, build_failure(code), response_class=response_class)


def failure_response_with_message(
    code: StatusCode,
    message: str,
    *,
    response_class: Type[Response] = Response,
) -> Response:
    """
    Failure envelope with ``message`` appended to the reason phrase.

    Example:
        >>> failure_response_with_message(500, "db down").body
        b'{"status":"failed","code":500,"message":"Internal Server Error: db down"}'
    """
    return gen_response(code, build_failure(code, str(message)), response_class=response_class)
