"""
Serialization of envelopes and assembly of the HTTP response.

The body is rendered exactly the way Starlette's JSONResponse renders
content (compact separators, UTF-8, no NaN), but the headers are set
explicitly so that any Response class taking raw bytes can carry it.
"""

import dataclasses
import json
from typing import Any, Dict, Type

from fastapi.encoders import ENCODERS_BY_TYPE
from pydantic import BaseModel
from starlette.responses import Response

from json_response.core.exceptions import ResponseBuildError, SerializationError
from json_response.core.status import StatusCode
from json_response.schemas.base import CamelModel

CONTENT_TYPE_JSON = "application/json; charset=utf-8"

MIN_STATUS_CODE = 100
MAX_STATUS_CODE = 999


def _encode_value(obj: Any) -> Any:
    """
    Convert one non-JSON-native value for ``json.dumps``.

    Only pydantic models, dataclasses and the types FastAPI knows how to
    encode (enums, datetimes, UUIDs, Decimals, sets, paths, ...) are
    accepted. Anything else is rejected rather than dumped attribute by
    attribute.
    """
    if isinstance(obj, BaseModel):
        return obj.model_dump(by_alias=True)
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return {field.name: getattr(obj, field.name) for field in dataclasses.fields(obj)}
    for base in type(obj).__mro__[:-1]:
        encoder = ENCODERS_BY_TYPE.get(base)
        if encoder is not None:
            return encoder(obj)
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def render_envelope(envelope: CamelModel) -> bytes:
    """
    Serialize an envelope to compact UTF-8 JSON.

    Dict keys are passed through untouched, so the parsed body carries
    exactly the caller's data.

    Raises:
        SerializationError: if the envelope holds data with no JSON form
            (NaN/Infinity, cycles, objects of unsupported types).
    """
    try:
        payload: Dict[str, Any] = envelope.model_dump(by_alias=True)
        return json.dumps(
            payload,
            default=_encode_value,
            ensure_ascii=False,
            allow_nan=False,
            indent=None,
            separators=(",", ":"),
        ).encode("utf-8")
    except (TypeError, ValueError, RecursionError) as exc:
        raise SerializationError(
            f"Failed to convert the response data as JSON: {exc}"
        ) from exc


def _check_status_code(code: StatusCode) -> int:
    if isinstance(code, bool) or not isinstance(code, int):
        raise ResponseBuildError(f"Failed to create response: invalid status code {code!r}")
    if not MIN_STATUS_CODE <= code <= MAX_STATUS_CODE:
        raise ResponseBuildError(f"Failed to create response: invalid status code {int(code)}")
    return int(code)


def gen_response(
    code: StatusCode,
    envelope: CamelModel,
    *,
    response_class: Type[Response] = Response,
) -> Response:
    """
    Turn an envelope into a ready-to-send response.

    The response carries ``code`` as its status, ``Content-Type:
    application/json; charset=utf-8`` and a ``Content-Length`` equal to the
    exact byte length of the body. ``response_class`` must accept
    ``content``/``status_code``/``headers`` and keep bytes content as is.

    Raises:
        SerializationError: the envelope could not be serialized.
        ResponseBuildError: the response object could not be constructed.
    """
    body = render_envelope(envelope)
    status_code = _check_status_code(code)
    headers = {
        "Content-Length": str(len(body)),
        "Content-Type": CONTENT_TYPE_JSON,
    }

    try:
        response = response_class(content=body, status_code=status_code, headers=headers)
    except (TypeError, ValueError) as exc:
        raise ResponseBuildError(f"Failed to create response: {exc}") from exc

    if response.body != body:
        raise ResponseBuildError(
            f"Failed to create response: {response_class.__name__} altered the JSON body"
        )
    return response
