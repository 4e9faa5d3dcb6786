from typing import Any, Final, Literal

from json_response.schemas.base import CamelModel

STATUS_SUCCESS: Final = "success"
STATUS_FAILED: Final = "failed"


class SuccessEnvelope(CamelModel):
    status: Literal["success"] = STATUS_SUCCESS
    code: int
    data: Any = None


class FailureEnvelope(CamelModel):
    status: Literal["failed"] = STATUS_FAILED
    code: int
    message: str
