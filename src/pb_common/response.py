"""Envelope wrapped around every HTTP response body.

    {"code": 0, "message": "success", "data": {...}, "timestamp": "...", "request_id": "req_..."}

``code`` is 0 on success and the AppError code otherwise; ``data`` is null
on error. ``request_id`` echoes the id RequestLogMiddleware assigned, so a
client report can be matched to the server log line.
"""

import uuid
from typing import Any

from pydantic import BaseModel, Field

from src.pb_common.datetime_utils import utc_now


def new_request_id() -> str:
    return f"req_{uuid.uuid4().hex[:12]}"


class ApiResponse(BaseModel):
    code: int = 0
    message: str = "success"
    data: Any = None
    timestamp: str = Field(default_factory=lambda: utc_now().isoformat())
    request_id: str = Field(default_factory=new_request_id)


def success_response(
    data: Any = None, message: str = "success", request_id: str | None = None
) -> ApiResponse:
    resp = ApiResponse(data=data, message=message)
    if request_id is not None:
        resp.request_id = request_id
    return resp


def error_response(code: int, message: str, request_id: str | None = None) -> ApiResponse:
    resp = ApiResponse(code=code, message=message, data=None)
    if request_id is not None:
        resp.request_id = request_id
    return resp
