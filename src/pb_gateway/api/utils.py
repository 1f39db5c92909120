"""Helpers shared by every pb_* router."""

from typing import Any

from fastapi import Request

from src.pb_common.response import ApiResponse, success_response


def request_id_of(request: Request) -> str | None:
    """request_id assigned by RequestLogMiddleware, None outside the middleware."""
    return getattr(request.state, "request_id", None)


def respond(request: Request, data: Any = None, message: str = "success") -> ApiResponse:
    return success_response(data, message, request_id_of(request))
