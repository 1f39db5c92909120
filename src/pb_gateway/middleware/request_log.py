"""Request logging middleware.

Assigns each request an id (request.state.request_id, echoed in the
ApiResponse envelope and the X-Request-ID header) and logs one line per
request once the response is ready:

    INFO    [POST] /api/v1/bets/3/stakes -> 200 (4ms) req_a1b2c3d4e5f6
    WARNING [POST] /api/v1/bets/3/withdraw -> 409 (1ms) req_0f9e8d7c6b5a

Client errors log at WARNING and server errors at ERROR so rejected
commands stand out from normal traffic.
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from src.pb_common.response import new_request_id

logger = logging.getLogger("pb.request")


def _level_for(status_code: int) -> int:
    if status_code >= 500:
        return logging.ERROR
    if status_code >= 400:
        return logging.WARNING
    return logging.INFO


class RequestLogMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        request_id = new_request_id()
        request.state.request_id = request_id

        start = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - start) * 1000

        response.headers["X-Request-ID"] = request_id
        logger.log(
            _level_for(response.status_code),
            "[%s] %s -> %d (%.0fms) %s",
            request.method,
            request.url.path,
            response.status_code,
            elapsed_ms,
            request_id,
        )
        return response
