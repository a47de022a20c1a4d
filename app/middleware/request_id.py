"""
Request correlation middleware.

Every request gets an id, taken from the ``X-Request-ID`` header when the
caller sends one. The id is exposed on ``request.state.request_id``, stamped
on log records through ``request_id_var`` and echoed back in the response.
One access line is logged per request.
"""

import logging
import time
from uuid import uuid4

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

from app.core.logging_config import request_id_var

logger = logging.getLogger("app.access")

REQUEST_ID_HEADER = "X-Request-ID"


class RequestIDMiddleware(BaseHTTPMiddleware):

    async def dispatch(self, request: Request, call_next):
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid4().hex
        request.state.request_id = request_id
        token = request_id_var.set(request_id)

        start_time = time.perf_counter()
        try:
            response = await call_next(request)
            process_time = time.perf_counter() - start_time

            logger.info(
                f"{request.method} {request.url.path} "
                f"{response.status_code} {process_time*1000:.2f}ms"
            )
            response.headers[REQUEST_ID_HEADER] = request_id
            return response
        finally:
            request_id_var.reset(token)


def get_request_id(request: Request) -> str:
    return getattr(request.state, "request_id", None) or request_id_var.get()
