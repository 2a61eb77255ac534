"""
FastAPI middleware for request correlation.
"""

import logging
import uuid
from typing import Callable

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from .logging_config import request_id_var

logger = logging.getLogger(__name__)


class RequestIDMiddleware(BaseHTTPMiddleware):
    """
    Middleware that adds a unique request ID to each request.

    The ID is available in request.state.request_id, stamped on every log
    record written while the request is handled (see logging_config.py) and
    returned in the X-Request-ID header. A client-provided X-Request-ID is
    reused as-is.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
        request.state.request_id = request_id
        token = request_id_var.set(request_id)

        try:
            response = await call_next(request)
            response.headers["X-Request-ID"] = request_id
            logger.debug("%s %s -> %d", request.method, request.url.path, response.status_code)
            return response
        finally:
            request_id_var.reset(token)
