from __future__ import annotations

import logging
import time
import uuid
from typing import Callable

from fastapi import Request, Response

from app.core.context import reset_request_id, set_request_id

logger = logging.getLogger(__name__)


def _get_request_id(request: Request) -> str:
    rid = request.headers.get("X-Request-Id") or request.headers.get("X-Request-ID")
    if rid:
        return rid
    return str(uuid.uuid4())


async def request_log_middleware(request: Request, call_next: Callable) -> Response:
    """Access log with a correlation id.

    - Reuses the caller's X-Request-Id or mints one
    - Echoes it on the response
    - Logs method, path, status and duration
    """
    request_id = _get_request_id(request)
    token = set_request_id(request_id)
    start = time.perf_counter()
    try:
        try:
            response: Response = await call_next(request)
        except Exception:
            duration_ms = int((time.perf_counter() - start) * 1000)
            logger.exception("%s %s failed after %dms", request.method, request.url.path, duration_ms)
            raise

        response.headers["X-Request-Id"] = request_id
        duration_ms = int((time.perf_counter() - start) * 1000)
        logger.info("%s %s -> %d (%dms)", request.method, request.url.path, response.status_code, duration_ms)
        return response
    finally:
        reset_request_id(token)
