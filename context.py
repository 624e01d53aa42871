import logging
import time
import uuid
from contextvars import ContextVar
from typing import Optional

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

logger = logging.getLogger("feed.access")

request_id: ContextVar[Optional[str]] = ContextVar("request_id", default=None)


class RequestContextMiddleware(BaseHTTPMiddleware):
    """
    Tags each request with an id (taken from X-Request-ID or generated),
    exposes it through `request_id` while the request runs and logs one
    access line when it finishes.
    """

    async def dispatch(self, request: Request, call_next):
        rid = request.headers.get("X-Request-ID") or uuid.uuid4().hex[:12]
        token = request_id.set(rid)
        start = time.perf_counter()
        try:
            response = await call_next(request)
            elapsed = (time.perf_counter() - start) * 1000
            logger.info(f"{request.method} {request.url.path} -> {response.status_code} ({elapsed:.1f}ms)")
            response.headers["X-Request-ID"] = rid
            return response
        finally:
            request_id.reset(token)
