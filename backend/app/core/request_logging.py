"""Request logging middleware for observability.

Assigns each request an ID and logs request/response details.
"""

import logging
import time
import uuid

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from app.core.request_context import set_request_id

logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Middleware to tag and log HTTP requests and responses."""

    def __init__(self, app, exclude_paths: list[str] | None = None) -> None:
        super().__init__(app)
        self.exclude_paths = exclude_paths or ["/api/v1/health"]

    async def dispatch(self, request: Request, call_next) -> Response:
        """Log request and response details."""
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex[:8]
        request.state.request_id = request_id
        set_request_id(request_id)

        quiet = any(request.url.path.startswith(p) for p in self.exclude_paths)
        if not quiet:
            logger.info(f"{request.method} {request.url.path}")

        start_time = time.time()
        try:
            response = await call_next(request)
        except Exception as e:
            duration_ms = (time.time() - start_time) * 1000
            logger.error(
                f"ERROR {type(e).__name__}: {str(e)[:100]} "
                f"duration={duration_ms:.1f}ms"
            )
            raise
        finally:
            set_request_id(None)

        if not quiet:
            duration_ms = (time.time() - start_time) * 1000
            logger.info(
                f"{response.status_code} duration={duration_ms:.1f}ms",
                extra={"request_id": request_id},
            )

        response.headers[REQUEST_ID_HEADER] = request_id
        return response
