"""Request context middleware.

Tags every HTTP response with an ``X-Request-Id`` and writes one access log
line per request, using the pure ASGI pattern.
"""

import logging
import time
from uuid import uuid4

logger = logging.getLogger(__name__)

# Health probes would otherwise flood the log
QUIET_PATHS = ("/health",)


class RequestContextMiddleware:
    """
    Add a request id header and log method, path, status and latency.

    Uses pure ASGI middleware pattern instead of BaseHTTPMiddleware
    so streaming responses on GET /mcp are passed through untouched.
    """

    def __init__(self, app):
        self.app = app

    async def __call__(self, scope, receive, send):
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        request_id = str(uuid4())
        start_time = time.perf_counter()
        status_code = 500

        async def send_with_request_id(message):
            nonlocal status_code
            if message["type"] == "http.response.start":
                status_code = message["status"]
                headers = list(message.get("headers", []))
                headers.append((b"x-request-id", request_id.encode()))
                message = {**message, "headers": headers}
            await send(message)

        try:
            await self.app(scope, receive, send_with_request_id)
        finally:
            path = scope.get("path", "")
            if path not in QUIET_PATHS:
                latency_ms = int((time.perf_counter() - start_time) * 1000)
                logger.info(
                    f"{scope.get('method', '-')} {path} -> {status_code} "
                    f"({latency_ms}ms, request_id={request_id})"
                )
