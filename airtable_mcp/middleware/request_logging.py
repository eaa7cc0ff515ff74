"""Request logging middleware.

Logs one line per HTTP request: method, path and client IP.
"""

import logging

logger = logging.getLogger(__name__)


class RequestLoggingMiddleware:
    """
    Log every incoming HTTP request.

    Uses X-Forwarded-For header (behind reverse proxy) or direct client address.
    Health checks are logged at DEBUG to keep monitoring noise out of the logs.
    """

    def __init__(self, app):
        self.app = app

    async def __call__(self, scope, receive, send):
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        path = scope.get("path", "")
        client_ip = None
        headers = dict(scope.get("headers", []))
        forwarded_for = headers.get(b"x-forwarded-for")
        if forwarded_for:
            # First IP in X-Forwarded-For is the original client
            client_ip = forwarded_for.decode().split(",")[0].strip()
        elif scope.get("client"):
            client_ip = scope["client"][0]

        level = logging.DEBUG if path == "/health" else logging.INFO
        logger.log(level, f"{scope.get('method', '')} {path} - {client_ip or 'unknown'}")

        await self.app(scope, receive, send)
