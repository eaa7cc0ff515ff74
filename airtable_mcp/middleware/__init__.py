"""HTTP middleware for the FastAPI application.

This module provides ASGI middleware for:
- Security headers (X-Request-Id, CSP, HSTS, etc.)
- Request logging
"""

from .request_logging import RequestLoggingMiddleware
from .security_headers import SecurityHeadersMiddleware

__all__ = [
    "SecurityHeadersMiddleware",
    "RequestLoggingMiddleware",
]
