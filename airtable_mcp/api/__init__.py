"""API utilities and dependencies.

This package contains shared API utilities:
- deps: FastAPI dependency injection functions
"""

from .deps import (
    API_KEY_HEADER,
    BASE_ID_HEADER,
    get_credential,
    get_dispatcher,
    sanitize_error_message,
)

__all__ = [
    "API_KEY_HEADER",
    "BASE_ID_HEADER",
    "get_credential",
    "get_dispatcher",
    "sanitize_error_message",
]
