"""FastAPI dependency injection functions.

This module contains shared dependencies for API endpoints:
- Credential extraction from request headers (with env fallback)
- Dispatcher access
- Error sanitization
"""

import logging
from functools import lru_cache
from typing import Annotated

from fastapi import Header

from ..config import settings
from ..engine import ToolDispatcher
from ..errors import AirtableMCPError
from ..models import Credential
from ..services.airtable_client import mask_api_key

logger = logging.getLogger(__name__)

API_KEY_HEADER = "x-airtable-api-key"
BASE_ID_HEADER = "x-airtable-base-id"


# ============ ERROR SANITIZATION ============


def sanitize_error_message(error: Exception) -> str:
    """
    Sanitize error messages to prevent information disclosure.

    Errors raised by the dispatch layer carry client-safe messages (status,
    reason and Airtable's own error body). Anything else is logged in full
    and replaced with a generic message.
    """
    if isinstance(error, AirtableMCPError):
        return error.message

    logger.error(f"Tool execution error: {error}", exc_info=True)
    return "An error occurred processing your request. Please try again."


# ============ HEADER EXTRACTORS ============


async def get_credential(
    x_airtable_api_key: Annotated[str | None, Header(alias=API_KEY_HEADER)] = None,
    x_airtable_base_id: Annotated[str | None, Header(alias=BASE_ID_HEADER)] = None,
) -> Credential:
    """Build the per-request credential.

    Headers win; AIRTABLE_API_KEY / AIRTABLE_BASE_ID from the environment fill
    in whatever is absent. Missing values stay empty and are rejected by the
    dispatcher, so discovery methods keep working without credentials.
    """
    api_key = x_airtable_api_key or settings.airtable_api_key or ""
    base_id = x_airtable_base_id or settings.airtable_base_id or ""
    if api_key:
        logger.debug(f"Request credential: key={mask_api_key(api_key)} base={base_id or '[NOT SET]'}")
    return Credential(api_key=api_key, base_id=base_id)


# ============ DISPATCHER ============


@lru_cache
def get_dispatcher() -> ToolDispatcher:
    """Process-wide dispatcher. Holds no per-request state."""
    return ToolDispatcher()
