"""Base infrastructure for tool handlers.

Each handler receives its decoded params model and a HandlerContext carrying
the caller's credential and the Airtable client, and returns the parsed
Airtable response unchanged.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, Coroutine

if TYPE_CHECKING:
    from ...models.requests import Credential, ToolParams
    from ...services.airtable_client import AirtableClient


@dataclass(frozen=True)
class HandlerContext:
    """Per-invocation context. Discarded once the response is sent."""

    credential: "Credential"
    client: "AirtableClient"


# Type alias for handler functions
HandlerFunc = Callable[
    [Any, HandlerContext],
    Coroutine[Any, Any, Any],
]
