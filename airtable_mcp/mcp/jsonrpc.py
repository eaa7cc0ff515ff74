"""JSON-RPC 2.0 envelopes for the MCP transport.

Builds the success and error objects returned from POST /mcp, including the
tools/call result shape (a single text content block holding Airtable's JSON)
and tool errors that name the failing tool in ``error.data``.

See: https://www.jsonrpc.org/specification
"""

import json
from typing import Any

# Standard JSON-RPC error codes
PARSE_ERROR = -32700
INVALID_REQUEST = -32600
METHOD_NOT_FOUND = -32601
INVALID_PARAMS = -32602
INTERNAL_ERROR = -32603
SERVER_ERROR = -32000  # Base for application-specific errors (see errors.py)


def jsonrpc_response(id: Any, result: Any) -> dict:
    """Create a JSON-RPC 2.0 success response."""
    return {"jsonrpc": "2.0", "id": id, "result": result}


def jsonrpc_error(id: Any, code: int, message: str, data: Any = None) -> dict:
    """Create a JSON-RPC 2.0 error response.

    Args:
        id: Request ID (None for parse errors and requests whose id is unreadable)
        code: Error code (negative integer)
        message: Human-readable error message
        data: Optional structured detail; omitted from the response when None
    """
    error: dict[str, Any] = {"code": code, "message": message}
    if data is not None:
        error["data"] = data
    return {"jsonrpc": "2.0", "id": id, "error": error}


def tool_result(id: Any, result: Any) -> dict:
    """Wrap an Airtable response as a tools/call result (one text block, pretty JSON)."""
    text = json.dumps(result, indent=2, default=str)
    return jsonrpc_response(id, {"content": [{"type": "text", "text": text}]})


def tool_error(id: Any, code: int, message: str, operation: str | None = None) -> dict:
    """Error response for a failed tools/call; ``data.tool`` names the tool when known."""
    return jsonrpc_error(id, code, message, {"tool": operation} if operation else None)
