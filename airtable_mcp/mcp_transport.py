"""MCP Streamable HTTP transport and legacy tool endpoints.

Routes:
    POST /mcp             JSON-RPC MCP endpoint (initialize, tools/list, tools/call)
    GET  /tools           Tool definitions (legacy)
    POST /tools/execute   Run a tool, result streamed as server-sent events (legacy)
    POST /set-credentials Validate an API key / base ID pair against Airtable

Credentials arrive in the x-airtable-api-key and x-airtable-base-id headers,
never in the request body.

Config example (n8n / any MCP HTTP client):
```json
{"url": "https://<host>/mcp", "headers": {"x-airtable-api-key": "pat...", "x-airtable-base-id": "app..."}}
```
"""

import json
import logging
from collections.abc import AsyncGenerator
from typing import Annotated, Any
from uuid import uuid4

from fastapi import APIRouter, Depends, HTTPException, Request, Response
from fastapi.responses import JSONResponse, StreamingResponse
from pydantic import ValidationError

from . import __version__
from .api.deps import get_credential, get_dispatcher, sanitize_error_message
from .config import settings
from .engine import ToolDispatcher, require_credential
from .errors import AirtableMCPError
from .mcp import (
    INTERNAL_ERROR,
    INVALID_PARAMS,
    INVALID_REQUEST,
    METHOD_NOT_FOUND,
    PARSE_ERROR,
    TOOL_DEFINITIONS,
    jsonrpc_error,
    jsonrpc_response,
    tool_error,
    tool_result,
)
from .models import (
    Credential,
    ExecuteToolRequest,
    MCPRequest,
    SetCredentialsRequest,
    SetCredentialsResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["MCP Transport"])


# ============ MCP JSON-RPC ENDPOINT ============


@router.post("/mcp")
async def mcp_endpoint(
    request: Request,
    credential: Annotated[Credential, Depends(get_credential)],
    dispatcher: Annotated[ToolDispatcher, Depends(get_dispatcher)],
):
    """
    MCP Streamable HTTP endpoint (JSON-RPC format).

    Accepts a single request or a batch (JSON array). Requests without an id
    are still answered (id: null); only ``notifications/*`` methods get no
    response.
    """
    content_length = request.headers.get("content-length")
    try:
        declared_size = int(content_length) if content_length else 0
    except ValueError:
        return JSONResponse(
            jsonrpc_error(None, INVALID_REQUEST, "Invalid Content-Length header"), status_code=400
        )
    if declared_size > settings.max_json_payload_size:
        raise HTTPException(
            status_code=413,
            detail=f"JSON payload too large. Maximum size: {settings.max_json_payload_size} bytes",
        )

    try:
        body = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        return JSONResponse(jsonrpc_error(None, PARSE_ERROR, "Parse error"), status_code=400)

    # Handle batch requests
    if isinstance(body, list):
        if not body:
            return JSONResponse(
                jsonrpc_error(None, INVALID_REQUEST, "Invalid request: empty batch"), status_code=400
            )
        responses = []
        for req in body:
            resp = await _handle_request(req, credential, dispatcher)
            if resp:  # Skip notifications
                responses.append(resp)
        return JSONResponse(responses) if responses else Response(status_code=204)

    response = await _handle_request(body, credential, dispatcher)
    return JSONResponse(response) if response else Response(status_code=204)


def _readable_id(body: dict) -> str | int | None:
    """Request id if it is usable in a response, else None."""
    request_id = body.get("id")
    if isinstance(request_id, (str, int)) and not isinstance(request_id, bool):
        return request_id
    return None


def _describe_invalid_request(error: ValidationError) -> str:
    """Name the offending member(s) of a malformed JSON-RPC request."""
    details = "; ".join(
        f"{'.'.join(str(p) for p in err['loc']) or 'request'}: {err['msg']}"
        for err in error.errors(include_url=False)
    )
    return f"Invalid request: {details}"


async def _handle_request(
    body: Any, credential: Credential, dispatcher: ToolDispatcher
) -> dict | None:
    """Handle a single JSON-RPC request."""
    if not isinstance(body, dict):
        return jsonrpc_error(None, INVALID_REQUEST, "Invalid request")

    try:
        req = MCPRequest.model_validate(body)
    except ValidationError as e:
        return jsonrpc_error(_readable_id(body), INVALID_REQUEST, _describe_invalid_request(e))

    if req.method.startswith("notifications/"):
        return None

    if req.method == "initialize":
        return jsonrpc_response(
            req.id,
            {
                "protocolVersion": settings.protocol_version,
                "capabilities": {"tools": {}, "resources": {}},
                "serverInfo": {"name": settings.server_name, "version": __version__},
            },
        )
    elif req.method == "tools/list":
        return jsonrpc_response(req.id, {"tools": TOOL_DEFINITIONS})
    elif req.method == "tools/call":
        return await _handle_call_tool(req.id, req.params or {}, credential, dispatcher)
    elif req.method == "resources/list":
        return jsonrpc_response(req.id, {"resources": []})
    elif req.method == "ping":
        return jsonrpc_response(req.id, {})
    else:
        return jsonrpc_error(req.id, METHOD_NOT_FOUND, f"Unsupported MCP method: {req.method}")


async def _handle_call_tool(
    id: Any, params: dict, credential: Credential, dispatcher: ToolDispatcher
) -> dict:
    """Handle MCP tools/call request."""
    tool_name = params.get("name")
    arguments = params.get("arguments") or {}

    if not tool_name:
        return jsonrpc_error(id, INVALID_PARAMS, "Tool name is required for tools/call")
    if not isinstance(arguments, dict):
        return jsonrpc_error(id, INVALID_PARAMS, "Tool arguments must be an object")

    try:
        require_credential(credential)
        result = await dispatcher.invoke(tool_name, arguments, credential)
    except AirtableMCPError as e:
        logger.warning(f"Tool {tool_name} failed: {e.message}")
        return tool_error(id, e.code, e.message, e.operation or tool_name)
    except Exception as e:
        return tool_error(id, INTERNAL_ERROR, sanitize_error_message(e), tool_name)

    return tool_result(id, result)


# ============ LEGACY ENDPOINTS ============


@router.get("/tools")
async def list_tools():
    """Tool definitions as a plain JSON array."""
    return TOOL_DEFINITIONS


def _sse_event(request_id: str, event_type: str, data: Any = None, error: str | None = None) -> str:
    event: dict[str, Any] = {"id": request_id, "type": event_type}
    if data is not None:
        event["data"] = data
    if error is not None:
        event["error"] = error
    return f"data: {json.dumps(event, default=str)}\n\n"


async def sse_event_generator(
    request_id: str,
    tool_name: str | None,
    arguments: dict[str, Any],
    credential: Credential,
    dispatcher: ToolDispatcher,
) -> AsyncGenerator[str, None]:
    """
    Generate Server-Sent Events for a tool execution.

    Yields SSE-formatted events:
    - data: Tool result, followed by
    - complete: Execution finished
    or a single
    - error: Error occurred during execution
    """
    if not tool_name:
        yield _sse_event(request_id, "error", error="Tool name is required")
        return

    try:
        require_credential(credential)
        result = await dispatcher.invoke(tool_name, arguments, credential)
    except Exception as e:
        yield _sse_event(request_id, "error", error=sanitize_error_message(e))
        return

    yield _sse_event(request_id, "data", data=result)
    yield _sse_event(request_id, "complete", data={"message": "Tool execution completed"})


@router.post("/tools/execute")
async def execute_tool(
    request: ExecuteToolRequest,
    credential: Annotated[Credential, Depends(get_credential)],
    dispatcher: Annotated[ToolDispatcher, Depends(get_dispatcher)],
):
    """Execute a tool with a streaming (text/event-stream) response."""
    request_id = f"req_{uuid4().hex[:12]}"
    return StreamingResponse(
        sse_event_generator(
            request_id, request.tool_name, request.arguments, credential, dispatcher
        ),
        media_type="text/event-stream",
        headers={
            "Cache-Control": "no-cache",
            "Connection": "keep-alive",
            "X-Accel-Buffering": "no",  # Disable nginx buffering
        },
    )


@router.post("/set-credentials", response_model=SetCredentialsResponse)
async def set_credentials(
    request: SetCredentialsRequest,
    dispatcher: Annotated[ToolDispatcher, Depends(get_dispatcher)],
) -> SetCredentialsResponse:
    """Check an API key / base ID pair by fetching the base's metadata.

    Nothing is stored; clients still send credentials as headers on every call.
    """
    if not request.api_key or not request.base_id:
        raise HTTPException(status_code=400, detail="API key and base ID are required")

    credential = Credential(api_key=request.api_key, base_id=request.base_id)
    try:
        await dispatcher.client.get_base_info(credential)
    except Exception as e:
        logger.warning(
            f"Credential validation failed for base {request.base_id}: {sanitize_error_message(e)}"
        )
        raise HTTPException(status_code=500, detail="Failed to validate credentials") from e

    return SetCredentialsResponse(success=True, message="Credentials validated successfully")
