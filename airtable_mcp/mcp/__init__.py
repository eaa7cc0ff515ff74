"""MCP (Model Context Protocol) transport module.

This module contains components for the MCP Streamable HTTP transport:
- Tool definitions (operation registry) for tools/list
- JSON-RPC 2.0 helpers

The transport router itself lives in mcp_transport.py.
"""

from .jsonrpc import (
    INTERNAL_ERROR,
    INVALID_PARAMS,
    INVALID_REQUEST,
    METHOD_NOT_FOUND,
    PARSE_ERROR,
    SERVER_ERROR,
    jsonrpc_error,
    jsonrpc_response,
    tool_error,
    tool_result,
)
from .tool_defs import (
    MAX_BATCH_SIZE,
    OPERATIONS,
    TOOL_DEFINITIONS,
    Operation,
    ParameterSpec,
    ToolCategory,
    find_operation,
    list_operations,
)

__all__ = [
    # Operation registry
    "MAX_BATCH_SIZE",
    "OPERATIONS",
    "TOOL_DEFINITIONS",
    "Operation",
    "ParameterSpec",
    "ToolCategory",
    "find_operation",
    "list_operations",
    # JSON-RPC helpers
    "jsonrpc_response",
    "jsonrpc_error",
    "tool_error",
    "tool_result",
    "PARSE_ERROR",
    "INVALID_REQUEST",
    "METHOD_NOT_FOUND",
    "INVALID_PARAMS",
    "INTERNAL_ERROR",
    "SERVER_ERROR",
]
