"""Pydantic models for Airtable MCP Server request/response schemas.

This module re-exports all models. Import from submodules directly for
cleaner imports:

    from airtable_mcp.models.enums import ToolName
    from airtable_mcp.models.requests import ListRecordsParams
"""

# ============ ENUMS ============
from .enums import HttpMethod, ParamKind, SortDirection, ToolCategory, ToolName

# ============ REQUEST MODELS ============
from .requests import (
    CreateRecordParams,
    CreateRecordsParams,
    Credential,
    DeleteRecordsParams,
    ExecuteToolRequest,
    FieldParams,
    ListRecordsParams,
    MCPRequest,
    NewRecord,
    NoParams,
    RecordParams,
    RecordUpdate,
    SetCredentialsRequest,
    SortSpec,
    TableParams,
    ToolParams,
    UpdateRecordParams,
    UpdateRecordsParams,
    ViewParams,
)

# ============ RESPONSE MODELS ============
from .responses import HealthResponse, SetCredentialsResponse

__all__ = [
    # Enums
    "HttpMethod",
    "ParamKind",
    "SortDirection",
    "ToolCategory",
    "ToolName",
    # Requests
    "Credential",
    "ExecuteToolRequest",
    "MCPRequest",
    "SetCredentialsRequest",
    # Tool params
    "ToolParams",
    "NoParams",
    "TableParams",
    "ViewParams",
    "FieldParams",
    "RecordParams",
    "SortSpec",
    "ListRecordsParams",
    "CreateRecordParams",
    "UpdateRecordParams",
    "NewRecord",
    "RecordUpdate",
    "CreateRecordsParams",
    "UpdateRecordsParams",
    "DeleteRecordsParams",
    # Responses
    "HealthResponse",
    "SetCredentialsResponse",
]
