"""Request models (Pydantic *Params classes) for the Airtable MCP server.

Tool arguments arrive as an untyped mapping using Airtable's camelCase names
(``tableId``, ``filterByFormula`` ...). Each tool has a params model that
decodes that mapping at the dispatch boundary; fields are declared with the
wire name as alias so handlers work with snake_case attributes.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from .enums import SortDirection

# ============ CORE REQUEST MODELS ============


class Credential(BaseModel):
    """Airtable credentials supplied with each request. Never persisted."""

    api_key: str = Field(..., description="Airtable personal access token / API key")
    base_id: str = Field(..., description="Airtable base ID (collection identifier)")


class MCPRequest(BaseModel):
    """JSON-RPC style MCP request body."""

    jsonrpc: str | None = Field(default=None, description="JSON-RPC version (optional)")
    id: str | int | None = Field(default=None, description="Request ID")
    method: str = Field(..., description="MCP method (initialize, tools/list, tools/call)")
    params: dict[str, Any] | None = Field(default=None, description="Method parameters")


class ExecuteToolRequest(BaseModel):
    """Legacy /tools/execute body."""

    tool_name: str | None = Field(default=None, alias="toolName", description="Tool to execute")
    arguments: dict[str, Any] = Field(default_factory=dict, description="Tool arguments")


class SetCredentialsRequest(BaseModel):
    """Body for /set-credentials."""

    api_key: str | None = Field(default=None, alias="apiKey")
    base_id: str | None = Field(default=None, alias="baseId")


# ============ TOOL PARAMS ============


class ToolParams(BaseModel):
    """Base for tool params: accepts wire (camelCase) names, ignores unknown keys."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class NoParams(ToolParams):
    """Parameters for tools that take no arguments (get_base_info, list_tables)."""


class TableParams(ToolParams):
    """Parameters for get_table_info, list_views, list_fields."""

    table_id: str = Field(..., alias="tableId", description="Airtable table ID or name")


class ViewParams(TableParams):
    """Parameters for get_view_info."""

    view_id: str = Field(..., alias="viewId", description="Airtable view ID")


class FieldParams(TableParams):
    """Parameters for get_field_info."""

    field_id: str = Field(..., alias="fieldId", description="Airtable field ID")


class RecordParams(TableParams):
    """Parameters for get_record and delete_record."""

    record_id: str = Field(..., alias="recordId", description="Airtable record ID")


class SortSpec(BaseModel):
    """One entry of the list_records sort array."""

    field: str = Field(..., description="Field name to sort on")
    direction: SortDirection | None = Field(default=None, description="asc or desc")


class ListRecordsParams(TableParams):
    """Parameters for list_records."""

    page_size: int | None = Field(default=None, alias="pageSize", description="Page size (max 100)")
    offset: str | None = Field(default=None, description="Pagination offset token")
    filter_by_formula: str | None = Field(
        default=None, alias="filterByFormula", description="Airtable formula filter"
    )
    sort: list[SortSpec] | None = Field(default=None, description="Sort configuration")
    fields: list[str] | None = Field(default=None, description="Fields to return")
    view: str | None = Field(default=None, description="View ID or name")


class CreateRecordParams(TableParams):
    """Parameters for create_record."""

    fields: dict[str, Any] = Field(..., description="Field values for the new record")


class UpdateRecordParams(RecordParams):
    """Parameters for update_record (partial update)."""

    fields: dict[str, Any] = Field(..., description="Field values to change")


class NewRecord(BaseModel):
    """Record payload for create_records. Extra keys pass through to Airtable."""

    model_config = ConfigDict(extra="allow")

    fields: dict[str, Any] = Field(..., description="Field values for the record")


class RecordUpdate(BaseModel):
    """Record payload for update_records. Extra keys pass through to Airtable."""

    model_config = ConfigDict(extra="allow")

    id: str = Field(..., description="Record ID to update")
    fields: dict[str, Any] = Field(..., description="Field values to change")


class CreateRecordsParams(TableParams):
    """Parameters for create_records."""

    records: list[NewRecord] = Field(..., description="Records to create (max 10)")


class UpdateRecordsParams(TableParams):
    """Parameters for update_records."""

    records: list[RecordUpdate] = Field(..., description="Records to update (max 10)")


class DeleteRecordsParams(TableParams):
    """Parameters for delete_records."""

    record_ids: list[str] = Field(..., alias="recordIds", description="Record IDs (max 10)")
