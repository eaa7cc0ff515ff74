"""MCP Tool Definitions for the Airtable server.

This module contains the operation registry: every tool the server exposes,
its description and its input contract. ``TOOL_DEFINITIONS`` is the rendered
form returned by the tools/list method.

Tool Categories:
    - Metadata: get_base_info, list_tables, get_table_info, list_views,
      get_view_info, list_fields, get_field_info
    - Records: list_records, get_record, create_record, update_record,
      delete_record
    - Batch: create_records, update_records, delete_records
"""

from dataclasses import dataclass
from typing import Any

from ..models.enums import ParamKind, SortDirection, ToolCategory, ToolName

# Airtable rejects batch writes with more than this many records.
MAX_BATCH_SIZE = 10


@dataclass(frozen=True)
class ParameterSpec:
    """One named parameter of a tool's input contract."""

    name: str
    kind: ParamKind
    required: bool = False
    description: str = ""
    enum: tuple[str, ...] | None = None
    # For OBJECT_ARRAY: JSON schema properties of each item, and which are required
    item_properties: tuple[tuple[str, dict[str, Any]], ...] = ()
    item_required: tuple[str, ...] = ()

    def to_schema(self) -> dict[str, Any]:
        """Render this parameter as a JSON Schema property."""
        if self.kind == ParamKind.STRING_ARRAY:
            schema: dict[str, Any] = {"type": "array", "items": {"type": "string"}}
        elif self.kind == ParamKind.OBJECT_ARRAY:
            items: dict[str, Any] = {"type": "object", "properties": dict(self.item_properties)}
            if self.item_required:
                items["required"] = list(self.item_required)
            schema = {"type": "array", "items": items}
        else:
            schema = {"type": self.kind.value}
        if self.enum:
            schema["enum"] = list(self.enum)
        if self.description:
            schema["description"] = self.description
        return schema


@dataclass(frozen=True)
class Operation:
    """A tool exposed over MCP. Immutable, defined once at import time."""

    name: ToolName
    description: str
    category: ToolCategory
    parameters: tuple[ParameterSpec, ...] = ()

    @property
    def required(self) -> list[str]:
        return [p.name for p in self.parameters if p.required]

    @property
    def input_schema(self) -> dict[str, Any]:
        """JSON Schema object describing the tool's arguments."""
        return {
            "type": "object",
            "properties": {p.name: p.to_schema() for p in self.parameters},
            "required": self.required,
        }

    def to_definition(self) -> dict[str, Any]:
        """Discovery shape: {name, description, inputSchema}."""
        return {
            "name": self.name.value,
            "description": self.description,
            "inputSchema": self.input_schema,
        }


def _table_id(description: str) -> ParameterSpec:
    return ParameterSpec("tableId", ParamKind.STRING, required=True, description=description)


OPERATIONS: tuple[Operation, ...] = (
    # ============ Metadata Tools ============
    Operation(
        ToolName.GET_BASE_INFO,
        "Get information about the Airtable base",
        ToolCategory.METADATA,
    ),
    Operation(
        ToolName.LIST_TABLES,
        "List all tables in the Airtable base",
        ToolCategory.METADATA,
    ),
    Operation(
        ToolName.GET_TABLE_INFO,
        "Get detailed information about a specific table",
        ToolCategory.METADATA,
        (_table_id("The ID of the table to get information about"),),
    ),
    # ============ Record Tools ============
    Operation(
        ToolName.LIST_RECORDS,
        "List records from a table with optional filtering and pagination",
        ToolCategory.RECORDS,
        (
            _table_id("The ID of the table to list records from"),
            ParameterSpec(
                "pageSize", ParamKind.NUMBER, description="Number of records to return (max 100)"
            ),
            ParameterSpec("offset", ParamKind.STRING, description="Pagination offset token"),
            ParameterSpec(
                "filterByFormula", ParamKind.STRING, description="Airtable formula to filter records"
            ),
            ParameterSpec(
                "sort",
                ParamKind.OBJECT_ARRAY,
                description="Sorting configuration",
                item_properties=(
                    ("field", {"type": "string"}),
                    ("direction", {"type": "string", "enum": [d.value for d in SortDirection]}),
                ),
                item_required=("field",),
            ),
            ParameterSpec("fields", ParamKind.STRING_ARRAY, description="Specific fields to return"),
            ParameterSpec("view", ParamKind.STRING, description="View ID to use for the query"),
        ),
    ),
    Operation(
        ToolName.GET_RECORD,
        "Get a specific record by ID",
        ToolCategory.RECORDS,
        (
            _table_id("The ID of the table containing the record"),
            ParameterSpec(
                "recordId", ParamKind.STRING, required=True, description="The ID of the record to retrieve"
            ),
        ),
    ),
    Operation(
        ToolName.CREATE_RECORD,
        "Create a new record in a table",
        ToolCategory.RECORDS,
        (
            _table_id("The ID of the table to create the record in"),
            ParameterSpec(
                "fields", ParamKind.OBJECT, required=True, description="The field values for the new record"
            ),
        ),
    ),
    Operation(
        ToolName.UPDATE_RECORD,
        "Update an existing record",
        ToolCategory.RECORDS,
        (
            _table_id("The ID of the table containing the record"),
            ParameterSpec(
                "recordId", ParamKind.STRING, required=True, description="The ID of the record to update"
            ),
            ParameterSpec(
                "fields", ParamKind.OBJECT, required=True, description="The field values to update"
            ),
        ),
    ),
    Operation(
        ToolName.DELETE_RECORD,
        "Delete a record from a table",
        ToolCategory.RECORDS,
        (
            _table_id("The ID of the table containing the record"),
            ParameterSpec(
                "recordId", ParamKind.STRING, required=True, description="The ID of the record to delete"
            ),
        ),
    ),
    # ============ Batch Tools ============
    Operation(
        ToolName.CREATE_RECORDS,
        "Create multiple records in a table (batch operation)",
        ToolCategory.BATCH,
        (
            _table_id("The ID of the table to create records in"),
            ParameterSpec(
                "records",
                ParamKind.OBJECT_ARRAY,
                required=True,
                description=f"Array of records to create (max {MAX_BATCH_SIZE})",
                item_properties=(
                    ("fields", {"type": "object", "description": "The field values for the record"}),
                ),
                item_required=("fields",),
            ),
        ),
    ),
    Operation(
        ToolName.UPDATE_RECORDS,
        "Update multiple records in a table (batch operation)",
        ToolCategory.BATCH,
        (
            _table_id("The ID of the table containing the records"),
            ParameterSpec(
                "records",
                ParamKind.OBJECT_ARRAY,
                required=True,
                description=f"Array of records to update (max {MAX_BATCH_SIZE})",
                item_properties=(
                    ("id", {"type": "string"}),
                    ("fields", {"type": "object", "description": "The field values to update"}),
                ),
                item_required=("id", "fields"),
            ),
        ),
    ),
    Operation(
        ToolName.DELETE_RECORDS,
        "Delete multiple records from a table (batch operation)",
        ToolCategory.BATCH,
        (
            _table_id("The ID of the table containing the records"),
            ParameterSpec(
                "recordIds",
                ParamKind.STRING_ARRAY,
                required=True,
                description=f"Array of record IDs to delete (max {MAX_BATCH_SIZE})",
            ),
        ),
    ),
    # ============ View & Field Metadata ============
    Operation(
        ToolName.LIST_VIEWS,
        "List all views for a specific table",
        ToolCategory.METADATA,
        (_table_id("The ID of the table to list views for"),),
    ),
    Operation(
        ToolName.GET_VIEW_INFO,
        "Get detailed information about a specific view",
        ToolCategory.METADATA,
        (
            _table_id("The ID of the table containing the view"),
            ParameterSpec(
                "viewId", ParamKind.STRING, required=True, description="The ID of the view to get information about"
            ),
        ),
    ),
    Operation(
        ToolName.LIST_FIELDS,
        "List all fields for a specific table",
        ToolCategory.METADATA,
        (_table_id("The ID of the table to list fields for"),),
    ),
    Operation(
        ToolName.GET_FIELD_INFO,
        "Get detailed information about a specific field",
        ToolCategory.METADATA,
        (
            _table_id("The ID of the table containing the field"),
            ParameterSpec(
                "fieldId", ParamKind.STRING, required=True, description="The ID of the field to get information about"
            ),
        ),
    ),
)

_OPERATIONS_BY_NAME: dict[str, Operation] = {op.name.value: op for op in OPERATIONS}

if len(_OPERATIONS_BY_NAME) != len(OPERATIONS):
    raise RuntimeError("Duplicate tool names in OPERATIONS")


def list_operations() -> tuple[Operation, ...]:
    """All registered operations, in presentation order."""
    return OPERATIONS


def find_operation(name: str) -> Operation | None:
    """Look up an operation by tool name."""
    return _OPERATIONS_BY_NAME.get(name)


TOOL_DEFINITIONS: list[dict] = [op.to_definition() for op in OPERATIONS]
