"""Enumeration types for the Airtable MCP server."""

from enum import StrEnum


class ToolName(StrEnum):
    """Available Airtable tools."""

    # Base / table metadata
    GET_BASE_INFO = "get_base_info"
    LIST_TABLES = "list_tables"
    GET_TABLE_INFO = "get_table_info"
    LIST_VIEWS = "list_views"
    GET_VIEW_INFO = "get_view_info"
    LIST_FIELDS = "list_fields"
    GET_FIELD_INFO = "get_field_info"
    # Single-record CRUD
    LIST_RECORDS = "list_records"
    GET_RECORD = "get_record"
    CREATE_RECORD = "create_record"
    UPDATE_RECORD = "update_record"
    DELETE_RECORD = "delete_record"
    # Batch CRUD
    CREATE_RECORDS = "create_records"
    UPDATE_RECORDS = "update_records"
    DELETE_RECORDS = "delete_records"


class ParamKind(StrEnum):
    """Primitive kinds a tool parameter can take."""

    STRING = "string"
    NUMBER = "number"
    OBJECT = "object"
    STRING_ARRAY = "array<string>"
    OBJECT_ARRAY = "array<object>"


class SortDirection(StrEnum):
    """Sort direction accepted by list_records."""

    ASC = "asc"
    DESC = "desc"


class HttpMethod(StrEnum):
    """HTTP methods used against the Airtable REST API."""

    GET = "GET"
    POST = "POST"
    PATCH = "PATCH"
    DELETE = "DELETE"


class ToolCategory(StrEnum):
    """Tool category, grouped by the Airtable resource it targets."""

    METADATA = "metadata"
    RECORDS = "records"
    BATCH = "batch"
