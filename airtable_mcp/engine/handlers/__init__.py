"""Tool handlers for the dispatch engine.

This package contains one async handler per tool, organized by resource:
- metadata: base, table, view and field metadata
- records: single-record CRUD and record listing
- batch: multi-record create, update and delete

Each handler is a standalone async function that takes:
- params: the tool's decoded params model
- ctx: HandlerContext - caller credential plus the Airtable client

And returns the parsed Airtable response body.
"""

from .base import HandlerContext, HandlerFunc
from .batch import handle_create_records, handle_delete_records, handle_update_records
from .metadata import (
    handle_get_base_info,
    handle_get_field_info,
    handle_get_table_info,
    handle_get_view_info,
    handle_list_fields,
    handle_list_tables,
    handle_list_views,
)
from .records import (
    handle_create_record,
    handle_delete_record,
    handle_get_record,
    handle_list_records,
    handle_update_record,
)

__all__ = [
    # Base
    "HandlerContext",
    "HandlerFunc",
    # Metadata handlers
    "handle_get_base_info",
    "handle_list_tables",
    "handle_get_table_info",
    "handle_list_views",
    "handle_get_view_info",
    "handle_list_fields",
    "handle_get_field_info",
    # Record handlers
    "handle_list_records",
    "handle_get_record",
    "handle_create_record",
    "handle_update_record",
    "handle_delete_record",
    # Batch handlers
    "handle_create_records",
    "handle_update_records",
    "handle_delete_records",
]
