"""Tool dispatcher: routes a tool name plus untyped arguments to one Airtable call."""

import logging
from typing import Any, NamedTuple

from pydantic import ValidationError

from ..errors import (
    AirtableMCPError,
    InvalidArgumentsError,
    MissingCredentialError,
    UnknownOperationError,
)
from ..mcp.tool_defs import find_operation, list_operations
from ..models.enums import ToolName
from ..models.requests import (
    CreateRecordParams,
    CreateRecordsParams,
    Credential,
    DeleteRecordsParams,
    FieldParams,
    ListRecordsParams,
    NoParams,
    RecordParams,
    TableParams,
    ToolParams,
    UpdateRecordParams,
    UpdateRecordsParams,
    ViewParams,
)
from ..services.airtable_client import AirtableClient, mask_api_key
from . import handlers
from .handlers import HandlerContext, HandlerFunc

logger = logging.getLogger(__name__)


class ToolBinding(NamedTuple):
    """How a tool decodes its arguments and which handler runs it."""

    params_model: type[ToolParams]
    handler: HandlerFunc


TOOL_HANDLERS: dict[ToolName, ToolBinding] = {
    # Metadata
    ToolName.GET_BASE_INFO: ToolBinding(NoParams, handlers.handle_get_base_info),
    ToolName.LIST_TABLES: ToolBinding(NoParams, handlers.handle_list_tables),
    ToolName.GET_TABLE_INFO: ToolBinding(TableParams, handlers.handle_get_table_info),
    ToolName.LIST_VIEWS: ToolBinding(TableParams, handlers.handle_list_views),
    ToolName.GET_VIEW_INFO: ToolBinding(ViewParams, handlers.handle_get_view_info),
    ToolName.LIST_FIELDS: ToolBinding(TableParams, handlers.handle_list_fields),
    ToolName.GET_FIELD_INFO: ToolBinding(FieldParams, handlers.handle_get_field_info),
    # Records
    ToolName.LIST_RECORDS: ToolBinding(ListRecordsParams, handlers.handle_list_records),
    ToolName.GET_RECORD: ToolBinding(RecordParams, handlers.handle_get_record),
    ToolName.CREATE_RECORD: ToolBinding(CreateRecordParams, handlers.handle_create_record),
    ToolName.UPDATE_RECORD: ToolBinding(UpdateRecordParams, handlers.handle_update_record),
    ToolName.DELETE_RECORD: ToolBinding(RecordParams, handlers.handle_delete_record),
    # Batch
    ToolName.CREATE_RECORDS: ToolBinding(CreateRecordsParams, handlers.handle_create_records),
    ToolName.UPDATE_RECORDS: ToolBinding(UpdateRecordsParams, handlers.handle_update_records),
    ToolName.DELETE_RECORDS: ToolBinding(DeleteRecordsParams, handlers.handle_delete_records),
}


def require_credential(credential: Credential | None) -> Credential:
    """Raise MissingCredentialError unless both API key and base ID are present."""
    missing = []
    if credential is None or not credential.api_key:
        missing.append("api_key")
    if credential is None or not credential.base_id:
        missing.append("base_id")
    if missing:
        raise MissingCredentialError(missing)
    return credential


_unbound = {op.name for op in list_operations()} ^ set(TOOL_HANDLERS)
if _unbound:
    raise RuntimeError(f"Tool registry and handler table disagree: {sorted(_unbound)}")


class ToolDispatcher:
    """Single entry point for tool invocation.

    Stateless apart from the Airtable client, which itself holds no
    credentials, so one dispatcher serves all concurrent requests.
    """

    def __init__(self, client: AirtableClient | None = None):
        self.client = client or AirtableClient()

    async def invoke(
        self,
        operation_name: str,
        arguments: dict[str, Any] | None,
        credential: Credential | None,
    ) -> Any:
        """Run a tool and return Airtable's parsed response.

        Every AirtableMCPError leaving this method has ``operation`` set.

        Raises:
            UnknownOperationError: tool is not registered (no upstream call)
            MissingCredentialError: API key or base ID absent
            InvalidArgumentsError: arguments do not fit the tool's contract
            UpstreamError / UpstreamUnreachableError / MalformedSuccessBodyError:
                propagated from the Airtable client, tagged with the tool name
        """
        operation = find_operation(operation_name)
        if operation is None:
            raise UnknownOperationError(operation_name)

        binding = TOOL_HANDLERS[operation.name]
        try:
            credential = require_credential(credential)
            try:
                params = binding.params_model.model_validate(arguments or {})
            except ValidationError as e:
                raise InvalidArgumentsError(operation_name, e.errors(include_url=False)) from e

            logger.info(
                f"Invoking {operation_name} on base {credential.base_id} "
                f"(key {mask_api_key(credential.api_key)})"
            )
            ctx = HandlerContext(credential=credential, client=self.client)
            return await binding.handler(params, ctx)
        except AirtableMCPError as e:
            if e.operation is None:
                e.operation = operation_name
            raise
