"""Single-record handlers: list, get, create, update, delete."""

from typing import Any

from ...models.requests import (
    CreateRecordParams,
    ListRecordsParams,
    RecordParams,
    UpdateRecordParams,
)
from .base import HandlerContext


async def handle_list_records(params: ListRecordsParams, ctx: HandlerContext) -> Any:
    """List records with optional filtering, sorting, field selection and paging.

    Only one page is fetched; callers page through with the returned ``offset``.
    """
    return await ctx.client.list_records(
        ctx.credential,
        params.table_id,
        page_size=params.page_size,
        offset=params.offset,
        filter_by_formula=params.filter_by_formula,
        sort=params.sort,
        fields=params.fields,
        view=params.view,
    )


async def handle_get_record(params: RecordParams, ctx: HandlerContext) -> Any:
    return await ctx.client.get_record(ctx.credential, params.table_id, params.record_id)


async def handle_create_record(params: CreateRecordParams, ctx: HandlerContext) -> Any:
    return await ctx.client.create_record(ctx.credential, params.table_id, params.fields)


async def handle_update_record(params: UpdateRecordParams, ctx: HandlerContext) -> Any:
    return await ctx.client.update_record(
        ctx.credential, params.table_id, params.record_id, params.fields
    )


async def handle_delete_record(params: RecordParams, ctx: HandlerContext) -> Any:
    return await ctx.client.delete_record(ctx.credential, params.table_id, params.record_id)
