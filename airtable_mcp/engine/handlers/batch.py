"""Batch record handlers.

Each call is sent to Airtable as a single request regardless of how many
records it carries. Airtable's 10-record limit is not checked here; an
oversized batch comes back as an upstream 422.
"""

from typing import Any

from ...models.requests import CreateRecordsParams, DeleteRecordsParams, UpdateRecordsParams
from .base import HandlerContext


async def handle_create_records(params: CreateRecordsParams, ctx: HandlerContext) -> Any:
    records = [r.model_dump() for r in params.records]
    return await ctx.client.create_records(ctx.credential, params.table_id, records)


async def handle_update_records(params: UpdateRecordsParams, ctx: HandlerContext) -> Any:
    records = [r.model_dump() for r in params.records]
    return await ctx.client.update_records(ctx.credential, params.table_id, records)


async def handle_delete_records(params: DeleteRecordsParams, ctx: HandlerContext) -> Any:
    return await ctx.client.delete_records(ctx.credential, params.table_id, params.record_ids)
