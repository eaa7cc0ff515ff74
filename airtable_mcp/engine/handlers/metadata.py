"""Base, table, view and field metadata handlers."""

from typing import Any

from ...models.requests import FieldParams, NoParams, TableParams, ViewParams
from .base import HandlerContext


async def handle_get_base_info(params: NoParams, ctx: HandlerContext) -> Any:
    return await ctx.client.get_base_info(ctx.credential)


async def handle_list_tables(params: NoParams, ctx: HandlerContext) -> Any:
    return await ctx.client.list_tables(ctx.credential)


async def handle_get_table_info(params: TableParams, ctx: HandlerContext) -> Any:
    return await ctx.client.get_table_info(ctx.credential, params.table_id)


async def handle_list_views(params: TableParams, ctx: HandlerContext) -> Any:
    return await ctx.client.list_views(ctx.credential, params.table_id)


async def handle_get_view_info(params: ViewParams, ctx: HandlerContext) -> Any:
    return await ctx.client.get_view_info(ctx.credential, params.table_id, params.view_id)


async def handle_list_fields(params: TableParams, ctx: HandlerContext) -> Any:
    return await ctx.client.list_fields(ctx.credential, params.table_id)


async def handle_get_field_info(params: FieldParams, ctx: HandlerContext) -> Any:
    return await ctx.client.get_field_info(ctx.credential, params.table_id, params.field_id)
