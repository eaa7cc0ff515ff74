"""Tests for ToolDispatcher.invoke (engine/dispatcher.py)."""

import json

import httpx
import pytest

from airtable_mcp.errors import (
    InvalidArgumentsError,
    MalformedSuccessBodyError,
    MissingCredentialError,
    UnknownOperationError,
    UpstreamClientError,
    UpstreamUnreachableError,
)
from airtable_mcp.mcp import INVALID_PARAMS
from airtable_mcp.models import Credential


class TestUnknownAndInvalid:
    """Failures detected before any upstream call."""

    @pytest.mark.asyncio
    async def test_unknown_tool_makes_no_upstream_call(self, dispatcher, upstream, credential):
        with pytest.raises(UnknownOperationError) as exc_info:
            await dispatcher.invoke("not_a_real_tool", {}, credential)

        assert exc_info.value.operation_name == "not_a_real_tool"
        assert "not_a_real_tool" in str(exc_info.value)
        assert exc_info.value.code == INVALID_PARAMS
        assert upstream.requests == []

    @pytest.mark.asyncio
    async def test_unknown_tool_reported_before_missing_credential(self, dispatcher, upstream):
        with pytest.raises(UnknownOperationError):
            await dispatcher.invoke("not_a_real_tool", {}, None)

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "credential,missing",
        [
            (None, ["api_key", "base_id"]),
            (Credential(api_key="", base_id="appX"), ["api_key"]),
            (Credential(api_key="patX", base_id=""), ["base_id"]),
        ],
    )
    async def test_missing_credential(self, dispatcher, upstream, credential, missing):
        with pytest.raises(MissingCredentialError) as exc_info:
            await dispatcher.invoke("list_tables", {}, credential)

        assert exc_info.value.missing == missing
        assert upstream.requests == []

    @pytest.mark.asyncio
    async def test_missing_required_argument(self, dispatcher, upstream, credential):
        with pytest.raises(InvalidArgumentsError) as exc_info:
            await dispatcher.invoke("get_record", {"tableId": "tbl1"}, credential)

        assert "recordId" in str(exc_info.value)
        assert upstream.requests == []

    @pytest.mark.asyncio
    async def test_wrong_argument_type(self, dispatcher, upstream, credential):
        with pytest.raises(InvalidArgumentsError):
            await dispatcher.invoke("create_record", {"tableId": "tbl1", "fields": "Name=A"}, credential)

        assert upstream.requests == []

    @pytest.mark.asyncio
    async def test_bad_sort_direction(self, dispatcher, upstream, credential):
        with pytest.raises(InvalidArgumentsError):
            await dispatcher.invoke(
                "list_records",
                {"tableId": "tbl1", "sort": [{"field": "Name", "direction": "up"}]},
                credential,
            )

        assert upstream.requests == []


class TestRouting:
    """Each tool reaches exactly one upstream request."""

    @pytest.mark.asyncio
    async def test_get_record(self, dispatcher, upstream, credential):
        upstream.respond(json_body={"id": "rec1", "fields": {}})

        result = await dispatcher.invoke("get_record", {"tableId": "tbl1", "recordId": "rec1"}, credential)

        assert result == {"id": "rec1", "fields": {}}
        assert len(upstream.requests) == 1
        assert upstream.last.method == "GET"
        assert upstream.last.url.path == "/v0/appBASE123/tbl1/rec1"
        assert upstream.last.headers["Authorization"] == "Bearer patTESTKEY1234567890"
        assert upstream.last.content == b""

    @pytest.mark.asyncio
    async def test_list_records_encodes_sort_and_fields_as_json(self, dispatcher, upstream, credential):
        sort = [{"field": "Name", "direction": "asc"}]
        fields = ["Name", "Status"]

        await dispatcher.invoke(
            "list_records",
            {"tableId": "tbl1", "sort": sort, "fields": fields, "pageSize": 10, "view": "Grid"},
            credential,
        )

        params = upstream.last.url.params
        assert upstream.last.method == "GET"
        assert json.loads(params["sort"]) == sort
        assert json.loads(params["fields"]) == fields
        assert params["pageSize"] == "10"
        assert params["view"] == "Grid"
        assert "sort[]" not in params
        assert "fields[]" not in params

    @pytest.mark.asyncio
    async def test_list_records_filter_formula(self, dispatcher, upstream, credential):
        await dispatcher.invoke(
            "list_records", {"tableId": "tbl1", "filterByFormula": "NOT({Done})"}, credential
        )

        assert upstream.last.url.params["filterByFormula"] == "NOT({Done})"

    @pytest.mark.asyncio
    async def test_create_records_one_post(self, dispatcher, upstream, credential):
        records = [{"fields": {"Name": "A"}}, {"fields": {"Name": "B"}}]

        await dispatcher.invoke("create_records", {"tableId": "tbl1", "records": records}, credential)

        assert len(upstream.requests) == 1
        assert upstream.last.method == "POST"
        assert upstream.last_json() == {"records": records}

    @pytest.mark.asyncio
    async def test_oversized_batch_is_not_split(self, dispatcher, upstream, credential):
        upstream.respond(status_code=422, text='{"error":{"type":"INVALID_RECORDS"}}')
        records = [{"fields": {"Name": str(i)}} for i in range(11)]

        with pytest.raises(UpstreamClientError):
            await dispatcher.invoke("create_records", {"tableId": "tbl1", "records": records}, credential)

        assert len(upstream.requests) == 1
        assert len(upstream.last_json()["records"]) == 11

    @pytest.mark.asyncio
    async def test_update_records_keeps_extra_keys(self, dispatcher, upstream, credential):
        records = [{"id": "rec1", "fields": {"Name": "A"}}]

        await dispatcher.invoke("update_records", {"tableId": "tbl1", "records": records}, credential)

        assert upstream.last.method == "PATCH"
        assert upstream.last_json() == {"records": records}

    @pytest.mark.asyncio
    async def test_delete_records_body(self, dispatcher, upstream, credential):
        await dispatcher.invoke("delete_records", {"tableId": "tbl1", "recordIds": ["rec1", "rec2"]}, credential)

        assert len(upstream.requests) == 1
        assert upstream.last.method == "DELETE"
        assert upstream.last_json() == {"records": [{"id": "rec1"}, {"id": "rec2"}]}

    @pytest.mark.asyncio
    async def test_update_record_is_partial(self, dispatcher, upstream, credential):
        await dispatcher.invoke(
            "update_record", {"tableId": "tbl1", "recordId": "rec1", "fields": {"Status": "Done"}}, credential
        )

        assert upstream.last.method == "PATCH"
        assert upstream.last_json() == {"fields": {"Status": "Done"}}

    @pytest.mark.asyncio
    async def test_metadata_tool_ignores_unknown_arguments(self, dispatcher, upstream, credential):
        await dispatcher.invoke("get_view_info", {"tableId": "tbl1", "viewId": "viw1", "extra": 1}, credential)

        assert upstream.last.url.path == "/v0/meta/bases/appBASE123/tables/tbl1/views/viw1"

    @pytest.mark.asyncio
    async def test_none_arguments_for_no_param_tool(self, dispatcher, upstream, credential):
        await dispatcher.invoke("get_base_info", None, credential)

        assert upstream.last.url.path == "/v0/meta/bases/appBASE123"


class TestErrorPropagation:
    """Failures propagate with no retry and carry the tool name."""

    @pytest.mark.asyncio
    async def test_422_propagates_with_raw_body(self, dispatcher, upstream, credential):
        upstream.respond(status_code=422, text='{"error":"INVALID_REQUEST"}')

        with pytest.raises(UpstreamClientError) as exc_info:
            await dispatcher.invoke("create_record", {"tableId": "tbl1", "fields": {"Name": "A"}}, credential)

        assert "422" in str(exc_info.value)
        assert '{"error":"INVALID_REQUEST"}' in str(exc_info.value)
        assert len(upstream.requests) == 1
        assert exc_info.value.operation == "create_record"
        assert exc_info.value.status_code == 422

    @pytest.mark.asyncio
    async def test_credentials_are_per_call(self, dispatcher, upstream, credential):
        other = Credential(api_key="patOTHER", base_id="appOTHER")

        await dispatcher.invoke("get_record", {"tableId": "t", "recordId": "r"}, credential)
        await dispatcher.invoke("get_record", {"tableId": "t", "recordId": "r"}, other)

        first, second = upstream.requests
        assert first.url.path == "/v0/appBASE123/t/r"
        assert second.url.path == "/v0/appOTHER/t/r"
        assert second.headers["Authorization"] == "Bearer patOTHER"

    @pytest.mark.asyncio
    async def test_unreachable_names_the_tool(self, dispatcher, upstream, credential):
        upstream.fail_with(httpx.ConnectError("connection refused"))

        with pytest.raises(UpstreamUnreachableError) as exc_info:
            await dispatcher.invoke("list_tables", {}, credential)

        assert exc_info.value.operation == "list_tables"

    @pytest.mark.asyncio
    async def test_malformed_body_names_the_tool(self, dispatcher, upstream, credential):
        upstream.respond(status_code=200, text="<html>gateway</html>")

        with pytest.raises(MalformedSuccessBodyError) as exc_info:
            await dispatcher.invoke("get_record", {"tableId": "t", "recordId": "r"}, credential)

        assert exc_info.value.operation == "get_record"

    @pytest.mark.asyncio
    async def test_pre_dispatch_errors_name_the_tool(self, dispatcher, upstream, credential):
        with pytest.raises(MissingCredentialError) as missing:
            await dispatcher.invoke("list_tables", {}, None)
        with pytest.raises(InvalidArgumentsError) as invalid:
            await dispatcher.invoke("get_record", {"tableId": "t"}, credential)

        assert missing.value.operation == "list_tables"
        assert invalid.value.operation == "get_record"
