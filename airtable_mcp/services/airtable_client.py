"""Airtable REST API client.

Translates one logical operation into exactly one HTTP call against the
Airtable API and turns the outcome into parsed JSON or a typed error.

The client holds no credentials: every call takes the caller's Credential,
so a single instance can serve many concurrent requests for different bases.
"""

import json
import logging
from dataclasses import dataclass, field
from typing import Any

import httpx

from ..config import settings
from ..errors import MalformedSuccessBodyError, UpstreamUnreachableError, upstream_error_for
from ..models.enums import HttpMethod
from ..models.requests import Credential, SortSpec

logger = logging.getLogger(__name__)

# Endpoints with these prefixes are not scoped under the base ID
UNSCOPED_PREFIXES = ("meta/", "bases/")


@dataclass(frozen=True)
class UpstreamRequest:
    """A fully-resolved Airtable call: method, path relative to the API root, query, body."""

    method: HttpMethod
    path: str
    query_params: dict[str, str] = field(default_factory=dict)
    body: dict[str, Any] | None = None


def _compact_json(value: Any) -> str:
    return json.dumps(value, separators=(",", ":"))


def mask_api_key(api_key: str | None) -> str:
    """Short, non-reversible prefix of an API key for diagnostics."""
    if not api_key:
        return "[NOT SET]"
    # At most half of the key is shown.
    return f"{api_key[: min(8, len(api_key) // 2)]}..."


class AirtableClient:
    """Async adapter over the Airtable REST API."""

    def __init__(
        self,
        api_url: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        timeout: float | None = None,
    ):
        self.api_url = (api_url or settings.airtable_api_url).rstrip("/")
        self._transport = transport
        self._timeout = timeout if timeout is not None else settings.upstream_timeout

    # ============ REQUEST BUILDING ============

    @staticmethod
    def build_request(
        credential: Credential,
        endpoint: str,
        method: HttpMethod = HttpMethod.GET,
        body: dict[str, Any] | None = None,
        query_params: dict[str, str] | None = None,
    ) -> UpstreamRequest:
        """Resolve an endpoint into an UpstreamRequest.

        Metadata endpoints (``meta/...``, ``bases/...``) are used as-is; all
        others are record endpoints and get scoped under the caller's base.
        GET requests never carry a body.
        """
        if endpoint.startswith(UNSCOPED_PREFIXES):
            path = endpoint
        else:
            path = f"{credential.base_id}/{endpoint}"
        return UpstreamRequest(
            method=method,
            path=path,
            query_params=dict(query_params or {}),
            body=body if method != HttpMethod.GET else None,
        )

    def url_for(self, request: UpstreamRequest) -> str:
        return f"{self.api_url}/{request.path}"

    @staticmethod
    def headers_for(credential: Credential) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {credential.api_key}",
            "Content-Type": "application/json",
        }

    # ============ TRANSPORT ============

    async def send(self, credential: Credential, request: UpstreamRequest) -> Any:
        """Issue the request and return the parsed JSON body.

        Raises:
            UpstreamClientError / UpstreamServerError: non-2xx status
            UpstreamUnreachableError: network-level failure
            MalformedSuccessBodyError: 2xx with a body that is not JSON
        """
        url = self.url_for(request)
        logger.debug(
            f"Airtable {request.method} {url} params={request.query_params} "
            f"key={mask_api_key(credential.api_key)}"
        )

        try:
            async with httpx.AsyncClient(transport=self._transport, timeout=self._timeout) as client:
                response = await client.request(
                    request.method.value,
                    url,
                    headers=self.headers_for(credential),
                    params=request.query_params or None,
                    content=_compact_json(request.body) if request.body is not None else None,
                )
        except httpx.RequestError as e:
            logger.error(f"API call failed: {request.method} {url} - {e!r}")
            raise UpstreamUnreachableError(str(e) or type(e).__name__) from e

        if not response.is_success:
            logger.error(f"API call failed: {request.method} {url} - {response.status_code}")
            raise upstream_error_for(response.status_code, response.reason_phrase, response.text)

        try:
            return response.json()
        except ValueError as e:
            logger.error(f"Non-JSON success body from {request.method} {url}")
            raise MalformedSuccessBodyError(response.status_code, response.text) from e

    async def call(
        self,
        credential: Credential,
        endpoint: str,
        method: HttpMethod = HttpMethod.GET,
        body: dict[str, Any] | None = None,
        query_params: dict[str, str] | None = None,
    ) -> Any:
        request = self.build_request(credential, endpoint, method, body, query_params)
        return await self.send(credential, request)

    # ============ BASE / TABLE METADATA ============

    async def get_base_info(self, credential: Credential) -> Any:
        return await self.call(credential, f"meta/bases/{credential.base_id}")

    async def list_tables(self, credential: Credential) -> Any:
        return await self.call(credential, f"meta/bases/{credential.base_id}/tables")

    async def get_table_info(self, credential: Credential, table_id: str) -> Any:
        return await self.call(credential, f"meta/bases/{credential.base_id}/tables/{table_id}")

    async def list_views(self, credential: Credential, table_id: str) -> Any:
        return await self.call(credential, f"meta/bases/{credential.base_id}/tables/{table_id}/views")

    async def get_view_info(self, credential: Credential, table_id: str, view_id: str) -> Any:
        return await self.call(
            credential, f"meta/bases/{credential.base_id}/tables/{table_id}/views/{view_id}"
        )

    async def list_fields(self, credential: Credential, table_id: str) -> Any:
        return await self.call(credential, f"meta/bases/{credential.base_id}/tables/{table_id}/fields")

    async def get_field_info(self, credential: Credential, table_id: str, field_id: str) -> Any:
        return await self.call(
            credential, f"meta/bases/{credential.base_id}/tables/{table_id}/fields/{field_id}"
        )

    # ============ RECORDS ============

    @staticmethod
    def list_records_query(
        page_size: int | None = None,
        offset: str | None = None,
        filter_by_formula: str | None = None,
        sort: list[SortSpec] | None = None,
        fields: list[str] | None = None,
        view: str | None = None,
    ) -> dict[str, str]:
        """Encode list_records options as Airtable query parameters.

        Scalars go through as plain strings. ``sort`` and ``fields`` are each
        JSON-encoded into a single parameter, not repeated key=value pairs.
        """
        query: dict[str, str] = {}
        if page_size:
            query["pageSize"] = str(page_size)
        if offset:
            query["offset"] = offset
        if filter_by_formula:
            query["filterByFormula"] = filter_by_formula
        if view:
            query["view"] = view
        if sort:
            query["sort"] = _compact_json([s.model_dump(mode="json", exclude_none=True) for s in sort])
        if fields:
            query["fields"] = _compact_json(fields)
        return query

    async def list_records(
        self,
        credential: Credential,
        table_id: str,
        page_size: int | None = None,
        offset: str | None = None,
        filter_by_formula: str | None = None,
        sort: list[SortSpec] | None = None,
        fields: list[str] | None = None,
        view: str | None = None,
    ) -> Any:
        query = self.list_records_query(page_size, offset, filter_by_formula, sort, fields, view)
        return await self.call(credential, table_id, query_params=query)

    async def get_record(self, credential: Credential, table_id: str, record_id: str) -> Any:
        return await self.call(credential, f"{table_id}/{record_id}")

    async def create_record(self, credential: Credential, table_id: str, fields: dict[str, Any]) -> Any:
        return await self.call(credential, table_id, HttpMethod.POST, {"fields": fields})

    async def update_record(
        self, credential: Credential, table_id: str, record_id: str, fields: dict[str, Any]
    ) -> Any:
        # PATCH: fields not listed are left untouched on the record
        return await self.call(credential, f"{table_id}/{record_id}", HttpMethod.PATCH, {"fields": fields})

    async def delete_record(self, credential: Credential, table_id: str, record_id: str) -> Any:
        return await self.call(credential, f"{table_id}/{record_id}", HttpMethod.DELETE)

    # ============ BATCH ============

    async def create_records(
        self, credential: Credential, table_id: str, records: list[dict[str, Any]]
    ) -> Any:
        return await self.call(credential, table_id, HttpMethod.POST, {"records": records})

    async def update_records(
        self, credential: Credential, table_id: str, records: list[dict[str, Any]]
    ) -> Any:
        return await self.call(credential, table_id, HttpMethod.PATCH, {"records": records})

    async def delete_records(self, credential: Credential, table_id: str, record_ids: list[str]) -> Any:
        # Airtable takes batch deletes as a DELETE with a JSON body
        body = {"records": [{"id": record_id} for record_id in record_ids]}
        return await self.call(credential, table_id, HttpMethod.DELETE, body)
