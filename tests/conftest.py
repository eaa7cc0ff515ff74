"""Shared fixtures: credentials and a recording fake of the Airtable API."""

import json

import httpx
import pytest

from airtable_mcp.engine import ToolDispatcher
from airtable_mcp.models import Credential
from airtable_mcp.services import AirtableClient


class UpstreamRecorder:
    """httpx transport that records every request and replies with a canned response."""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.status_code = 200
        self.json_body = {"ok": True}
        self.text: str | None = None
        self.error: Exception | None = None
        self.transport = httpx.MockTransport(self._handle)

    def respond(self, status_code=200, json_body=None, text=None):
        self.status_code = status_code
        self.json_body = json_body if json_body is not None else {}
        self.text = text

    def fail_with(self, error: Exception):
        self.error = error

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        if self.text is not None:
            return httpx.Response(self.status_code, text=self.text)
        return httpx.Response(self.status_code, json=self.json_body)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self):
        content = self.last.content
        return json.loads(content) if content else None


@pytest.fixture
def credential():
    return Credential(api_key="patTESTKEY1234567890", base_id="appBASE123")


@pytest.fixture
def upstream():
    return UpstreamRecorder()


@pytest.fixture
def airtable_client(upstream):
    return AirtableClient(api_url="https://api.airtable.com/v0", transport=upstream.transport)


@pytest.fixture
def dispatcher(airtable_client):
    return ToolDispatcher(airtable_client)
