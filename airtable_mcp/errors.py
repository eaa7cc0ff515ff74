"""Error taxonomy for tool dispatch and upstream Airtable calls.

Every error carries a JSON-RPC ``code`` so the MCP transport can report it
without inspecting the message. Messages are safe to return to clients: they
never contain the API key.
"""

from typing import Any

from .mcp.jsonrpc import INVALID_PARAMS, SERVER_ERROR

MISSING_CREDENTIAL = SERVER_ERROR - 1
UPSTREAM_CLIENT_ERROR = SERVER_ERROR - 2
UPSTREAM_SERVER_ERROR = SERVER_ERROR - 3
UPSTREAM_UNREACHABLE = SERVER_ERROR - 4
MALFORMED_SUCCESS_BODY = SERVER_ERROR - 5


class AirtableMCPError(Exception):
    """Base class for all errors raised by the dispatch layer."""

    code: int = SERVER_ERROR

    def __init__(self, message: str, operation: str | None = None):
        super().__init__(message)
        self.message = message
        # Tool that was running; the dispatcher fills this in when it is unset.
        self.operation = operation


class UnknownOperationError(AirtableMCPError):
    """Requested tool is not in the registry."""

    code = INVALID_PARAMS

    def __init__(self, operation_name: str):
        self.operation_name = operation_name
        super().__init__(f"Unknown tool: {operation_name}", operation_name)


class InvalidArgumentsError(AirtableMCPError):
    """Tool arguments do not match the tool's input contract."""

    code = INVALID_PARAMS

    def __init__(self, operation_name: str, errors: list[dict[str, Any]]):
        self.operation_name = operation_name
        self.errors = errors
        details = "; ".join(
            f"{'.'.join(str(p) for p in err.get('loc', ()))}: {err.get('msg', 'invalid')}"
            for err in errors
        )
        super().__init__(f"Invalid parameter for {operation_name}: {details}", operation_name)


class MissingCredentialError(AirtableMCPError):
    """API key or base ID was not supplied."""

    code = MISSING_CREDENTIAL

    def __init__(self, missing: list[str]):
        self.missing = missing
        super().__init__(
            "Airtable API key and base ID required. "
            "Set x-airtable-api-key and x-airtable-base-id headers. "
            f"Missing: {', '.join(missing)}"
        )


class UpstreamError(AirtableMCPError):
    """Airtable answered with a non-2xx status."""

    def __init__(self, status_code: int, reason: str, body: str, operation: str | None = None):
        self.status_code = status_code
        self.reason = reason
        self.body = body
        super().__init__(f"Airtable API error: {status_code} {reason} - {body}", operation)


class UpstreamClientError(UpstreamError):
    """4xx from Airtable (bad request, auth, not found, validation)."""

    code = UPSTREAM_CLIENT_ERROR


class UpstreamServerError(UpstreamError):
    """5xx from Airtable."""

    code = UPSTREAM_SERVER_ERROR


class UpstreamUnreachableError(AirtableMCPError):
    """Network-level failure reaching Airtable (DNS, refused, transport timeout)."""

    code = UPSTREAM_UNREACHABLE

    def __init__(self, cause: str, operation: str | None = None):
        self.cause = cause
        super().__init__(f"Airtable API unreachable: {cause}", operation)


class MalformedSuccessBodyError(AirtableMCPError):
    """2xx response whose body is not valid JSON."""

    code = MALFORMED_SUCCESS_BODY

    def __init__(self, status_code: int, body: str, operation: str | None = None):
        self.status_code = status_code
        self.body = body
        super().__init__(
            f"Airtable returned non-JSON body with status {status_code}: {body[:200]}", operation
        )


def upstream_error_for(status_code: int, reason: str, body: str) -> UpstreamError:
    """Pick the client or server error class for a non-2xx status."""
    if status_code >= 500:
        return UpstreamServerError(status_code, reason, body)
    return UpstreamClientError(status_code, reason, body)
