"""Response models for HTTP endpoints."""

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(default="ok", description="Service status")
    service: str = Field(default="airtable-mcp-server", description="Service name")
    version: str = Field(..., description="Server version")
    type: str = Field(default="HTTP Streamable MCP Server", description="Transport type")


class SetCredentialsResponse(BaseModel):
    """Result of credential validation."""

    success: bool = Field(..., description="Whether Airtable accepted the credentials")
    message: str = Field(..., description="Human-readable status message")
