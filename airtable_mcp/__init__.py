"""Airtable MCP Server - MCP tool access to Airtable bases over HTTP."""

__version__ = "1.0.0"
