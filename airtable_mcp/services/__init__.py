"""Upstream service clients."""

from .airtable_client import AirtableClient, UpstreamRequest, mask_api_key

__all__ = ["AirtableClient", "UpstreamRequest", "mask_api_key"]
