"""Tool dispatch engine: handler table and dispatcher."""

from .dispatcher import TOOL_HANDLERS, ToolBinding, ToolDispatcher, require_credential

__all__ = ["TOOL_HANDLERS", "ToolBinding", "ToolDispatcher", "require_credential"]
