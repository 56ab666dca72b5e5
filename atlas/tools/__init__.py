from .interfaces import Tool, ToolHandler, tool
from .registry import ToolRegistry, get_tool_registry
from .schema import definitions_to_langchain_schemas

__all__ = ["Tool", "ToolHandler", "tool", "ToolRegistry", "get_tool_registry", "definitions_to_langchain_schemas"]
