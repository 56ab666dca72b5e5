"""Built-in tools for testing and demos."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from atlas.types.context import ToolHandlerContext

from .interfaces import tool
from .registry import get_tool_registry


async def _current_time(args: Any, context: ToolHandlerContext) -> str:
    return datetime.now(timezone.utc).strftime("%H:%M:%S %Z")


async def _current_date(args: Any, context: ToolHandlerContext) -> str:
    return datetime.now(timezone.utc).date().isoformat()


get_current_time = tool(
    {
        "name": "get_current_time",
        "description": "Gets the current time (UTC).",
        "parameters": {"type": "object", "properties": {}},
    },
    _current_time,
)

get_current_date = tool(
    {
        "name": "get_current_date",
        "description": "Gets the current date (UTC).",
        "parameters": {"type": "object", "properties": {}},
    },
    _current_date,
)


# Register on import so agents configured from settings can resolve them by name.
_registry = get_tool_registry()
_registry.register_tool(get_current_time)
_registry.register_tool(get_current_date)


__all__ = ["get_current_time", "get_current_date"]
