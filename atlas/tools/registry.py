"""Process-wide catalogue of tool handlers, matched to agents by declared tool name."""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Tuple

from atlas.tools.interfaces import Tool


@dataclass
class ToolRegistry:
    """Tools keyed by ``definition.name``.

    Registering the same Tool object twice is a no-op. Registering a different
    tool under a name that is already taken raises ValueError unless
    ``replace=True``.
    """

    _tools: Dict[str, Tool] = field(default_factory=dict)

    def register_tool(self, tool: Tool, *, replace: bool = False) -> None:
        if not tool.name:
            raise ValueError("Tool name must be non-empty")
        existing = self._tools.get(tool.name)
        if existing is not None and existing is not tool and not replace:
            raise ValueError(f'Tool "{tool.name}" is already registered')
        self._tools[tool.name] = tool

    def unregister_tool(self, name: str) -> Optional[Tool]:
        """Remove and return the tool registered under ``name``, if any."""
        return self._tools.pop(name, None)

    def get_tool(self, name: str) -> Optional[Tool]:
        return self._tools.get(name)

    def resolve(self, names: Iterable[str]) -> Tuple[List[Tool], List[str]]:
        """Split declared tool names into registered tools (in order) and names with no handler."""
        found: List[Tool] = []
        missing: List[str] = []
        for name in names:
            tool = self._tools.get(name)
            if tool is None:
                missing.append(name)
            else:
                found.append(tool)
        return found, missing

    def list_tools(self) -> Dict[str, Tool]:
        """Return a copy of the name -> tool mapping."""
        return dict(self._tools)

    def clear(self) -> None:
        self._tools.clear()


_global_registry: Optional[ToolRegistry] = None
_global_registry_lock = threading.Lock()


def get_tool_registry() -> ToolRegistry:
    """Return the process-wide ToolRegistry singleton (thread-safe)."""
    global _global_registry
    if _global_registry is None:
        with _global_registry_lock:
            if _global_registry is None:
                _global_registry = ToolRegistry()
    return _global_registry


__all__ = ["ToolRegistry", "get_tool_registry"]
