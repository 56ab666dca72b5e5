"""Tool contract: a definition advertised to providers plus a handler the runtime invokes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Dict, Union

from atlas.types.agents import ToolDefinition
from atlas.types.context import ToolHandlerContext


# Handlers may be ``async def`` or plain callables; plain ones run in a worker thread.
ToolHandler = Callable[[Any, ToolHandlerContext], Union[Any, Awaitable[Any]]]


@dataclass(frozen=True)
class Tool:
    """A callable tool. Only ``definition`` is ever exposed to a provider."""

    definition: ToolDefinition
    handler: ToolHandler

    @property
    def name(self) -> str:
        return self.definition.name


def tool(definition: ToolDefinition | Dict[str, Any], handler: ToolHandler) -> Tool:
    """Create a Tool from a definition (or a dict of definition fields) and a handler."""
    if not isinstance(definition, ToolDefinition):
        definition = ToolDefinition.model_validate(definition)
    return Tool(definition=definition, handler=handler)


__all__ = ["ToolHandler", "Tool", "tool"]
