"""Convert tool definitions to LangChain/OpenAI-compatible tool schemas for bind_tools()."""

from __future__ import annotations

from typing import Any, Dict, List, Sequence, Union

from atlas.types.agents import ToolDefinition
from atlas.types.requests import ProviderTool


def definitions_to_langchain_schemas(
    definitions: Sequence[Union[ToolDefinition, ProviderTool]],
) -> List[Dict[str, Any]]:
    """Convert tool definitions to OpenAI-format dicts accepted by LangChain bind_tools().

    Returns a list of dicts: {"type": "function", "function": {"name": ..., "description": ..., "parameters": ...}}
    """
    result = []
    for definition in definitions:
        result.append({
            "type": "function",
            "function": {
                "name": definition.name,
                "description": definition.description or "",
                "parameters": definition.parameters.model_dump(exclude_none=True),
            },
        })
    return result


__all__ = ["definitions_to_langchain_schemas"]
