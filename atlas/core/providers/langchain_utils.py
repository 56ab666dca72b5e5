"""Shared LangChain conversion used by the LangChain-backed providers."""

from __future__ import annotations

from typing import Any, List

from langchain_core.messages import AIMessage, BaseMessage, HumanMessage, SystemMessage, ToolMessage

from atlas.types.messages import new_id
from atlas.types.requests import ProviderRequest
from atlas.types.streaming import ProviderResponseChunk, tool_call_chunk


def content_text(content: Any) -> str:
    """Flatten LangChain message content (a string or a list of blocks) to text."""
    if content is None:
        return ""
    if isinstance(content, str):
        return content
    parts = []
    for block in content:
        if isinstance(block, str):
            parts.append(block)
        elif isinstance(block, dict) and block.get("type") == "text":
            parts.append(block.get("text", ""))
    return "".join(parts)


def _as_args(arguments: Any) -> dict:
    # LangChain tool calls carry a dict of arguments.
    if isinstance(arguments, dict):
        return arguments
    if arguments is None:
        return {}
    return {"input": arguments}


def to_langchain_messages(request: ProviderRequest) -> List[BaseMessage]:
    """Convert provider request messages to LangChain message types.

    Role mapping:
        system    → SystemMessage
        assistant → AIMessage (with optional tool_calls)
        user      → HumanMessage
        tool      → ToolMessage
    """
    lc_messages: List[BaseMessage] = []
    for m in request.messages:
        if m.role == "system":
            lc_messages.append(SystemMessage(content=m.content or ""))
        elif m.role == "assistant":
            tool_calls = [
                {"id": tc.id, "name": tc.name, "args": _as_args(tc.arguments)}
                for tc in m.tool_calls or []
            ]
            lc_messages.append(AIMessage(content=m.content or "", tool_calls=tool_calls))
        elif m.role == "tool":
            lc_messages.append(ToolMessage(content=m.content or "", tool_call_id=m.tool_call_id or ""))
        else:
            lc_messages.append(HumanMessage(content=m.content or ""))
    return lc_messages


def tool_call_chunks_from_ai_message(ai_message: Any) -> List[ProviderResponseChunk]:
    """Extract tool_call chunks from a LangChain AIMessage (or merged AIMessageChunk)."""
    chunks = []
    for tc in getattr(ai_message, "tool_calls", None) or []:
        if isinstance(tc, dict):
            chunks.append(tool_call_chunk(tc.get("id") or new_id("call"), tc["name"], tc.get("args", {})))
        else:
            chunks.append(
                tool_call_chunk(
                    getattr(tc, "id", None) or new_id("call"),
                    getattr(tc, "name", ""),
                    getattr(tc, "args", None) or {},
                )
            )
    return chunks


__all__ = ["content_text", "to_langchain_messages", "tool_call_chunks_from_ai_message"]
