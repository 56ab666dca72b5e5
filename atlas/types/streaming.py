from __future__ import annotations

from typing import Any, Dict, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .requests import ProviderToolCall


ChunkType = Literal["text", "tool_call", "done"]


class ProviderResponseChunk(BaseModel):
    """One incremental unit of a provider response.

    A "done" chunk ends a single provider response, not necessarily the whole
    multi-round sequence a caller is consuming.
    """

    model_config = ConfigDict(frozen=True)

    type: ChunkType
    text: Optional[str] = None
    tool_call: Optional[ProviderToolCall] = None
    metadata: Dict[str, Any] = Field(default_factory=dict)

    @model_validator(mode="after")
    def _check_payload(self) -> "ProviderResponseChunk":
        if self.type == "text" and self.text is None:
            raise ValueError("text chunk requires 'text'")
        if self.type == "tool_call" and self.tool_call is None:
            raise ValueError("tool_call chunk requires 'tool_call'")
        return self


def text_chunk(text: str, **metadata: Any) -> ProviderResponseChunk:
    return ProviderResponseChunk(type="text", text=text, metadata=metadata)


def tool_call_chunk(id: str, name: str, arguments: Any = None) -> ProviderResponseChunk:
    return ProviderResponseChunk(
        type="tool_call",
        tool_call=ProviderToolCall(id=id, name=name, arguments={} if arguments is None else arguments),
    )


def done_chunk(**metadata: Any) -> ProviderResponseChunk:
    return ProviderResponseChunk(type="done", metadata=metadata)


__all__ = ["ChunkType", "ProviderResponseChunk", "text_chunk", "tool_call_chunk", "done_chunk"]
