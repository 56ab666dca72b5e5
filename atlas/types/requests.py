from __future__ import annotations

from typing import Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, Field

from .agents import ToolParameterSchema
from .messages import Role


class ProviderToolCall(BaseModel):
    """Tool call as it travels between runtime and provider."""

    id: str
    name: str
    arguments: Any = Field(default_factory=dict)


class ProviderRequestMessage(BaseModel):
    role: Role
    content: Optional[str] = None
    name: Optional[str] = None
    tool_calls: Optional[List[ProviderToolCall]] = None  # assistant messages requesting tools
    tool_call_id: Optional[str] = None  # tool result messages


class ProviderTool(BaseModel):
    name: str
    description: Optional[str] = None
    parameters: ToolParameterSchema = Field(default_factory=ToolParameterSchema)


class ProviderRequest(BaseModel):
    """Wire-neutral request handed to every provider."""

    model: str
    messages: List[ProviderRequestMessage]
    tools: Optional[List[ProviderTool]] = None
    tool_choice: Optional[Union[Literal["auto", "none"], str]] = None
    temperature: Optional[float] = None
    max_tokens: Optional[int] = None
    metadata: Dict[str, Any] = Field(default_factory=dict)


__all__ = ["ProviderToolCall", "ProviderRequestMessage", "ProviderTool", "ProviderRequest"]
