from __future__ import annotations

from typing import Any, Dict

from pydantic import BaseModel, Field

from .agents import Agent
from .messages import Conversation, new_id


class ToolHandlerContext(BaseModel):
    """Per-invocation context handed to a tool handler."""

    conversation: Conversation  # working conversation up to this point
    agent: Agent
    request_id: str = Field(default_factory=lambda: new_id("req"))
    metadata: Dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def create(cls, conversation: Conversation, agent: Agent, **metadata: Any) -> "ToolHandlerContext":
        return cls(conversation=conversation, agent=agent, metadata=metadata)


__all__ = ["ToolHandlerContext"]
