from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field

from .messages import Message


class AgentChatResult(BaseModel):
    """Final answer of a collected-mode turn plus the tool traffic that led to it."""

    assistant_message: Message
    intermediate_messages: List[Message] = Field(default_factory=list)


__all__ = ["AgentChatResult"]
