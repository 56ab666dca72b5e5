from __future__ import annotations

from datetime import datetime, timezone
from typing import Annotated, Any, Dict, List, Literal, Union
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field


Role = Literal["system", "user", "assistant", "tool"]
ToolStatus = Literal["ok", "error"]


def new_id(prefix: str) -> str:
    """Return an opaque unique id such as ``msg_3f2a...``."""
    return f"{prefix}_{uuid4().hex}"


class TextContent(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["text"] = "text"
    text: str


class ToolCallContent(BaseModel):
    """A tool invocation requested by the assistant."""

    model_config = ConfigDict(frozen=True)

    type: Literal["tool_call"] = "tool_call"
    tool_call_id: str  # correlates call with result
    name: str
    arguments: Any = Field(default_factory=dict)


class ToolResultContent(BaseModel):
    """Outcome of a tool invocation, linked to its call by ``tool_call_id``."""

    model_config = ConfigDict(frozen=True)

    type: Literal["tool_result"] = "tool_result"
    tool_call_id: str
    status: ToolStatus
    result: Any = None


ContentItem = Annotated[
    Union[TextContent, ToolCallContent, ToolResultContent],
    Field(discriminator="type"),
]


class Message(BaseModel):
    """One conversation turn with structured content."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=lambda: new_id("msg"))
    role: Role
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    content: List[ContentItem] = Field(default_factory=list)
    metadata: Dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def user(cls, text: str, **kwargs: Any) -> "Message":
        return cls(role="user", content=[TextContent(text=text)], **kwargs)

    @classmethod
    def system(cls, text: str, **kwargs: Any) -> "Message":
        return cls(role="system", content=[TextContent(text=text)], **kwargs)

    @classmethod
    def assistant(cls, text: str, **kwargs: Any) -> "Message":
        return cls(role="assistant", content=[TextContent(text=text)], **kwargs)

    @property
    def text(self) -> str:
        """Newline-joined text of all text items."""
        return "\n".join(c.text for c in self.content if isinstance(c, TextContent))

    @property
    def tool_calls(self) -> List[ToolCallContent]:
        return [c for c in self.content if isinstance(c, ToolCallContent)]

    @property
    def tool_results(self) -> List[ToolResultContent]:
        return [c for c in self.content if isinstance(c, ToolResultContent)]


class Conversation(BaseModel):
    """Ordered messages exchanged with an agent."""

    id: str = Field(default_factory=lambda: new_id("conv"))
    messages: List[Message] = Field(default_factory=list)
    metadata: Dict[str, Any] = Field(default_factory=dict)

    def extended(self, *messages: Message) -> "Conversation":
        """Return a copy with ``messages`` appended; ``self`` is left untouched."""
        return self.model_copy(update={"messages": [*self.messages, *messages]})


__all__ = [
    "Role",
    "ToolStatus",
    "new_id",
    "TextContent",
    "ToolCallContent",
    "ToolResultContent",
    "ContentItem",
    "Message",
    "Conversation",
]
