from .messages import (
    ContentItem,
    Conversation,
    Message,
    TextContent,
    ToolCallContent,
    ToolResultContent,
    new_id,
)
from .agents import Agent, AgentOptions, ToolDefinition, ToolParameterSchema, agent
from .context import ToolHandlerContext
from .requests import ProviderRequest, ProviderRequestMessage, ProviderTool, ProviderToolCall
from .responses import AgentChatResult
from .streaming import ProviderResponseChunk, done_chunk, text_chunk, tool_call_chunk

__all__ = [
    "ContentItem",
    "Conversation",
    "Message",
    "TextContent",
    "ToolCallContent",
    "ToolResultContent",
    "new_id",
    "Agent",
    "AgentOptions",
    "ToolDefinition",
    "ToolParameterSchema",
    "agent",
    "ToolHandlerContext",
    "ProviderRequest",
    "ProviderRequestMessage",
    "ProviderTool",
    "ProviderToolCall",
    "AgentChatResult",
    "ProviderResponseChunk",
    "done_chunk",
    "text_chunk",
    "tool_call_chunk",
]
