"""Translation between the conversation model and the provider wire shapes.

Both functions are pure: they never mutate their inputs.
"""

from __future__ import annotations

import json
from datetime import datetime, timezone
from typing import Any, Iterable, List

from atlas.types.agents import Agent
from atlas.types.messages import (
    Conversation,
    Message,
    TextContent,
    ToolCallContent,
    ToolResultContent,
    new_id,
)
from atlas.types.requests import ProviderRequest, ProviderRequestMessage, ProviderTool, ProviderToolCall
from atlas.types.streaming import ProviderResponseChunk


def serialize_tool_result(result: Any) -> str:
    """Render a tool result as the string content of a "tool" request message."""
    return json.dumps(result, default=str)


def _message_to_request_messages(message: Message) -> List[ProviderRequestMessage]:
    texts: List[str] = []
    calls: List[ToolCallContent] = []
    results: List[ToolResultContent] = []
    for item in message.content:
        if isinstance(item, TextContent):
            texts.append(item.text)
        elif isinstance(item, ToolCallContent):
            calls.append(item)
        elif isinstance(item, ToolResultContent):
            results.append(item)
        else:
            raise TypeError(f"Unsupported content item: {item!r}")

    out: List[ProviderRequestMessage] = []

    text = "\n".join(texts)
    if text:
        out.append(ProviderRequestMessage(role=message.role, content=text))

    # One tool_calls message per source message, not per call.
    if calls:
        out.append(
            ProviderRequestMessage(
                role="assistant",
                content=None,
                tool_calls=[
                    ProviderToolCall(id=c.tool_call_id, name=c.name, arguments=c.arguments)
                    for c in calls
                ],
            )
        )

    for r in results:
        out.append(
            ProviderRequestMessage(
                role="tool",
                content=serialize_tool_result(r.result),
                tool_call_id=r.tool_call_id,
            )
        )
    return out


def conversation_to_provider_request(conversation: Conversation, agent: Agent) -> ProviderRequest:
    """Map a conversation and the agent that answers it to a ProviderRequest.

    Per source message the emission order is text, then tool calls, then tool
    results; across messages the conversation order is kept. When the agent has
    a system prompt and the conversation does not open with a system message,
    the prompt is sent first.
    """
    options = agent.options
    messages: List[ProviderRequestMessage] = []

    starts_with_system = bool(conversation.messages) and conversation.messages[0].role == "system"
    if options.system_prompt and not starts_with_system:
        messages.append(ProviderRequestMessage(role="system", content=options.system_prompt))

    for message in conversation.messages:
        messages.extend(_message_to_request_messages(message))

    tools = None
    if options.tools:
        tools = [
            ProviderTool(name=t.name, description=t.description, parameters=t.parameters)
            for t in options.tools
        ]

    return ProviderRequest(
        model=options.model,
        messages=messages,
        tools=tools,
        temperature=options.temperature,
        max_tokens=options.max_tokens,
        metadata={**options.metadata, "agent_id": agent.id, "conversation_id": conversation.id},
    )


def provider_chunks_to_assistant_message(chunks: Iterable[ProviderResponseChunk]) -> Message:
    """Fold the text chunks of a response into one assistant message.

    tool_call and done chunks are ignored; the runtime handles those.
    """
    text = "".join(c.text or "" for c in chunks if c.type == "text")
    return Message(
        id=new_id("asst"),
        role="assistant",
        created_at=datetime.now(timezone.utc),
        content=[TextContent(text=text)],
    )


__all__ = [
    "serialize_tool_result",
    "conversation_to_provider_request",
    "provider_chunks_to_assistant_message",
]
