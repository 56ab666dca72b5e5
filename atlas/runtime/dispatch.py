"""Tool dispatch for one provider round."""

from __future__ import annotations

import logging
import time
from inspect import isawaitable
from typing import Any, Iterable, List, Mapping

from asgiref.sync import iscoroutinefunction, sync_to_async

from atlas.service.logger import log_tool_call
from atlas.tools.interfaces import Tool, ToolHandler
from atlas.types.agents import Agent
from atlas.types.context import ToolHandlerContext
from atlas.types.messages import (
    Conversation,
    Message,
    ToolCallContent,
    ToolResultContent,
    new_id,
)
from atlas.types.requests import ProviderToolCall

logger = logging.getLogger(__name__)


async def invoke_handler(handler: ToolHandler, arguments: Any, context: ToolHandlerContext) -> Any:
    """Call a tool handler, async or sync, and return its awaited result.

    Objects with an ``async def __call__`` count as async handlers.
    """
    if iscoroutinefunction(handler) or iscoroutinefunction(getattr(handler, "__call__", None)):
        return await handler(arguments, context)
    result = await sync_to_async(handler)(arguments, context)
    if isawaitable(result):
        result = await result
    return result


async def dispatch_tool_calls(
    tool_calls: Iterable[ProviderToolCall],
    conversation: Conversation,
    agent: Agent,
    tools: Mapping[str, Tool],
) -> List[Message]:
    """Execute a round of tool calls and return the messages they produce.

    The first message is the assistant message carrying every call in order;
    one tool message per call follows, in call order. Calls run one after the
    other. Lookup misses and handler exceptions become ``status="error"``
    results; nothing raised by a handler escapes.
    """
    calls = [
        ToolCallContent(tool_call_id=tc.id, name=tc.name, arguments=tc.arguments)
        for tc in tool_calls
    ]
    produced: List[Message] = [Message(id=new_id("asst"), role="assistant", content=calls)]

    for call in calls:
        t0 = time.monotonic()
        tool = tools.get(call.name)
        if tool is None:
            status, result = "error", f'Tool "{call.name}" not found.'
        else:
            context = ToolHandlerContext(conversation=conversation, agent=agent)
            try:
                status, result = "ok", await invoke_handler(tool.handler, call.arguments, context)
            except Exception as exc:
                status, result = "error", str(exc) or type(exc).__name__

        content = ToolResultContent(tool_call_id=call.tool_call_id, status=status, result=result)
        log_tool_call(agent, call, content, int((time.monotonic() - t0) * 1000))
        produced.append(Message(id=new_id("tool"), role="tool", content=[content]))

    return produced


__all__ = ["invoke_handler", "dispatch_tool_calls"]
