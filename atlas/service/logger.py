"""
Agent turn logging helpers.

These functions write structured records to the ``atlas`` loggers without ever
raising: a logging failure must never surface to the caller.

Each record carries its fields twice: in the message, for plain formatters, and
in ``extra``, for structured handlers.
- Collected turns: final answer length and the intermediate tool traffic.
- Streams: one summary built from running StreamStats totals after the stream
  finishes (text length, tool calls, provider rounds).
"""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, List

from atlas.conf import should_log_chunks

if TYPE_CHECKING:
    from atlas.types.agents import Agent
    from atlas.types.messages import Conversation, ToolCallContent, ToolResultContent
    from atlas.types.responses import AgentChatResult
    from atlas.types.streaming import ProviderResponseChunk

logger = logging.getLogger(__name__)


def _base_fields(agent: "Agent", conversation: "Conversation", duration_ms: int) -> Dict[str, Any]:
    return {
        "agent_id": agent.id,
        "provider": agent.options.provider,
        "model": agent.options.model,
        "conversation_id": conversation.id,
        "duration_ms": duration_ms,
    }


@dataclass
class StreamStats:
    """Running totals of a stream, updated per chunk so no chunk is retained."""

    text_length: int = 0
    tool_calls: List[Dict[str, str]] = field(default_factory=list)
    rounds: int = 0
    counts: Counter = field(default_factory=Counter)

    def add(self, chunk: "ProviderResponseChunk") -> None:
        self.counts[chunk.type] += 1
        if chunk.type == "text":
            self.text_length += len(chunk.text or "")
        elif chunk.type == "tool_call" and chunk.tool_call is not None:
            self.tool_calls.append({"id": chunk.tool_call.id, "name": chunk.tool_call.name})
        elif chunk.type == "done":
            self.rounds += 1

    def summary(self) -> Dict[str, Any]:
        return {
            "text_length": self.text_length,
            "tool_calls": list(self.tool_calls),
            "rounds": self.rounds,
            "chunk_count": sum(self.counts.values()),
        }


def log_turn(
    agent: "Agent",
    conversation: "Conversation",
    result: "AgentChatResult",
    duration_ms: int,
) -> None:
    """Log a completed collected-mode turn."""
    try:
        fields = _base_fields(agent, conversation, duration_ms)
        fields["intermediate_messages"] = len(result.intermediate_messages)
        fields["answer_length"] = len(result.assistant_message.text)
        logger.info(
            "Turn completed agent=%s conversation=%s intermediate=%d duration_ms=%d",
            agent.id,
            conversation.id,
            fields["intermediate_messages"],
            duration_ms,
            extra=fields,
        )
    except Exception:
        logger.exception("Failed to write turn log (collected)")


def log_stream(
    agent: "Agent",
    conversation: "Conversation",
    stats: StreamStats,
    duration_ms: int,
) -> None:
    """Log an incremental turn after its last chunk was delivered."""
    try:
        fields = _base_fields(agent, conversation, duration_ms)
        fields.update(stats.summary())
        logger.info(
            "Stream completed agent=%s conversation=%s rounds=%d tool_calls=%d duration_ms=%d",
            agent.id,
            conversation.id,
            fields["rounds"],
            len(fields["tool_calls"]),
            duration_ms,
            extra=fields,
        )
        if should_log_chunks():
            logger.debug("Stream chunk counts agent=%s %s", agent.id, dict(stats.counts))
    except Exception:
        logger.exception("Failed to write turn log (streaming)")


def log_tool_call(
    agent: "Agent",
    call: "ToolCallContent",
    result: "ToolResultContent",
    duration_ms: int,
) -> None:
    """Log one tool invocation. Failed invocations are logged at WARNING."""
    try:
        fields = {
            "agent_id": agent.id,
            "tool_name": call.name,
            "tool_call_id": call.tool_call_id,
            "status": result.status,
            "duration_ms": duration_ms,
        }
        if result.status == "error":
            logger.warning(
                "Tool %s failed for agent=%s: %s", call.name, agent.id, result.result, extra=fields
            )
        else:
            logger.debug("Tool %s succeeded for agent=%s", call.name, agent.id, extra=fields)
    except Exception:
        logger.exception("Failed to write tool call log")


def log_error(
    agent: "Agent",
    conversation: "Conversation",
    exc: BaseException,
    duration_ms: int,
    *,
    is_stream: bool = False,
) -> None:
    """Log a turn that ended with an exception."""
    try:
        fields = _base_fields(agent, conversation, duration_ms)
        fields.update(
            {"is_stream": is_stream, "error_type": type(exc).__name__, "error_message": str(exc)}
        )
        logger.error(
            "Turn failed agent=%s conversation=%s error=%s: %s",
            agent.id,
            conversation.id,
            type(exc).__name__,
            exc,
            extra=fields,
        )
    except Exception:
        logger.exception("Failed to write turn error log")


__all__ = ["StreamStats", "log_turn", "log_stream", "log_tool_call", "log_error"]
