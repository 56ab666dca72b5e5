"""Agent runtime: the provider/tool turn loop, collected or incremental."""

from __future__ import annotations

import logging
import time
from typing import AsyncIterator, Awaitable, Dict, List, Optional, Sequence, Union

from atlas.core.interfaces import Provider
from atlas.core.mapping import conversation_to_provider_request, provider_chunks_to_assistant_message
from atlas.core.registry import ProviderRegistry
from atlas.runtime.dispatch import dispatch_tool_calls
from atlas.service.errors import ProviderNotFoundError, ToolRoundLimitExceeded
from atlas.service.logger import StreamStats, log_error, log_stream, log_turn
from atlas.tools.interfaces import Tool
from atlas.types.agents import Agent
from atlas.types.messages import Conversation, Message
from atlas.types.requests import ProviderToolCall
from atlas.types.responses import AgentChatResult
from atlas.types.streaming import ProviderResponseChunk

logger = logging.getLogger(__name__)


class AgentRuntime:
    """Binds one agent to its provider and the tools it declared.

    Tools supplied but not declared in ``agent.options.tools`` are dropped.
    The provider is resolved here, so an unknown provider id fails at
    construction rather than at the first chat.

    ``max_tool_rounds`` caps tool rounds per turn; ``None`` loops until the
    provider stops requesting tools.
    """

    def __init__(
        self,
        agent: Agent,
        provider_registry: ProviderRegistry,
        tools: Optional[Sequence[Tool]] = None,
        *,
        max_tool_rounds: Optional[int] = None,
    ) -> None:
        self.agent = agent
        declared = set(agent.options.tool_names)
        self.tools: Dict[str, Tool] = {t.name: t for t in tools or [] if t.name in declared}

        provider = provider_registry.get(agent.options.provider)
        if provider is None:
            raise ProviderNotFoundError(f'Provider "{agent.options.provider}" not found.')
        self.provider: Provider = provider
        self.max_tool_rounds = max_tool_rounds

    def chat(
        self,
        conversation: Conversation,
        next_message: Message,
        *,
        streaming: bool = False,
    ) -> Union[Awaitable[AgentChatResult], AsyncIterator[ProviderResponseChunk]]:
        """Start a turn: a coroutine of the collected result, or a live chunk iterator."""
        if streaming:
            return self.stream(conversation, next_message)
        return self.run(conversation, next_message)

    async def run(self, conversation: Conversation, next_message: Message) -> AgentChatResult:
        """Loop provider completions and tool rounds until a plain answer arrives."""
        working = conversation.extended(next_message)
        intermediate: List[Message] = []
        rounds = 0
        t0 = time.monotonic()
        try:
            while True:
                request = conversation_to_provider_request(working, self.agent)
                chunks = await self.provider.complete(request)
                calls = [c.tool_call for c in chunks if c.type == "tool_call"]
                logger.debug(
                    "Provider round agent=%s chunks=%d tool_calls=%d",
                    self.agent.id,
                    len(chunks),
                    len(calls),
                )
                if not calls:
                    result = AgentChatResult(
                        assistant_message=provider_chunks_to_assistant_message(chunks),
                        intermediate_messages=intermediate,
                    )
                    log_turn(self.agent, working, result, int((time.monotonic() - t0) * 1000))
                    return result

                # Text sent alongside tool calls is dropped; the next round answers.
                rounds += 1
                produced = await self._run_tool_round(calls, working, rounds)
                intermediate.extend(produced)
        except Exception as exc:
            log_error(self.agent, working, exc, int((time.monotonic() - t0) * 1000))
            raise

    async def stream(
        self, conversation: Conversation, next_message: Message
    ) -> AsyncIterator[ProviderResponseChunk]:
        """Forward provider chunks as they arrive, resuming after each tool round.

        Rounds never overlap: tools run only once a round's stream has ended,
        and the next round's chunks follow in the same sequence.
        """
        working = conversation.extended(next_message)
        stats = StreamStats()
        rounds = 0
        t0 = time.monotonic()
        try:
            while True:
                request = conversation_to_provider_request(working, self.agent)
                calls: List[ProviderToolCall] = []
                async for chunk in self.provider.stream(request):
                    if chunk.type == "tool_call":
                        calls.append(chunk.tool_call)
                    stats.add(chunk)
                    yield chunk

                logger.debug(
                    "Provider stream round ended agent=%s tool_calls=%d", self.agent.id, len(calls)
                )
                if not calls:
                    log_stream(self.agent, working, stats, int((time.monotonic() - t0) * 1000))
                    return

                rounds += 1
                await self._run_tool_round(calls, working, rounds)
        except Exception as exc:
            log_error(self.agent, working, exc, int((time.monotonic() - t0) * 1000), is_stream=True)
            raise

    async def _run_tool_round(
        self, calls: List[ProviderToolCall], working: Conversation, rounds: int
    ) -> List[Message]:
        if self.max_tool_rounds is not None and rounds > self.max_tool_rounds:
            raise ToolRoundLimitExceeded(self.agent.id, self.max_tool_rounds)
        produced = await dispatch_tool_calls(calls, working, self.agent, self.tools)
        working.messages.extend(produced)
        return produced


__all__ = ["AgentRuntime"]
