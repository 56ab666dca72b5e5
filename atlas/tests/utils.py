"""Test utilities for the atlas app."""

from __future__ import annotations

from typing import AsyncIterator, List, Sequence

from atlas.core.interfaces import ProviderCapabilities
from atlas.core.registry import ProviderRegistry
from atlas.types.agents import Agent, AgentOptions, ToolDefinition
from atlas.types.messages import Conversation, Message
from atlas.types.requests import ProviderRequest
from atlas.types.streaming import ProviderResponseChunk


class ScriptedProvider:
    """Provider that replays one scripted chunk list per round and records requests.

    After the script is exhausted the last round is repeated.
    """

    capabilities = ProviderCapabilities(streaming=True, tools=True)

    def __init__(self, rounds: Sequence[Sequence[ProviderResponseChunk]], id: str = "scripted") -> None:
        self.id = id
        self.rounds = [list(r) for r in rounds]
        self.requests: List[ProviderRequest] = []

    def _next_round(self, request: ProviderRequest) -> List[ProviderResponseChunk]:
        index = min(len(self.requests), len(self.rounds) - 1)
        self.requests.append(request)
        return list(self.rounds[index])

    async def complete(self, request: ProviderRequest) -> List[ProviderResponseChunk]:
        return self._next_round(request)

    async def stream(self, request: ProviderRequest) -> AsyncIterator[ProviderResponseChunk]:
        for chunk in self._next_round(request):
            yield chunk


def make_registry(*providers) -> ProviderRegistry:
    registry = ProviderRegistry()
    for provider in providers:
        registry.register_provider(provider)
    return registry


def make_agent(
    provider: str = "scripted",
    tools: Sequence[ToolDefinition] = (),
    agent_id: str = "test-agent",
    **options,
) -> Agent:
    opts = AgentOptions(id=agent_id, provider=provider, model="test-model", tools=list(tools), **options)
    return Agent(id=opts.id, options=opts)


def empty_conversation(conversation_id: str = "conv-1") -> Conversation:
    return Conversation(id=conversation_id, messages=[])


def user(text: str) -> Message:
    return Message.user(text)
