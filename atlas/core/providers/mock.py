"""Deterministic offline provider for tests and demos."""

from __future__ import annotations

import asyncio
from typing import AsyncIterator, Dict, List, Optional

from atlas.core.interfaces import ProviderCapabilities
from atlas.core.registry import get_provider_registry
from atlas.types.messages import new_id
from atlas.types.requests import ProviderRequest
from atlas.types.streaming import ProviderResponseChunk, done_chunk, text_chunk, tool_call_chunk


class MockProvider:
    """Echoes the last message, and requests tools when the user names them.

    A user message whose text is a key of ``tool_triggers`` (or the name of a
    tool advertised in the request) is answered with tool calls. Once tool
    results are the last thing in the request, the provider acknowledges them.
    """

    capabilities = ProviderCapabilities(streaming=True, tools=True)

    def __init__(
        self,
        id: str = "mock-provider",
        tool_triggers: Optional[Dict[str, List[str]]] = None,
        chunk_delay: float = 0.0,
    ) -> None:
        self.id = id
        self.tool_triggers = dict(tool_triggers or {})
        self.chunk_delay = chunk_delay

    def _tools_to_call(self, request: ProviderRequest) -> List[str]:
        last = request.messages[-1] if request.messages else None
        if last is None or last.role != "user" or not last.content:
            return []
        text = last.content.strip()
        if text in self.tool_triggers:
            return list(self.tool_triggers[text])
        advertised = {t.name for t in request.tools or []}
        return [text] if text in advertised else []

    @staticmethod
    def _answer(request: ProviderRequest) -> str:
        if not request.messages:
            return 'This is a mock response to: ""'
        if request.messages[-1].role == "tool":
            batch = []
            for m in reversed(request.messages):
                if m.role != "tool":
                    break
                batch.append(m.content or "")
            return "The tool execution was successful: " + ", ".join(reversed(batch))
        return f'This is a mock response to: "{request.messages[-1].content or ""}"'

    async def complete(self, request: ProviderRequest) -> List[ProviderResponseChunk]:
        names = self._tools_to_call(request)
        if names:
            chunks = [tool_call_chunk(new_id("call"), name) for name in names]
        else:
            chunks = [text_chunk(self._answer(request))]
        return chunks + [done_chunk()]

    async def stream(self, request: ProviderRequest) -> AsyncIterator[ProviderResponseChunk]:
        names = self._tools_to_call(request)
        text = f"Calling {', '.join(names)}" if names else self._answer(request)
        for char in text:
            yield text_chunk(char)
            await asyncio.sleep(self.chunk_delay)
        for name in names:
            yield tool_call_chunk(new_id("call"), name)
        yield done_chunk()


get_provider_registry().register_provider(MockProvider())


__all__ = ["MockProvider"]
