from __future__ import annotations

from typing import AsyncIterator, List, Protocol, runtime_checkable

from pydantic import BaseModel

from atlas.types.requests import ProviderRequest
from atlas.types.streaming import ProviderResponseChunk


class ProviderCapabilities(BaseModel):
    """Advertised by a provider. The runtime does not enforce these."""

    streaming: bool = False
    tools: bool = False


@runtime_checkable
class Provider(Protocol):
    """
    Backend-agnostic language-model interface.

    Implementations translate a ProviderRequest into their backend's wire
    protocol and report the answer as ProviderResponseChunks. Failures are
    raised, never returned as chunks.
    """

    id: str
    capabilities: ProviderCapabilities

    async def complete(self, request: ProviderRequest) -> List[ProviderResponseChunk]:
        """Run a one-shot completion and return every chunk at once."""

        ...

    def stream(self, request: ProviderRequest) -> AsyncIterator[ProviderResponseChunk]:
        """Stream chunks as they are produced, ending with a "done" chunk."""

        ...


__all__ = ["ProviderCapabilities", "Provider"]
