"""Base class for LangChain-backed providers.

Encapsulates the shared complete/stream logic so provider subclasses only
need to supply a factory for configured LangChain chat model clients.
"""

from __future__ import annotations

from typing import Any, AsyncIterator, Callable, Dict, List, Optional, Tuple

from atlas.core.interfaces import ProviderCapabilities
from atlas.core.providers.langchain_utils import (
    content_text,
    to_langchain_messages,
    tool_call_chunks_from_ai_message,
)
from atlas.service.errors import AtlasProviderError
from atlas.tools.schema import definitions_to_langchain_schemas
from atlas.types.requests import ProviderRequest
from atlas.types.streaming import ProviderResponseChunk, done_chunk, text_chunk


class BaseLangChainProvider:
    """Shared complete/stream logic for all LangChain-backed providers.

    ``client_factory`` receives a model name and returns a LangChain chat model
    (e.g. ``ChatOpenAI``). Clients are created on first use and cached per
    model. Subclasses may override ``_provider_label`` for error messages.
    """

    id: str
    capabilities = ProviderCapabilities(streaming=True, tools=True)
    _provider_label: str = "LLM"

    def __init__(self, id: str, client_factory: Callable[[str], Any]) -> None:
        self.id = id
        self._client_factory = client_factory
        self._clients: Dict[str, Any] = {}

    def _get_client(self, model_name: str) -> Any:
        client = self._clients.get(model_name)
        if client is None:
            client = self._client_factory(model_name)
            self._clients[model_name] = client
        return client

    def _prepare(self, request: ProviderRequest) -> Tuple[Any, List[Any]]:
        client = self._get_client(request.model)
        if request.tools:
            client = client.bind_tools(definitions_to_langchain_schemas(request.tools))
        params: Dict[str, Any] = {}
        if request.temperature is not None:
            params["temperature"] = request.temperature
        if request.max_tokens is not None:
            params["max_tokens"] = request.max_tokens
        if params:
            client = client.bind(**params)
        return client, to_langchain_messages(request)

    async def complete(self, request: ProviderRequest) -> List[ProviderResponseChunk]:
        client, lc_messages = self._prepare(request)
        try:
            result = await client.ainvoke(lc_messages)
        except Exception as exc:
            raise AtlasProviderError(
                f"{self._provider_label} complete failed for model={request.model}"
            ) from exc

        chunks: List[ProviderResponseChunk] = []
        text = content_text(getattr(result, "content", None))
        if text:
            chunks.append(text_chunk(text))
        chunks.extend(tool_call_chunks_from_ai_message(result))
        chunks.append(done_chunk())
        return chunks

    async def stream(self, request: ProviderRequest) -> AsyncIterator[ProviderResponseChunk]:
        client, lc_messages = self._prepare(request)
        gathered: Optional[Any] = None
        try:
            async for chunk in client.astream(lc_messages):
                # Tool call arguments arrive in fragments; merge and emit them at the end.
                gathered = chunk if gathered is None else gathered + chunk
                text = content_text(getattr(chunk, "content", None))
                if text:
                    yield text_chunk(text)
        except Exception as exc:
            raise AtlasProviderError(
                f"{self._provider_label} streaming failure for model={request.model}"
            ) from exc

        if gathered is not None:
            for chunk in tool_call_chunks_from_ai_message(gathered):
                yield chunk
        yield done_chunk()


__all__ = ["BaseLangChainProvider"]
