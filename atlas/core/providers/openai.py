from __future__ import annotations

import os

from langchain_openai import ChatOpenAI

from atlas.core.providers.base import BaseLangChainProvider
from atlas.core.registry import get_provider_registry
from atlas.service.errors import AtlasConfigurationError


class OpenAIProvider(BaseLangChainProvider):
    """Provider backed by LangChain's ChatOpenAI."""

    _provider_label = "OpenAI"
    # Accepted in agent options; stripped before sending to the API.
    _API_MODEL_PREFIX = "openai/"

    def __init__(self, id: str = "openai") -> None:
        super().__init__(id, self._make_client)

    def _make_client(self, model_name: str) -> ChatOpenAI:
        if not os.getenv("OPENAI_API_KEY"):
            raise AtlasConfigurationError(
                "OPENAI_API_KEY is not set; cannot initialize OpenAIProvider."
            )
        api_model = model_name
        if model_name.startswith(self._API_MODEL_PREFIX):
            api_model = model_name[len(self._API_MODEL_PREFIX) :]
        # Let ChatOpenAI read the rest of its configuration from the environment.
        return ChatOpenAI(model=api_model, stream_usage=True)


get_provider_registry().register_provider(OpenAIProvider())


__all__ = ["OpenAIProvider"]
