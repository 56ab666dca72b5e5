"""
Bundled Provider implementations.

Importing this package registers each provider in the process-wide
ProviderRegistry under its id.
"""

from .base import BaseLangChainProvider  # noqa: F401
from .mock import MockProvider  # noqa: F401
from .openai import OpenAIProvider  # noqa: F401

__all__ = ["BaseLangChainProvider", "MockProvider", "OpenAIProvider"]
