from .interfaces import Provider, ProviderCapabilities
from .registry import ProviderRegistry, get_provider_registry

__all__ = ["Provider", "ProviderCapabilities", "ProviderRegistry", "get_provider_registry"]
