from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Dict, Optional

from atlas.core.interfaces import Provider


@dataclass
class ProviderRegistry:
    """Maps provider ids to Provider instances."""

    _providers: Dict[str, Provider] = field(default_factory=dict)

    def register_provider(self, provider: Provider) -> None:
        """Register a provider under its id (replacing any previous one)."""

        if not provider.id:
            raise ValueError("Provider id must be non-empty")
        self._providers[provider.id] = provider

    def get(self, provider_id: str) -> Optional[Provider]:
        """Return the provider for the given id, or None if it is not registered."""

        return self._providers.get(provider_id)

    def list_providers(self) -> Dict[str, Provider]:
        """Return a copy of the id -> provider mapping."""
        return dict(self._providers)

    def clear(self) -> None:
        """Remove all registered providers."""
        self._providers.clear()


_global_registry: ProviderRegistry | None = None
_global_registry_lock = threading.Lock()


def get_provider_registry() -> ProviderRegistry:
    """Return the process-wide ProviderRegistry singleton (thread-safe)."""

    global _global_registry
    if _global_registry is None:
        with _global_registry_lock:
            if _global_registry is None:
                _global_registry = ProviderRegistry()
    return _global_registry


__all__ = ["ProviderRegistry", "get_provider_registry"]
