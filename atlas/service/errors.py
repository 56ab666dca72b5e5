from __future__ import annotations


class AtlasError(Exception):
    """Base error type for all agent orchestration failures."""


class AtlasConfigurationError(AtlasError):
    """Misconfiguration of agents, providers, presets, or environment."""


class ProviderNotFoundError(AtlasConfigurationError):
    """An agent names a provider id that is not in the provider registry."""


class AgentNotRegisteredError(AtlasConfigurationError):
    """An agent id was selected that the orchestrator does not know, or none was selected."""


class AtlasProviderError(AtlasError):
    """Error raised from a concrete provider integration."""


class ToolRoundLimitExceeded(AtlasError):
    """A turn needed more tool rounds than the configured limit."""

    def __init__(self, agent_id: str, limit: int) -> None:
        super().__init__(
            f"Agent '{agent_id}' exceeded the limit of {limit} tool round(s) in a single turn"
        )
        self.agent_id = agent_id
        self.limit = limit


__all__ = [
    "AtlasError",
    "AtlasConfigurationError",
    "ProviderNotFoundError",
    "AgentNotRegisteredError",
    "AtlasProviderError",
    "ToolRoundLimitExceeded",
]
