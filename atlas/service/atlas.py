"""
Atlas: facade over a directory of agents, each bound to its own AgentRuntime.

Use from other apps (async views, WebSocket consumers, management commands):

    from atlas import get_atlas
    from atlas.types import Conversation, Message

    atlas = get_atlas()
    conversation = Conversation(id=str(thread.id), messages=history)
    result = await atlas.ask(conversation, Message.user("Hello"))
    print(result.assistant_message.text)

For streaming:

    async for chunk in atlas.send(conversation, Message.user("Hello")):
        # send chunk.model_dump_json() over WebSocket
        ...

From synchronous code (views, tasks), ``atlas.ask_sync(...)`` blocks until the
collected result is ready.
"""

from __future__ import annotations

import logging
import threading
from typing import Any, AsyncIterator, Awaitable, Dict, Iterable, List, Optional, Sequence, Union

from asgiref.sync import async_to_sync

from atlas import conf
from atlas.core.registry import ProviderRegistry, get_provider_registry
from atlas.presets import get_preset
from atlas.runtime.agent_runtime import AgentRuntime
from atlas.service.errors import AgentNotRegisteredError, AtlasConfigurationError
from atlas.tools.interfaces import Tool
from atlas.tools.registry import ToolRegistry, get_tool_registry
from atlas.types.agents import Agent, AgentOptions, agent as create_agent
from atlas.types.messages import Conversation, Message
from atlas.types.responses import AgentChatResult
from atlas.types.streaming import ProviderResponseChunk

logger = logging.getLogger(__name__)

AgentEntry = Union[str, Dict[str, Any], AgentOptions]


class Atlas:
    """Routes conversations to agents and tracks which agent is current.

    Each registered agent gets one AgentRuntime, built at registration so a
    bad provider id fails immediately. The current agent is mutable state of
    this instance; calls that pass an explicit ``agent_id`` ignore it. The
    current-agent selection expects a single writer.

    Accepts optional dependency overrides for testability. When omitted the
    process-wide provider registry is used.
    """

    def __init__(
        self,
        agents: Optional[Iterable[Union[AgentOptions, Dict[str, Any]]]] = None,
        provider_registry: ProviderRegistry | None = None,
        tools: Optional[Sequence[Tool]] = None,
        *,
        default_agent_id: str | None = None,
        max_tool_rounds: int | None = None,
    ) -> None:
        self._provider_registry = provider_registry or get_provider_registry()
        self._tools: List[Tool] = list(tools or [])
        self._max_tool_rounds = max_tool_rounds
        self._agents: Dict[str, Agent] = {}
        self._runtimes: Dict[str, AgentRuntime] = {}
        self._current_agent_id: Optional[str] = None

        for options in agents or []:
            self.register_agent(create_agent(options))
        if default_agent_id is not None:
            self.set_agent_by_id(default_agent_id)

    @classmethod
    def from_settings(
        cls,
        provider_registry: ProviderRegistry | None = None,
        tool_registry: ToolRegistry | None = None,
    ) -> "Atlas":
        """Build an Atlas from ``ATLAS_*`` settings.

        Each agent gets the registered tools matching its declared names.
        Declared tools without a registered handler are logged; calls to them
        come back as "not found" tool results.
        """
        registry = tool_registry or get_tool_registry()
        atlas = cls(provider_registry=provider_registry, max_tool_rounds=conf.get_max_tool_rounds())
        for entry in conf.get_agent_configs():
            options = _resolve_agent_entry(entry)
            tools, missing = registry.resolve(options.tool_names)
            if missing:
                logger.warning("Agent %s declares tools with no registered handler: %s", options.id, missing)
            atlas.register_agent(create_agent(options), tools)

        default_agent_id = conf.get_default_agent_id()
        if default_agent_id is not None:
            atlas.set_agent_by_id(default_agent_id)
        return atlas

    # -- agent directory ----------------------------------------------------

    def register_agent(self, agent: Agent, tools: Optional[Sequence[Tool]] = None) -> "Atlas":
        """Register ``agent`` with ``tools`` (default: the tools this Atlas was built with).

        The first agent registered becomes current when none is selected yet.
        """
        runtime = AgentRuntime(
            agent,
            self._provider_registry,
            self._tools if tools is None else tools,
            max_tool_rounds=self._max_tool_rounds,
        )
        self._agents[agent.id] = agent
        self._runtimes[agent.id] = runtime
        if self._current_agent_id is None:
            self._current_agent_id = agent.id
        logger.debug(
            "Registered agent=%s provider=%s tools=%s",
            agent.id,
            agent.options.provider,
            sorted(runtime.tools),
        )
        return self

    def set_agent(self, agent: Agent) -> "Atlas":
        return self.set_agent_by_id(agent.id)

    def set_agent_by_id(self, agent_id: str) -> "Atlas":
        if agent_id not in self._agents:
            raise AgentNotRegisteredError(f'Agent with id "{agent_id}" not registered.')
        self._current_agent_id = agent_id
        return self

    def get_agent(self) -> Optional[Agent]:
        """Return the current agent, or None when nothing is registered."""
        if self._current_agent_id is None:
            return None
        return self._agents.get(self._current_agent_id)

    @property
    def agents(self) -> Dict[str, Agent]:
        """A copy of the id -> agent directory."""
        return dict(self._agents)

    # -- chat API -----------------------------------------------------------

    def ask(
        self, conversation: Conversation, message: Message, agent_id: str | None = None
    ) -> Awaitable[AgentChatResult]:
        """Collected mode. Agent resolution errors raise here, before anything is awaited."""
        return self._get_runtime(agent_id).run(conversation, message)

    def send(
        self, conversation: Conversation, message: Message, agent_id: str | None = None
    ) -> AsyncIterator[ProviderResponseChunk]:
        """Incremental mode. Agent resolution errors raise here, before iteration starts."""
        return self._get_runtime(agent_id).stream(conversation, message)

    def ask_sync(
        self, conversation: Conversation, message: Message, agent_id: str | None = None
    ) -> AgentChatResult:
        """Blocking ``ask`` for synchronous callers. Must not run inside an event loop thread."""
        runtime = self._get_runtime(agent_id)
        return async_to_sync(runtime.run)(conversation, message)

    # -- helpers ------------------------------------------------------------

    def _get_runtime(self, agent_id: str | None = None) -> AgentRuntime:
        resolved = agent_id or self._current_agent_id
        if not resolved:
            raise AgentNotRegisteredError("No agent specified and no default agent set.")
        runtime = self._runtimes.get(resolved)
        if runtime is None:
            raise AgentNotRegisteredError(f'Agent with id "{resolved}" not found.')
        return runtime


def _resolve_agent_entry(entry: AgentEntry) -> AgentOptions:
    if isinstance(entry, AgentOptions):
        return entry
    if isinstance(entry, str):
        return get_preset(entry)
    if isinstance(entry, dict):
        return AgentOptions.model_validate(entry)
    raise AtlasConfigurationError(
        f"ATLAS_AGENTS entries must be preset ids or option dicts, got {type(entry).__name__}"
    )


_global_atlas: Atlas | None = None
_global_atlas_lock = threading.Lock()


def get_atlas() -> Atlas:
    """Return the process-wide Atlas singleton, built from settings (thread-safe)."""
    global _global_atlas
    if _global_atlas is None:
        with _global_atlas_lock:
            if _global_atlas is None:
                _global_atlas = Atlas.from_settings()
    return _global_atlas


__all__ = ["Atlas", "get_atlas"]
