from __future__ import annotations

from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


ParameterType = Literal["string", "number", "integer", "boolean", "object", "array"]


class ToolParameterProperty(BaseModel):
    """One argument. Other JSON-schema keywords (items, enum, default, nested
    properties) are kept as extra fields and sent to the provider as given."""

    model_config = ConfigDict(frozen=True, extra="allow")

    type: ParameterType
    description: Optional[str] = None


class ToolParameterSchema(BaseModel):
    """JSON-schema-like description of a tool's arguments."""

    model_config = ConfigDict(frozen=True, extra="allow")

    type: Literal["object"] = "object"
    properties: Dict[str, ToolParameterProperty] = Field(default_factory=dict)
    required: Optional[List[str]] = None


class ToolDefinition(BaseModel):
    """Contract advertised to the provider for one tool."""

    model_config = ConfigDict(frozen=True)

    name: str
    description: Optional[str] = None
    parameters: ToolParameterSchema = Field(default_factory=ToolParameterSchema)


class AgentOptions(BaseModel):
    """Static configuration of an agent: backend, model, behavior and tooling."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: Optional[str] = None

    provider: str  # provider id, e.g. "openai" or "mock-provider"
    model: str

    system_prompt: Optional[str] = None
    temperature: Optional[float] = None
    max_tokens: Optional[int] = None

    tools: List[ToolDefinition] = Field(default_factory=list)

    metadata: Dict[str, Any] = Field(default_factory=dict)

    @property
    def tool_names(self) -> List[str]:
        return [t.name for t in self.tools]


class Agent(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    options: AgentOptions


def agent(options: AgentOptions | Dict[str, Any]) -> Agent:
    """Create an Agent from options (or a dict of option fields)."""
    if not isinstance(options, AgentOptions):
        options = AgentOptions.model_validate(options)
    return Agent(id=options.id, options=options)


__all__ = [
    "ParameterType",
    "ToolParameterProperty",
    "ToolParameterSchema",
    "ToolDefinition",
    "AgentOptions",
    "Agent",
    "agent",
]
