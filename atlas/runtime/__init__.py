from .agent_runtime import AgentRuntime
from .dispatch import dispatch_tool_calls

__all__ = ["AgentRuntime", "dispatch_tool_calls"]
