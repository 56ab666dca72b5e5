"""
Atlas configuration from Django settings.
"""
from typing import Any, List, Optional

from django.conf import settings


def get_agent_configs() -> List[Any]:
    """Agent entries for Atlas.from_settings(): preset ids or AgentOptions dicts."""
    return list(getattr(settings, "ATLAS_AGENTS", ["jules-v1"]))


def get_default_agent_id() -> Optional[str]:
    return getattr(settings, "ATLAS_DEFAULT_AGENT_ID", None) or None


def get_max_tool_rounds() -> Optional[int]:
    """Tool rounds allowed per turn. None (or a non-positive value) = unbounded."""
    value = getattr(settings, "ATLAS_MAX_TOOL_ROUNDS", None)
    if value in (None, ""):
        return None
    value = int(value)
    return value if value > 0 else None


def should_log_chunks() -> bool:
    return bool(getattr(settings, "ATLAS_LOG_CHUNKS", False))
