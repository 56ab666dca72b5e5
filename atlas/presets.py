"""Bundled agent presets, addressable by agent id from ``ATLAS_AGENTS``."""

from __future__ import annotations

from typing import Dict, List

from atlas.service.errors import AtlasConfigurationError
from atlas.types.agents import AgentOptions, ToolDefinition


def _definition(name: str, description: str, properties: Dict[str, str], required: List[str]) -> ToolDefinition:
    return ToolDefinition.model_validate(
        {
            "name": name,
            "description": description,
            "parameters": {
                "type": "object",
                "properties": {
                    key: {"type": "string", "description": text} for key, text in properties.items()
                },
                "required": required or None,
            },
        }
    )


JULES_TOOLS: List[ToolDefinition] = [
    _definition(
        "list_files",
        "Lists all files and directories under the given directory.",
        {"path": "The directory path to list files from. Defaults to the root of the repo."},
        [],
    ),
    _definition(
        "read_file",
        "Reads the content of the specified file in the repo.",
        {"filepath": "The path of the file to read, relative to the repo root."},
        ["filepath"],
    ),
    _definition(
        "create_file_with_block",
        "Use this to create a new file.",
        {
            "filepath": "The path of the file to create.",
            "content": "The content to write to the new file.",
        },
        ["filepath", "content"],
    ),
    _definition(
        "overwrite_file_with_block",
        "Use this tool to completely replace the entire content of an existing file.",
        {
            "filepath": "The path of the file to overwrite.",
            "content": "The new content for the file.",
        },
        ["filepath", "content"],
    ),
    _definition(
        "run_in_bash_session",
        "Runs the given bash command in the sandbox.",
        {"command": "The bash command to run."},
        ["command"],
    ),
    _definition(
        "set_plan",
        "Use it after initial exploration to set the first plan, and later as needed if the plan is updated.",
        {"plan": "The plan to solve the issue, in Markdown format."},
        ["plan"],
    ),
]

JULES_AGENT = AgentOptions(
    id="jules-v1",
    name="Jules",
    provider="openai",
    model="gpt-4",
    system_prompt=(
        "You are Jules, a skilled software engineer. Your purpose is to assist users by "
        "completing coding tasks. You are resourceful and will use the tools at your "
        "disposal to accomplish your goals."
    ),
    tools=JULES_TOOLS,
)

PRESETS: Dict[str, AgentOptions] = {JULES_AGENT.id: JULES_AGENT}


def get_preset(agent_id: str) -> AgentOptions:
    """Return the preset AgentOptions for ``agent_id``. Raises AtlasConfigurationError if unknown."""
    preset = PRESETS.get(agent_id)
    if preset is None:
        raise AtlasConfigurationError(
            f"Unknown agent preset '{agent_id}'. Available: {list(PRESETS.keys()) or '[]'}"
        )
    return preset


__all__ = ["JULES_TOOLS", "JULES_AGENT", "PRESETS", "get_preset"]
