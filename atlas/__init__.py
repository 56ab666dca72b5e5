"""
Agent orchestration app.

Public entrypoint:

    from atlas import get_atlas
    atlas = get_atlas()
"""

from .service.atlas import Atlas, get_atlas  # noqa: F401

__all__ = ["Atlas", "get_atlas"]
