import logging

from django.apps import AppConfig

logger = logging.getLogger(__name__)


class AtlasConfig(AppConfig):
    name = "atlas"
    verbose_name = "Atlas Agents"

    def ready(self) -> None:  # pragma: no cover - import side effects only
        # Import providers and built-in tools so they register in the process-wide registries.
        try:
            from .core import providers  # noqa: F401
            from .tools import builtins  # noqa: F401
        except Exception:
            logger.error(
                "Failed to import Atlas providers/tools during startup. "
                "Agents that depend on them will fail to register until the issue is resolved.",
                exc_info=True,
            )
