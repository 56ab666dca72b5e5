"""
Django settings for the Atlas agent orchestration project.

Only the pieces Atlas needs: the app itself, logging, and the ``ATLAS_*``
knobs read by ``atlas.conf``. Values can be overridden from the environment.
"""

import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent

SECRET_KEY = os.environ.get("DJANGO_SECRET_KEY", "insecure-dev-key-change-me")
DEBUG = os.environ.get("DJANGO_DEBUG", "False").lower() == "true"
ALLOWED_HOSTS = [h.strip() for h in os.environ.get("DJANGO_ALLOWED_HOSTS", "").split(",") if h.strip()]

INSTALLED_APPS = [
    "atlas",
]

# Atlas keeps no state in a database.
DATABASES = {}

USE_TZ = True
TIME_ZONE = "UTC"

# --- Atlas ---------------------------------------------------------------

# Preset ids (see atlas.presets) or AgentOptions dicts.
ATLAS_AGENTS = [a.strip() for a in os.environ.get("ATLAS_AGENTS", "jules-v1").split(",") if a.strip()]
ATLAS_DEFAULT_AGENT_ID = os.environ.get("ATLAS_DEFAULT_AGENT_ID") or None
# Unset = no limit on tool rounds per turn.
ATLAS_MAX_TOOL_ROUNDS = os.environ.get("ATLAS_MAX_TOOL_ROUNDS") or None
ATLAS_LOG_CHUNKS = os.environ.get("ATLAS_LOG_CHUNKS", "False").lower() == "true"

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {"format": "%(asctime)s %(levelname)s %(name)s: %(message)s"},
    },
    "handlers": {
        "console": {"class": "logging.StreamHandler", "formatter": "simple"},
    },
    "loggers": {
        "atlas": {
            "handlers": ["console"],
            "level": os.environ.get("ATLAS_LOG_LEVEL", "INFO"),
            "propagate": True,
        },
    },
}
