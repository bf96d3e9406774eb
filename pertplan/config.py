"""User settings for pertplan.

Stored in ~/.pertplan/config.json (or $PERTPLAN_HOME/config.json).
"""

import json
import logging
import os
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ValidationError

from pertplan.application.export_service import DEFAULT_JSON_FILENAME

logger = logging.getLogger(__name__)

FILE_ENV_VAR = "PERTPLAN_FILE"
HOME_ENV_VAR = "PERTPLAN_HOME"
DEBUG_ENV_VAR = "PERTPLAN_DEBUG"


class Settings(BaseModel):
    """Persisted user preferences."""

    snapshot_path: str = DEFAULT_JSON_FILENAME


def get_config_dir() -> Path:
    """Get the pertplan config directory."""
    override = os.environ.get(HOME_ENV_VAR)
    config_dir = Path(override) if override else Path.home() / ".pertplan"
    config_dir.mkdir(parents=True, exist_ok=True)
    return config_dir


def get_settings() -> Settings:
    """Load settings, falling back to defaults if missing or unreadable."""
    config_file = get_config_dir() / "config.json"
    if config_file.exists():
        try:
            data = json.loads(config_file.read_text(encoding="utf-8"))
            return Settings(**data)
        except (json.JSONDecodeError, ValidationError, TypeError) as e:
            logger.warning(f"Ignoring invalid settings in {config_file}: {e}")
    return Settings()


def save_settings(settings: Settings) -> None:
    config_file = get_config_dir() / "config.json"
    config_file.write_text(
        json.dumps(settings.model_dump(), indent=2),
        encoding="utf-8",
    )


def debug_enabled() -> bool:
    return os.environ.get(DEBUG_ENV_VAR, "").lower() in ("1", "true", "yes")


def resolve_snapshot_path(explicit: Optional[Path] = None) -> Path:
    """Work out which snapshot file to use.

    Resolution order:
    1. Explicit path (from -f/--file, which typer also fills from
       PERTPLAN_FILE)
    2. PERTPLAN_FILE environment variable
    3. snapshot_path from the settings file
    """
    if explicit is not None:
        return explicit

    env_path = os.environ.get(FILE_ENV_VAR)
    if env_path:
        return Path(env_path)

    return Path(get_settings().snapshot_path)
