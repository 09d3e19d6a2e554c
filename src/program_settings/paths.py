"""Home directory lookup and settings path construction."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Final, Optional

from program_settings.constants import SETTINGS_FILE_EXTENSION

logger: Final = logging.getLogger(__name__)


def get_user_home() -> Optional[Path]:
    """Return the current user's home directory.

    Returns:
        Home directory, or None if the platform cannot determine one
    """
    try:
        return Path.home()
    except (RuntimeError, KeyError):
        # No HOME/USERPROFILE and no password database entry
        return None


def default_file_name(app_name: str, extension: str = SETTINGS_FILE_EXTENSION) -> str:
    """Default settings file name for an application (``<app_name>.<ext>``)."""
    return f"{app_name}.{extension}"


def settings_dir(home: Path, app_name: str) -> Path:
    return home / app_name


def settings_file_path(home: Path, app_name: str, file_name: str) -> Path:
    return settings_dir(home, app_name) / file_name


def ensure_directory_exists(directory: Path) -> None:
    """Create directory and any missing parents if it doesn't exist.

    Args:
        directory: Path to create

    Raises:
        OSError: If the directory cannot be created
    """
    if not directory.exists():
        directory.mkdir(parents=True, exist_ok=True)
        logger.debug("Created directory: %s", directory)
