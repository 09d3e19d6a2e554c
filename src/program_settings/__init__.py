"""Persist application settings under the user's home directory.

This package provides:
- save/load/delete functions writing ``<home>/<app_name>/<file_name>``
- SettingsStore: the same operations bound to an injectable path registry
- SettingsContainer: a settings value that remembers its own location
"""

from program_settings.api import (
    delete_setting_file,
    delete_settings,
    get_store,
    load_settings,
    load_settings_with_filename,
    save_settings,
    save_settings_with_filename,
    settings_paths,
)
from program_settings.common.enums import SettingsErrorKind
from program_settings.config import StoreConfig
from program_settings.errors import (
    DeleteSettingsError,
    LoadSettingsError,
    SaveSettingsError,
    SettingsError,
)
from program_settings.paths import get_user_home
from program_settings.registry import PathRegistry
from program_settings.settings_container import SettingsContainer
from program_settings.store import SettingsStore

__all__ = [
    "DeleteSettingsError",
    "LoadSettingsError",
    "PathRegistry",
    "SaveSettingsError",
    "SettingsContainer",
    "SettingsError",
    "SettingsErrorKind",
    "SettingsStore",
    "StoreConfig",
    "delete_setting_file",
    "delete_settings",
    "get_store",
    "get_user_home",
    "load_settings",
    "load_settings_with_filename",
    "save_settings",
    "save_settings_with_filename",
    "settings_paths",
]
