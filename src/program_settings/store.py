"""Save, load and delete settings files under the user's home directory.

Files live at ``<home>/<app_name>/<file_name>``; the default file name is
``<app_name>.ser``. Every successful save or load is recorded in the
store's ``PathRegistry``.

Examples:
    store = SettingsStore()
    store.save_settings("my_app", settings)
    loaded = store.load_settings("my_app", Settings)
    store.delete_settings("my_app")
"""

from __future__ import annotations

import logging
import shutil
from pathlib import Path
from typing import Any, Callable, Final, List, Optional, Type, TypeVar

from program_settings.common.enums import SettingsErrorKind
from program_settings.config import StoreConfig
from program_settings.constants import SETTINGS_FILE_ENCODING
from program_settings.errors import (
    DeleteSettingsError,
    LoadSettingsError,
    SaveSettingsError,
    SettingsError,
)
from program_settings.paths import (
    default_file_name,
    ensure_directory_exists,
    get_user_home,
    settings_dir,
    settings_file_path,
)
from program_settings.registry import PathRegistry
from program_settings.serialization import (
    DeserializationFailure,
    SerializationFailure,
    deserialize,
    serialize,
)

logger: Final = logging.getLogger(__name__)

T = TypeVar("T")
E = TypeVar("E", bound=SettingsError)

HomeResolver = Callable[[], Optional[Path]]


class SettingsStore:
    """Settings persistence bound to one path registry.

    The store is the composition point for home lookup, path building,
    serialization and the registry. Applications normally share one
    instance (see ``program_settings.api``); tests create their own with
    a custom ``home_resolver``.
    """

    def __init__(
        self,
        registry: Optional[PathRegistry] = None,
        home_resolver: HomeResolver = get_user_home,
        config: Optional[StoreConfig] = None,
    ) -> None:
        """Initialize the store.

        Args:
            registry: Registry to record paths in (default: a new one)
            home_resolver: Callable returning the home directory or None
            config: Store options (default: ``StoreConfig()``)
        """
        self.registry = registry if registry is not None else PathRegistry()
        self.home_resolver = home_resolver
        self.config = config or StoreConfig()

    # ---- helpers ----
    def _resolve_home(self, error_cls: Type[E]) -> Path:
        home = self.home_resolver()
        if home is None:
            raise error_cls.home_unavailable()
        return home

    def _default_file_name(self, app_name: str) -> str:
        return default_file_name(app_name, self.config.file_extension)

    def settings_paths(self) -> List[Path]:
        """Snapshot of every path recorded by successful saves and loads."""
        return self.registry.snapshot()

    # ---- save ----
    def save_settings_with_filename(self, app_name: str, file_name: str, settings: Any) -> None:
        """Save ``settings`` to ``<home>/<app_name>/<file_name>``.

        The directory tree is created if needed and any existing file is
        overwritten in place.

        Args:
            app_name: Settings folder under the home directory
            file_name: File name inside the settings folder
            settings: Value to serialize

        Raises:
            SaveSettingsError: If the home directory is unknown, the file
                cannot be written, or the value cannot be serialized
        """
        home = self._resolve_home(SaveSettingsError)
        directory = settings_dir(home, app_name)
        file_path = settings_file_path(home, app_name, file_name)

        try:
            ensure_directory_exists(directory)
            with file_path.open("w", encoding=SETTINGS_FILE_ENCODING) as fh:
                try:
                    text = serialize(settings)
                except SerializationFailure as exc:
                    raise SaveSettingsError(
                        SettingsErrorKind.SERIALIZATION, str(exc), exc.__cause__
                    ) from exc
                fh.write(text)
        except OSError as exc:
            raise SaveSettingsError.from_os_error(exc) from exc

        self.registry.append(file_path)
        logger.debug("Saved settings to %s", file_path)

    def save_settings(self, app_name: str, settings: Any) -> None:
        """Save ``settings`` to the default file of ``app_name``.

        Equivalent to ``save_settings_with_filename(app_name,
        "<app_name>.ser", settings)``.
        """
        self.save_settings_with_filename(app_name, self._default_file_name(app_name), settings)

    # ---- load ----
    def load_settings_with_filename(
        self, app_name: str, file_name: str, settings_type: Type[T]
    ) -> T:
        """Load ``<home>/<app_name>/<file_name>`` as ``settings_type``.

        Args:
            app_name: Settings folder under the home directory
            file_name: File name inside the settings folder
            settings_type: Type to validate the file contents into

        Returns:
            The loaded settings value

        Raises:
            LoadSettingsError: If the home directory is unknown, the file
                cannot be read, or its contents do not match the type
        """
        home = self._resolve_home(LoadSettingsError)
        file_path = settings_file_path(home, app_name, file_name)

        try:
            with file_path.open("r", encoding=SETTINGS_FILE_ENCODING) as fh:
                text = fh.read()
        except (OSError, UnicodeDecodeError) as exc:
            raise LoadSettingsError.from_os_error(exc) from exc

        try:
            settings = deserialize(text, settings_type)
        except DeserializationFailure as exc:
            raise LoadSettingsError(
                SettingsErrorKind.DESERIALIZATION, str(exc), exc.__cause__
            ) from exc

        if self.registry.append_unique(file_path):
            logger.debug("Registered settings path %s", file_path)
        logger.debug("Loaded settings from %s", file_path)
        return settings

    def load_settings(self, app_name: str, settings_type: Type[T]) -> T:
        """Load the default file of ``app_name`` as ``settings_type``."""
        return self.load_settings_with_filename(
            app_name, self._default_file_name(app_name), settings_type
        )

    # ---- delete ----
    def delete_settings(self, app_name: str) -> None:
        """Delete the whole settings folder of ``app_name``.

        Registry entries for files directly inside the folder are removed.

        Raises:
            DeleteSettingsError: If the home directory is unknown or the
                folder cannot be removed
        """
        home = self._resolve_home(DeleteSettingsError)
        directory = settings_dir(home, app_name)

        try:
            shutil.rmtree(directory)
        except OSError as exc:
            raise DeleteSettingsError.from_os_error(exc) from exc

        self.registry.remove_children_of(directory)
        logger.debug("Deleted settings directory %s", directory)

    def delete_setting_file(self, app_name: str, file_name: str) -> None:
        """Delete one settings file and forget every registry entry for it.

        Raises:
            DeleteSettingsError: If the home directory is unknown or the
                file cannot be removed
        """
        home = self._resolve_home(DeleteSettingsError)
        file_path = settings_file_path(home, app_name, file_name)

        try:
            file_path.unlink()
        except OSError as exc:
            raise DeleteSettingsError.from_os_error(exc) from exc

        self.registry.remove(file_path)
        logger.debug("Deleted settings file %s", file_path)

    # ---- short forms using the configured app name ----
    def _folder(self, folder_name: Optional[str]) -> str:
        folder = folder_name or self.config.app_name
        if not folder:
            raise ValueError("No folder_name given and no app_name configured")
        return folder

    def save(
        self, settings: Any, file_name: Optional[str] = None, folder_name: Optional[str] = None
    ) -> None:
        """Save ``settings`` using the configured app name as the folder.

        Args:
            settings: Value to serialize
            file_name: File name (default: ``<folder>.ser``)
            folder_name: Folder override (default: ``config.app_name``)

        Raises:
            ValueError: If no folder is given and none is configured
            SaveSettingsError: As for ``save_settings_with_filename``
        """
        folder = self._folder(folder_name)
        self.save_settings_with_filename(
            folder, file_name or self._default_file_name(folder), settings
        )

    def load(
        self,
        settings_type: Type[T],
        file_name: Optional[str] = None,
        folder_name: Optional[str] = None,
    ) -> T:
        """Load settings using the configured app name as the folder."""
        folder = self._folder(folder_name)
        return self.load_settings_with_filename(
            folder, file_name or self._default_file_name(folder), settings_type
        )

    def delete(self, file_name: Optional[str] = None, folder_name: Optional[str] = None) -> None:
        """Delete one file, or the whole folder when no file name is given."""
        folder = self._folder(folder_name)
        if file_name is None:
            self.delete_settings(folder)
        else:
            self.delete_setting_file(folder, file_name)
