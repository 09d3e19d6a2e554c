"""Settings wrapper that remembers where it is stored."""

from __future__ import annotations

from typing import TYPE_CHECKING, Generic, Optional, TypeVar

from pydantic import BaseModel, Field

from program_settings.errors import LoadSettingsError

if TYPE_CHECKING:
    from program_settings.store import SettingsStore

T = TypeVar("T")


def _resolve_store(store: Optional[SettingsStore]) -> SettingsStore:
    if store is not None:
        return store
    from program_settings.api import get_store

    return get_store()


class SettingsContainer(BaseModel, Generic[T]):
    """A settings value bound to its own app name and file name.

    The whole container is what gets written, so ``app_name`` and
    ``file_name`` are stored in the file next to the payload. Both are
    frozen once the container is built.

    Parametrize the class to get a typed payload on load:

        container = SettingsContainer.new(prefs, "my_app", "prefs.ser")
        container.save()
        loaded = SettingsContainer[Prefs].load("my_app", "prefs.ser")
        assert loaded == container

    A container whose ``settings`` is None is "empty"; it comes from
    ``default()`` or from ``try_load_or_default()`` when loading failed.
    """

    settings: Optional[T] = None
    app_name: str = Field(..., frozen=True)
    file_name: str = Field(..., frozen=True)

    @classmethod
    def new(cls, settings: T, app_name: str, file_name: str) -> SettingsContainer[T]:
        return cls(settings=settings, app_name=app_name, file_name=file_name)

    @classmethod
    def default(cls, app_name: str, file_name: str) -> SettingsContainer[T]:
        """Create an empty container for the given location."""
        return cls(settings=None, app_name=app_name, file_name=file_name)

    @property
    def is_populated(self) -> bool:
        return self.settings is not None

    def get_settings(self) -> Optional[T]:
        """Return the held settings object (mutations apply in place)."""
        return self.settings

    def set_settings(self, settings: T) -> None:
        self.settings = settings

    def save(self, store: Optional[SettingsStore] = None) -> None:
        """Save this container to ``<home>/<app_name>/<file_name>``.

        Raises:
            SaveSettingsError: If the container cannot be written
        """
        _resolve_store(store).save_settings_with_filename(self.app_name, self.file_name, self)

    @classmethod
    def load(
        cls, app_name: str, file_name: str, store: Optional[SettingsStore] = None
    ) -> SettingsContainer[T]:
        """Load a container previously written by ``save()``.

        Raises:
            LoadSettingsError: If the file is missing, unreadable or invalid
        """
        return _resolve_store(store).load_settings_with_filename(app_name, file_name, cls)

    @classmethod
    def try_load_or_default(
        cls, app_name: str, file_name: str, store: Optional[SettingsStore] = None
    ) -> SettingsContainer[T]:
        """Load a container, or return ``default()`` on any load failure."""
        try:
            return cls.load(app_name, file_name, store)
        except LoadSettingsError:
            return cls.default(app_name, file_name)
