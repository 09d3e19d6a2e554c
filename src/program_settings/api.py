"""Module-level settings functions backed by a shared store.

The shared ``SettingsStore`` is resolved from the ``ServiceLocator``; a
default store is created and registered on first use. Applications that
need custom configuration register their own store at startup. Every
function also accepts ``store=`` to bypass the locator.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, List, Optional, Type, TypeVar

from program_settings.di.container import ServiceLocator
from program_settings.store import SettingsStore

T = TypeVar("T")


def get_store() -> SettingsStore:
    """Return the shared store, creating it if needed."""
    return ServiceLocator().resolve_or_register(SettingsStore, SettingsStore)


def _store(store: Optional[SettingsStore]) -> SettingsStore:
    return store if store is not None else get_store()


def save_settings(app_name: str, settings: Any, *, store: Optional[SettingsStore] = None) -> None:
    _store(store).save_settings(app_name, settings)


def save_settings_with_filename(
    app_name: str, file_name: str, settings: Any, *, store: Optional[SettingsStore] = None
) -> None:
    _store(store).save_settings_with_filename(app_name, file_name, settings)


def load_settings(
    app_name: str, settings_type: Type[T], *, store: Optional[SettingsStore] = None
) -> T:
    return _store(store).load_settings(app_name, settings_type)


def load_settings_with_filename(
    app_name: str,
    file_name: str,
    settings_type: Type[T],
    *,
    store: Optional[SettingsStore] = None,
) -> T:
    return _store(store).load_settings_with_filename(app_name, file_name, settings_type)


def delete_settings(app_name: str, *, store: Optional[SettingsStore] = None) -> None:
    _store(store).delete_settings(app_name)


def delete_setting_file(
    app_name: str, file_name: str, *, store: Optional[SettingsStore] = None
) -> None:
    _store(store).delete_setting_file(app_name, file_name)


def settings_paths(*, store: Optional[SettingsStore] = None) -> List[Path]:
    """Paths recorded by the shared (or given) store's registry."""
    return _store(store).settings_paths()
