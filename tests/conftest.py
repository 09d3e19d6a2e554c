from collections.abc import Generator
from pathlib import Path

import pytest

from program_settings.di.container import ServiceLocator
from program_settings.store import SettingsStore
from tests.models import Flat, Inner, Nested, Other


@pytest.fixture
def flat() -> Flat:
    return Flat(a=-10.0444, b=0, c="random text to save as a settings file")


@pytest.fixture
def nested() -> Nested:
    return Nested(
        settings=Inner(
            a=17,
            b=True,
            c="asdad",
            list=["dsadasdsad49\"836521rf62%$^^%*%(^@", "724\"'''''\"\"419"],
        ),
        other_struct=Other(a=False, b=-390.724419, c=("dsoicjsdoicsdoci", -15)),
    )


@pytest.fixture
def home(tmp_path: Path) -> Path:
    path = tmp_path / "home"
    path.mkdir()
    return path


@pytest.fixture
def store(home: Path) -> SettingsStore:
    return SettingsStore(home_resolver=lambda: home)


@pytest.fixture
def homeless_store() -> SettingsStore:
    return SettingsStore(home_resolver=lambda: None)


@pytest.fixture
def shared_store(home: Path, monkeypatch: pytest.MonkeyPatch) -> Generator[SettingsStore, None, None]:
    """Fresh shared store with the OS home directory pointed at ``home``."""
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("USERPROFILE", str(home))
    locator = ServiceLocator()
    locator.unregister(SettingsStore)
    store = SettingsStore()
    locator.register(SettingsStore, store)
    yield store
    locator.unregister(SettingsStore)
