from pathlib import Path

import pytest

from program_settings.paths import (
    default_file_name,
    ensure_directory_exists,
    get_user_home,
    settings_dir,
    settings_file_path,
)


def test_get_user_home_follows_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setenv("USERPROFILE", str(tmp_path))
    assert get_user_home() == tmp_path


def test_get_user_home_returns_none_when_unresolvable(monkeypatch: pytest.MonkeyPatch) -> None:
    def no_home() -> Path:
        raise RuntimeError("Could not determine home directory.")

    monkeypatch.setattr(Path, "home", staticmethod(no_home))
    assert get_user_home() is None


def test_default_file_name() -> None:
    assert default_file_name("foo") == "foo.ser"
    assert default_file_name("foo", "yaml") == "foo.yaml"


def test_settings_paths_are_built_under_home(tmp_path: Path) -> None:
    assert settings_dir(tmp_path, "demo_app") == tmp_path / "demo_app"
    assert settings_file_path(tmp_path, "demo_app", "x.ser") == tmp_path / "demo_app" / "x.ser"


def test_names_are_not_validated(tmp_path: Path) -> None:
    path = settings_file_path(tmp_path, "outer/inner", "x.ser")
    assert path == tmp_path / "outer" / "inner" / "x.ser"


def test_ensure_directory_exists_is_idempotent(tmp_path: Path) -> None:
    target = tmp_path / "a" / "b" / "c"
    ensure_directory_exists(target)
    ensure_directory_exists(target)
    assert target.is_dir()
