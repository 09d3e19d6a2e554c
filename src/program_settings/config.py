"""Store configuration, optionally loaded from a YAML file."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from program_settings.constants import SETTINGS_FILE_EXTENSION


class StoreConfig(BaseModel):
    """Options for a ``SettingsStore``.

    ``app_name`` stands in for the application identity when callers use
    the short ``save``/``load``/``delete`` forms; set it once at startup
    (for example from a package constant) instead of repeating it at
    every call site.
    """

    app_name: Optional[str] = Field(
        None, min_length=1, description="Default settings folder under the home directory"
    )
    file_extension: str = Field(
        SETTINGS_FILE_EXTENSION,
        min_length=1,
        description="Extension used for default settings file names",
    )

    @field_validator("file_extension")
    @classmethod
    def validate_extension(cls, v: str) -> str:
        if v.startswith("."):
            raise ValueError("file_extension must not start with '.'")
        return v

    @classmethod
    def load(cls, path: Path) -> StoreConfig:
        """Load configuration from a YAML file.

        Args:
            path: Path to the config file

        Returns:
            Validated StoreConfig object

        Raises:
            FileNotFoundError: If the config file does not exist
            RuntimeError: If the config file cannot be parsed or is invalid
        """
        if not path.exists():
            raise FileNotFoundError(f"Store config file not found: {path}")

        try:
            data = yaml.safe_load(path.read_text(encoding="utf-8"))
        except (OSError, yaml.YAMLError) as exc:
            raise RuntimeError(f"Unable to read config YAML: {exc}") from exc

        try:
            return cls.model_validate(data or {})
        except ValidationError as err:
            raise RuntimeError(f"Invalid store configuration:\n{err}") from err
