"""Exception classes for settings persistence.

This module defines one exception per operation family (save, load,
delete). Each carries a ``SettingsErrorKind`` drawn from a closed set
for that family, plus the underlying exception when there is one.
"""

from __future__ import annotations

from typing import ClassVar, FrozenSet, Optional, Union

from program_settings.common.enums import SettingsErrorKind


class SettingsError(Exception):
    """Base error for settings persistence failures.

    Subclasses restrict ``kind`` to the categories their operation can
    actually produce.
    """

    allowed_kinds: ClassVar[FrozenSet[SettingsErrorKind]] = frozenset(SettingsErrorKind)

    def __init__(
        self,
        kind: SettingsErrorKind,
        message: str,
        original_error: Optional[BaseException] = None,
    ) -> None:
        """Initialize the exception.

        Args:
            kind: Failure category
            message: Human-readable error message
            original_error: The exception that caused this failure, if any

        Raises:
            ValueError: If ``kind`` is not valid for this error class
        """
        if kind not in self.allowed_kinds:
            raise ValueError(f"{type(self).__name__} does not accept kind {kind.name}")
        super().__init__(f"[{kind.value}] {message}")
        self.kind: SettingsErrorKind = kind
        self.message: str = message
        self.original_error: Optional[BaseException] = original_error

    @property
    def is_home_error(self) -> bool:
        """Whether the user's home directory could not be determined."""
        return self.kind is SettingsErrorKind.FAILED_TO_GET_USER_HOME

    @property
    def is_io_error(self) -> bool:
        """Whether a filesystem operation failed."""
        return self.kind is SettingsErrorKind.IO

    @classmethod
    def home_unavailable(cls) -> SettingsError:
        """Create an error for an unresolvable home directory."""
        return cls(
            SettingsErrorKind.FAILED_TO_GET_USER_HOME,
            "Unable to determine the user's home directory",
        )

    @classmethod
    def from_os_error(cls, exc: Union[OSError, UnicodeError]) -> SettingsError:
        """Create an I/O error wrapping ``exc``.

        Args:
            exc: The filesystem error that was caught

        Returns:
            Error of kind ``IO`` carrying ``exc``
        """
        return cls(SettingsErrorKind.IO, str(exc), exc)


class SaveSettingsError(SettingsError):
    """Raised when settings cannot be saved."""

    allowed_kinds = frozenset(
        {
            SettingsErrorKind.FAILED_TO_GET_USER_HOME,
            SettingsErrorKind.IO,
            SettingsErrorKind.SERIALIZATION,
        }
    )


class LoadSettingsError(SettingsError):
    """Raised when settings cannot be loaded."""

    allowed_kinds = frozenset(
        {
            SettingsErrorKind.FAILED_TO_GET_USER_HOME,
            SettingsErrorKind.IO,
            SettingsErrorKind.DESERIALIZATION,
        }
    )


class DeleteSettingsError(SettingsError):
    """Raised when a settings file or directory cannot be deleted."""

    allowed_kinds = frozenset(
        {
            SettingsErrorKind.FAILED_TO_GET_USER_HOME,
            SettingsErrorKind.IO,
        }
    )
