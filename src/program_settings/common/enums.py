from enum import Enum


class SettingsErrorKind(Enum):
    """Failure categories for settings persistence.

    Save, load and delete operations each accept a closed subset of these
    kinds; see ``program_settings.errors``.
    """

    FAILED_TO_GET_USER_HOME = "failed_to_get_user_home"
    IO = "io"
    SERIALIZATION = "serialization"
    DESERIALIZATION = "deserialization"
