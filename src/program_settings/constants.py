from typing import Final

# Extension appended to the application name to build the default file name
SETTINGS_FILE_EXTENSION: Final = "ser"

# Text encoding used for settings files
SETTINGS_FILE_ENCODING: Final = "utf-8"

# YAML rendering options for human-editable output
YAML_INDENT: Final = 2
YAML_WIDTH: Final = 88
