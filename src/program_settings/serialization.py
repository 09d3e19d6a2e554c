"""Conversion between settings values and their YAML text form.

Values are first reduced to JSON-compatible data with a pydantic
``TypeAdapter`` for their runtime type, then rendered as block-style
YAML. Loading reverses the process, validating the parsed data into
the requested type so nested models, tuples and defaulted fields come
back as they were declared.
"""

from __future__ import annotations

from typing import Any, Type, TypeVar

import yaml
from pydantic import PydanticSchemaGenerationError, TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError

from program_settings.constants import YAML_INDENT, YAML_WIDTH

T = TypeVar("T")


class SerializationFailure(Exception):
    """A value could not be rendered as settings text."""


class DeserializationFailure(Exception):
    """Settings text could not be parsed into the requested type."""


def serialize(value: Any) -> str:
    """Render a settings value as pretty YAML.

    Args:
        value: Any value pydantic can serialize (models, dataclasses,
            containers and scalars)

    Returns:
        YAML document text

    Raises:
        SerializationFailure: If the value's type is unsupported or a
            nested value cannot be converted
    """
    try:
        data = TypeAdapter(type(value)).dump_python(value, mode="json")
        return yaml.safe_dump(
            data,
            default_flow_style=False,
            sort_keys=False,
            allow_unicode=True,
            indent=YAML_INDENT,
            width=YAML_WIDTH,
        )
    except (
        PydanticSchemaGenerationError,
        PydanticSerializationError,
        yaml.YAMLError,
        ValueError,
        RecursionError,
    ) as exc:
        raise SerializationFailure(str(exc)) from exc


def deserialize(text: str, target_type: Type[T]) -> T:
    """Parse YAML text into ``target_type``.

    Args:
        text: YAML document text
        target_type: Type to validate the parsed data into

    Returns:
        Validated instance of ``target_type``

    Raises:
        DeserializationFailure: If the text is not valid YAML or does not
            match ``target_type``
    """
    try:
        data = yaml.safe_load(text)
        return TypeAdapter(target_type).validate_python(data)
    except (
        yaml.YAMLError,
        ValidationError,
        PydanticSchemaGenerationError,
        ValueError,
        RecursionError,
    ) as exc:
        raise DeserializationFailure(str(exc)) from exc
