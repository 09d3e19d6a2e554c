import sys
from dataclasses import dataclass, field
from typing import Dict, List, Optional

import pytest
import yaml
from pydantic import BaseModel

from program_settings.serialization import (
    DeserializationFailure,
    SerializationFailure,
    deserialize,
    serialize,
)
from tests.models import Flat, Nested


@dataclass
class Window:
    width: int
    height: int
    tags: List[str] = field(default_factory=list)


class WithDefaults(BaseModel):
    name: str
    retries: int = 3
    proxy: Optional[str] = None


class Unsupported:
    pass


needs_int_digit_limit = pytest.mark.skipif(
    not hasattr(sys, "get_int_max_str_digits"),
    reason="interpreter has no int string conversion limit",
)


def test_output_is_block_style_yaml(flat: Flat) -> None:
    text = serialize(flat)
    assert text.splitlines() == [
        "a: -10.0444",
        "b: 0",
        "c: random text to save as a settings file",
    ]


def test_nested_tables_keep_declaration_order(nested: Nested) -> None:
    text = serialize(nested)
    assert text.index("settings:") < text.index("other_struct:")
    data = yaml.safe_load(text)
    assert data["other_struct"]["c"] == ["dsoicjsdoicsdoci", -15]


def test_nested_value_comes_back_equal(nested: Nested) -> None:
    assert deserialize(serialize(nested), Nested) == nested


def test_tuple_is_restored_from_sequence(nested: Nested) -> None:
    loaded = deserialize(serialize(nested), Nested)
    assert loaded.other_struct.c == ("dsoicjsdoicsdoci", -15)
    assert isinstance(loaded.other_struct.c, tuple)


def test_dataclass_values_are_supported() -> None:
    win = Window(width=800, height=600, tags=["main"])
    assert deserialize(serialize(win), Window) == win


def test_missing_fields_fall_back_to_defaults() -> None:
    loaded = deserialize("name: demo\n", WithDefaults)
    assert loaded == WithDefaults(name="demo", retries=3, proxy=None)


def test_plain_containers_round_trip() -> None:
    value: Dict[str, List[float]] = {"weights": [0.1, 0.2, 1e-05]}
    assert deserialize(serialize(value), Dict[str, List[float]]) == value


def test_unsupported_type_fails_to_serialize() -> None:
    with pytest.raises(SerializationFailure) as exc_info:
        serialize(Unsupported())
    assert exc_info.value.__cause__ is not None


def test_unserializable_nested_value_fails() -> None:
    with pytest.raises(SerializationFailure):
        serialize({"handle": Unsupported()})


@pytest.mark.parametrize(
    "text",
    [
        "a: [unclosed\n",
        "a: not-a-float\nb: 0\nc: x\n",
        "b: 0\nc: x\n",
        "",
        "a: 1.0\nb: 0\nc: 2024-13-45\n",
        "a: 1.0\nb: 0\nc: " + "[" * 100000 + "]" * 100000 + "\n",
        pytest.param("a: 1.0\nb: " + "9" * 5000 + "\nc: x\n", marks=needs_int_digit_limit),
    ],
)
def test_bad_text_fails_to_deserialize(text: str) -> None:
    with pytest.raises(DeserializationFailure):
        deserialize(text, Flat)


@needs_int_digit_limit
def test_oversized_int_fails_to_serialize() -> None:
    with pytest.raises(SerializationFailure) as exc_info:
        serialize({"n": 10**5000})
    assert isinstance(exc_info.value.__cause__, ValueError)
