"""
Tests for serialization and deserialization of Name objects.

These tests ensure lossless JSON/YAML round-trip using the explicit
serialization functions in `namecore.serialization`.
"""

import pytest
from namecore.masking import MaskingError
from namecore.model import Name
from namecore.serialization import (
    name_to_dict,
    name_from_dict,
    name_to_json,
    name_from_json,
    name_to_yaml,
    name_from_yaml,
)


def build_sample_name() -> Name:
    return Name(["Oh\\.\\.\\.", "", "a\\/b\\\\c", "de"], "/")


def test_to_dict():
    n = Name(["oss", "cs"], ".")
    assert name_to_dict(n) == {"delimiter": ".", "components": ["oss", "cs"]}


def test_dict_roundtrip():
    n = build_sample_name()
    assert name_from_dict(name_to_dict(n)) == n


def test_json_roundtrip():
    n = build_sample_name()
    before = name_to_dict(n)
    restored = name_from_json(name_to_json(n))
    assert name_to_dict(restored) == before


def test_yaml_roundtrip():
    n = build_sample_name()
    before = name_to_dict(n)
    restored = name_from_yaml(name_to_yaml(n))
    assert name_to_dict(restored) == before


def test_missing_delimiter_defaults():
    n = name_from_dict({"components": ["a", "b"]})
    assert n.delimiter == "."


def test_empty_name_roundtrip():
    n = Name([])
    assert name_from_yaml(name_to_yaml(n)) == n


def test_unsupported_payload():
    with pytest.raises(TypeError):
        name_from_dict(["a", "b"])


def test_non_string_components():
    with pytest.raises(TypeError):
        name_from_dict({"components": ["a", 1]})


def test_non_string_delimiter():
    with pytest.raises(TypeError):
        name_from_json('{"components": ["a"], "delimiter": 5}')


def test_unmasked_component_rejected():
    """A component holding a bare delimiter would split on the next parse."""
    with pytest.raises(MaskingError):
        name_from_dict({"components": ["a.b"], "delimiter": "."})


def test_trailing_escape_component_rejected():
    with pytest.raises(MaskingError):
        name_from_yaml("components:\n- 'a\\'\ndelimiter: /\n")
