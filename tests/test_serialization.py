"""
Tests for serialization and deserialization of conjunctions.

These tests ensure lossless JSON/YAML round-trip using the explicit
serialization functions in `oxford_join.serialization`.
"""

import pytest
from oxford_join import Conjunction, SerializationError
from oxford_join.conjunction import FIXED_CONJUNCTIONS
from oxford_join.serialization import (
    conjunction_to_dict,
    conjunction_from_dict,
    conjunction_to_json,
    conjunction_from_json,
    conjunction_to_yaml,
    conjunction_from_yaml,
)


SAMPLES = FIXED_CONJUNCTIONS + (Conjunction.from_text("plus"), Conjunction.from_text("ou então"))


def test_fixed_dict_shape():
    assert conjunction_to_dict(Conjunction.AND_OR) == {"kind": "and_or"}


def test_custom_dict_shape():
    assert conjunction_to_dict(Conjunction.from_text(" plus ")) == {"kind": "other", "text": "plus"}


@pytest.mark.parametrize("conjunction", SAMPLES)
def test_json_roundtrip(conjunction):
    assert conjunction_from_json(conjunction_to_json(conjunction)) == conjunction


@pytest.mark.parametrize("conjunction", SAMPLES)
def test_yaml_roundtrip(conjunction):
    assert conjunction_from_yaml(conjunction_to_yaml(conjunction)) == conjunction


def test_missing_kind_defaults_to_and():
    assert conjunction_from_dict({}) == Conjunction.AND


def test_custom_text_is_trimmed():
    assert conjunction_from_dict({"kind": "other", "text": "  versus "}).text == "versus"


def test_unknown_kind():
    with pytest.raises(SerializationError):
        conjunction_from_dict({"kind": "xor"})


def test_not_a_mapping():
    with pytest.raises(SerializationError):
        conjunction_from_dict(["and"])


def test_bad_custom_text():
    with pytest.raises(SerializationError):
        conjunction_from_dict({"kind": "other", "text": 7})


def test_invalid_json():
    with pytest.raises(SerializationError):
        conjunction_from_json("{kind: and")


def test_invalid_yaml():
    with pytest.raises(SerializationError):
        conjunction_from_yaml("kind: [and")
