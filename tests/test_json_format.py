import json

import pytest

from d2modgen.json_format import read_json, write_json


def test_read_object():
    assert read_json('{"id": "qol", "enabled": true, "seed": 5}') == {
        "id": "qol",
        "enabled": True,
        "seed": 5,
    }


def test_read_array_with_nested_values():
    assert read_json('[1, 2.5, "x", null, {"a": [false]}]') == [1, 2.5, "x", None, {"a": [False]}]


def test_read_bytes_with_bom():
    assert read_json(b'\xef\xbb\xbf{"key": "value"}') == {"key": "value"}


def test_read_text_with_bom():
    assert read_json('\ufeff[1]') == [1]


@pytest.mark.parametrize("text", ["42", '"text"', "true", "null"])
def test_scalar_top_level_is_rejected(text):
    with pytest.raises(ValueError):
        read_json(text)


@pytest.mark.parametrize("text", ["", "{", '{"a": }', "[1,]"])
def test_invalid_json_is_rejected(text):
    with pytest.raises(ValueError):
        read_json(text)


def test_unsigned_64_bit_value_wraps_to_signed():
    assert read_json("[18446744073709551615]") == [-1]


def test_write_is_compact():
    assert write_json({"a": 1, "b": [True, None]}) == '{"a":1,"b":[true,null]}'


def test_write_keeps_non_ascii_text():
    text = write_json({"name": "Лук"})
    assert "Лук" in text
    assert read_json(text) == {"name": "Лук"}


def test_write_none_raises():
    with pytest.raises(ValueError):
        write_json(None)


@pytest.mark.parametrize(
    "document",
    [
        {"main": {"modname": "mod", "seed": 7, "isLegacy": False}},
        [1, -2, 3.25, "s", [], {}],
        {"nested": {"deeper": {"list": [None, True, "x"]}}},
    ],
)
def test_round_trip(document):
    text = write_json(document)
    assert read_json(text) == document
    assert json.loads(text) == document


def test_round_trip_through_bytes():
    document = {"k": ["v", 1]}
    assert read_json(write_json(document).encode("utf-8")) == document