import json

import pytest

from tailcall.key_values import KeyValues


def _dump(kv):
    return json.dumps(kv.to_list(), separators=(",", ":"))


def test_serialize_empty_keyvalues():
    assert _dump(KeyValues()) == "[]"


def test_serialize_non_empty_keyvalues():
    kv = KeyValues()
    kv["a"] = "b"
    assert _dump(kv) == '[{"key":"a","value":"b"}]'


def test_deserialize_empty_keyvalues():
    kv = KeyValues.from_list(json.loads("[]"))
    assert kv == KeyValues()


def test_deserialize_non_empty_keyvalues():
    kv = KeyValues.from_list(json.loads('[{"key":"a","value":"b"}]'))
    assert kv["a"] == "b"


def test_default_keyvalues():
    assert len(KeyValues()) == 0


def test_lookup():
    kv = KeyValues({"a": "b"})
    assert kv["a"] == "b"


def test_iteration_is_sorted():
    kv = KeyValues({"z": "1", "a": "2", "m": "3"})
    assert list(kv) == ["a", "m", "z"]


def test_round_trip():
    kv = KeyValues({"x": "1", "y": "2"})
    assert KeyValues.from_list(kv.to_list()) == kv


@pytest.mark.parametrize("bad", [{}, [{"key": "a"}], [{"key": 1, "value": "b"}], "nope"])
def test_invalid_lists_rejected(bad):
    with pytest.raises(ValueError):
        KeyValues.from_list(bad)


def test_non_string_value_rejected():
    kv = KeyValues({"x": "1"})
    with pytest.raises(TypeError):
        kv["a"] = 1
    assert "a" not in kv
    assert kv.to_list() == [{"key": "x", "value": "1"}]