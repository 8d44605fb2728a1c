import pytest

from tailcall.group_by import GroupBy


def test_default_path_is_id():
    assert GroupBy().resolved_path() == ["id"]
    assert GroupBy().key() == "id"


def test_empty_path_falls_back_to_id():
    group_by = GroupBy(path=[])
    assert group_by.resolved_path() == ["id"]
    assert group_by.key() == "id"


def test_key_is_last_element():
    group_by = GroupBy(path=["data", "userId"])
    assert group_by.key() == "userId"
    assert group_by.resolved_path() == ["data", "userId"]


def test_resolved_path_is_a_copy():
    group_by = GroupBy(path=["a"])
    group_by.resolved_path().append("b")
    assert group_by.path == ["a"]


def test_empty_path_is_not_serialised():
    assert GroupBy(path=[]).to_dict() == {}


def test_missing_path_deserialises_to_empty():
    group_by = GroupBy.from_dict({})
    assert group_by.path == []
    assert group_by.key() == "id"


def test_round_trip():
    group_by = GroupBy(path=["a", "b"])
    assert GroupBy.from_dict(group_by.to_dict()) == group_by


@pytest.mark.parametrize("bad", [{"path": "a"}, {"path": [1]}, []])
def test_invalid_rejected(bad):
    with pytest.raises(ValueError):
        GroupBy.from_dict(bad)