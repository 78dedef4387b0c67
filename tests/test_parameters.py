import pytest

from chipdna.parameters import Parameter, ParameterSet


def test_add_and_get_value():
    params = ParameterSet()
    params.add("AMOUNT", "100")
    assert params.get_value("AMOUNT") == "100"
    assert len(params) == 1


def test_integer_value_is_stored_as_string():
    params = ParameterSet()
    params.add("COUNT", 42)
    assert params.get_value("COUNT") == str(42)


def test_add_replaces_existing_value():
    params = ParameterSet({"KEY": "first"})
    params.add("KEY", "second")
    assert params.get_value("KEY") == "second"
    assert len(params) == 1


def test_remove_and_contains():
    params = ParameterSet([("A", "1"), ("B", "2")])
    params.remove("A")
    assert "A" not in params
    assert "B" in params
    params.remove("missing")
    assert len(params) == 1


def test_missing_key_raises():
    with pytest.raises(KeyError):
        ParameterSet().get_value("absent")


def test_empty_set_is_falsy():
    params = ParameterSet()
    assert len(params) == 0
    assert not params


def test_iteration_is_sorted_by_key():
    params = ParameterSet({"b": "2", "a": "1", "c": "3"})
    assert [p.key for p in params] == ["a", "b", "c"]
    assert list(params.to_dict()) == ["a", "b", "c"]


def test_to_dict_is_a_copy():
    params = ParameterSet({"a": "1"})
    snapshot = params.to_dict()
    snapshot["a"] = "changed"
    assert params.get_value("a") == "1"


def test_iadd_merges_other_set():
    left = ParameterSet({"a": "1"})
    right = ParameterSet({"b": "2", "a": "3"})
    left += right
    assert left.to_dict() == {"a": "3", "b": "2"}
    assert right.to_dict() == {"a": "3", "b": "2"}


def test_round_trip_through_dict():
    original = ParameterSet({"x": "1", "y": 2})
    assert ParameterSet(original.to_dict()) == original


def test_string_forms():
    assert str(Parameter("k", "v")) == "k=v"
    params = ParameterSet({"b": "2", "a": "1"})
    assert str(params) == "a=1, b=2"


def test_parameter_is_immutable():
    parameter = Parameter("k", "v")
    with pytest.raises(AttributeError):
        parameter.key = "other"
    assert parameter.key == "k"
    assert parameter.value == "v"
    assert str(parameter) == "k=v"