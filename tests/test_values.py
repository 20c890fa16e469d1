"""Tests for typed retrieval of stored values."""

import pytest

from optconf import ConversionError, MissingArgumentError, OptionRegistry, Polarity
from optconf._values import join_fields, resolve_raw, retrieve_value, split_field


@pytest.fixture
def registry():
    registry = OptionRegistry()
    registry.insert_option("count", 1, default="1")
    registry.insert_option("range", 2, default="1,10")
    registry.insert_option("name", 1)
    registry.insert_option_boolean("verbose", Polarity.STORE_TRUE)
    registry.insert_option_boolean("cache", Polarity.STORE_FALSE)
    return registry


class TestSplitField:
    """Test split_field function."""

    def test_single_field(self):
        assert split_field("5", 0) == "5"

    def test_fields_by_index(self):
        assert split_field("a, b, c", 0) == "a"
        assert split_field("a, b, c", 1) == "b"
        assert split_field("a, b, c", 2) == "c"

    def test_without_spaces(self):
        assert split_field("1,10", 1) == "10"

    def test_out_of_range(self):
        with pytest.raises(IndexError):
            split_field("1,10", 2)

    def test_negative_index(self):
        with pytest.raises(IndexError):
            split_field("1,10", -1)

    def test_join_then_split(self):
        raw = join_fields(["x", "y"])
        assert raw == "x, y"
        assert [split_field(raw, i) for i in range(2)] == ["x", "y"]


class TestResolveRaw:
    """Test stored value and default precedence."""

    def test_stored_value_wins(self, registry):
        option, raw = resolve_raw("count", registry, {"count": "7"})
        assert option.name == "count"
        assert raw == "7"

    def test_default_used(self, registry):
        _, raw = resolve_raw("range", registry, {})
        assert raw == "1,10"

    def test_no_value_no_default(self, registry):
        with pytest.raises(MissingArgumentError) as exc_info:
            resolve_raw("name", registry, {})
        assert exc_info.value.option == "name"

    def test_unregistered(self, registry):
        with pytest.raises(MissingArgumentError):
            resolve_raw("bogus", registry, {})


class TestRetrieveValue:
    """Test retrieve_value function."""

    def test_each_field(self, registry):
        values = {"range": "3, 4"}
        assert retrieve_value("range", registry, values, int, 0) == 3
        assert retrieve_value("range", registry, values, int, 1) == 4

    def test_default_fields(self, registry):
        assert retrieve_value("range", registry, {}, int, 1) == 10

    def test_missing_field(self, registry):
        with pytest.raises(ConversionError):
            retrieve_value("range", registry, {"range": "3, 4"}, int, 2)

    def test_flag_defaults_read_as_written(self, registry):
        assert retrieve_value("verbose", registry, {}, bool) is False
        assert retrieve_value("cache", registry, {}, bool) is True

    def test_flag_stored_values(self, registry):
        assert retrieve_value("verbose", registry, {"verbose": "1"}, bool) is True
        assert retrieve_value("cache", registry, {"cache": "0"}, bool) is False

    def test_flag_nonzero_is_true(self, registry):
        assert retrieve_value("verbose", registry, {"verbose": "yes"}, bool) is True

    def test_flag_as_int(self, registry):
        assert retrieve_value("verbose", registry, {"verbose": "1"}, int) == 1

    def test_flag_ignores_index(self, registry):
        assert retrieve_value("verbose", registry, {"verbose": "1"}, bool, 3) is True

    def test_str_is_default_type(self, registry):
        assert retrieve_value("name", registry, {"name": "run-1"}) == "run-1"

    def test_conversion_failure(self, registry):
        with pytest.raises(ConversionError) as exc_info:
            retrieve_value("count", registry, {"count": "many"}, int)
        assert exc_info.value.text == "many"
