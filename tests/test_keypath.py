"""Tests for core.keypath."""

import pytest

from core.errors import InvalidKeyPathError
from core.keypath import (
    escape_key,
    flatten_key_path,
    is_key_path,
    normalize_key_path,
    split_key_path,
)


class TestIsKeyPath:
    @pytest.mark.parametrize(
        "value",
        ["foo", "foo.bar", "", ["foo"], ["foo", "bar"], [["foo", "bar"], "baz"], ("a", ("b",))],
    )
    def test_valid(self, value):
        assert is_key_path(value)

    @pytest.mark.parametrize(
        "value",
        [None, 42, 1.5, {"foo": "bar"}, [], ["foo", 1], [["foo"], []], [None]],
    )
    def test_invalid(self, value):
        assert not is_key_path(value)


class TestFlattenKeyPath:
    def test_string_passes_through(self):
        assert flatten_key_path("foo.bar") == "foo.bar"

    def test_escaped_string_untouched(self):
        assert flatten_key_path("foo\\.bar") == "foo\\.bar"

    def test_list(self):
        assert flatten_key_path(["foo", "bar"]) == "foo.bar"

    def test_nested_list(self):
        assert flatten_key_path([["foo", "bar"], "baz"]) == "foo.bar.baz"

    def test_list_of_dotted_strings(self):
        assert flatten_key_path(["foo.bar", ["baz", "qux"]]) == "foo.bar.baz.qux"


class TestNormalizeKeyPath:
    def test_returns_canonical_string(self):
        assert normalize_key_path(["a", ["b", "c"]]) == "a.b.c"

    @pytest.mark.parametrize("value", [None, 7, [], ["a", 7]])
    def test_rejects_invalid(self, value):
        with pytest.raises(InvalidKeyPathError):
            normalize_key_path(value)

    def test_error_is_a_type_error(self):
        with pytest.raises(TypeError):
            normalize_key_path(3.14)


class TestSplitKeyPath:
    def test_plain(self):
        assert split_key_path("foo.bar.baz") == ["foo", "bar", "baz"]

    def test_single_segment(self):
        assert split_key_path("foo") == ["foo"]

    def test_escaped_dot(self):
        assert split_key_path("foo\\.bar") == ["foo.bar"]

    def test_escaped_dot_inside_path(self):
        assert split_key_path("hosts.example\\.com.port") == ["hosts", "example.com", "port"]

    def test_other_backslashes_kept(self):
        assert split_key_path("C:\\temp") == ["C:\\temp"]
        assert split_key_path("trailing\\") == ["trailing\\"]

    def test_empty_segments(self):
        assert split_key_path("") == [""]
        assert split_key_path("a.") == ["a", ""]


class TestEscapeKey:
    def test_escapes_dots(self):
        assert escape_key("example.com") == "example\\.com"

    def test_round_trips_through_split(self):
        assert split_key_path("hosts." + escape_key("a.b.c")) == ["hosts", "a.b.c"]
