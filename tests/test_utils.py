"""Tests for utility functions."""

import pytest
from devloop_config.utils import deep_merge
from devloop_config.utils import expand
from devloop_config.utils import is_hidden_dir
from devloop_config.utils import is_hidden_file
from devloop_config.utils import is_supported_kubernetes_format
from devloop_config.utils import non_empty_lines
from devloop_config.utils import remove_from_slice


class TestDeepMerge:
    """Test deep_merge function."""

    def test_empty_dicts(self):
        """Test merging empty dictionaries."""
        assert deep_merge({}, {}) == {}

    def test_overlay_wins(self):
        """Test overlay takes precedence for simple values."""
        base = {"default-repo": "gcr.io/global", "update-check": True}
        overlay = {"default-repo": "localhost:5000"}
        assert deep_merge(base, overlay) == {"default-repo": "localhost:5000", "update-check": True}

    def test_nested_merge(self):
        """Test merging nested dictionaries."""
        base = {"a": 1, "b": {"c": 2, "d": 3}}
        overlay = {"b": {"c": 20}, "e": 5}
        assert deep_merge(base, overlay) == {"a": 1, "b": {"c": 20, "d": 3}, "e": 5}

    def test_lists_not_merged(self):
        """Test lists are replaced, not merged."""
        base = {"insecure-registries": ["a", "b"]}
        overlay = {"insecure-registries": ["c"]}
        assert deep_merge(base, overlay) == {"insecure-registries": ["c"]}

    def test_original_not_modified(self):
        """Test that original dicts are not modified."""
        base = {"a": {"b": 1}}
        overlay = {"a": {"c": 2}}
        deep_merge(base, overlay)
        assert base == {"a": {"b": 1}}
        assert overlay == {"a": {"c": 2}}


class TestExpand:
    """Test placeholder expansion."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("BEFORE[${key}]AFTER", "BEFORE[VALUE]AFTER"),
            ("BEFORE[$key]AFTER", "BEFORE[VALUE]AFTER"),
            ("BEFORE[$key][${key}][$key][${key}]AFTER", "BEFORE[VALUE][VALUE][VALUE][VALUE]AFTER"),
            ("BEFORE[$key1][${key1}]AFTER", "BEFORE[$key1][${key1}]AFTER"),
            ("${key}", "VALUE"),
            ("$key", "VALUE"),
            ("$key_suffix", "$key_suffix"),
            ("$key-suffix", "VALUE-suffix"),
            ("no placeholders", "no placeholders"),
        ],
    )
    def test_expand(self, text, expected):
        """Test both placeholder forms are replaced and prefixes are not."""
        assert expand(text, "key", "VALUE") == expected

    def test_other_keys_untouched(self):
        """Test placeholders for other keys are left alone."""
        assert expand("$IMAGE:${TAG}", "TAG", "v1") == "$IMAGE:v1"

    def test_value_inserted_literally(self):
        """Test backslashes and group references in the value are not interpreted."""
        assert expand("$key", "key", r"C:\path\1") == r"C:\path\1"

    def test_key_with_regex_characters(self):
        """Test keys are matched literally."""
        assert expand("${a.b} $axb", "a.b", "X") == "X $axb"


class TestNonEmptyLines:
    """Test non_empty_lines function."""

    @pytest.mark.parametrize(
        ("data", "expected"),
        [
            ("", []),
            ("a\n", ["a"]),
            ("a\r\n", ["a"]),
            ("a\r\nb", ["a", "b"]),
            ("a\r\nb\n\n", ["a", "b"]),
            ("\na\r\n\n\n", ["a"]),
            (b"a\nb\n", ["a", "b"]),
        ],
    )
    def test_non_empty_lines(self, data, expected):
        """Test blank lines and carriage returns are dropped."""
        assert non_empty_lines(data) == expected


class TestRemoveFromSlice:
    """Test remove_from_slice function."""

    def test_absent_element(self):
        """Test removing an absent element returns the input unchanged."""
        assert remove_from_slice([""], "ANY") == [""]
        assert remove_from_slice(["A", "B", "C"], "ANY") == ["A", "B", "C"]

    def test_remove_single(self):
        """Test removing one element."""
        assert remove_from_slice(["A", "B", "C"], "B") == ["A", "C"]
        assert remove_from_slice(["A", "B", "C"], "A") == ["B", "C"]

    def test_remove_all_occurrences(self):
        """Test every occurrence is removed."""
        assert remove_from_slice(["A", "B", "B", "C"], "B") == ["A", "C"]

    def test_remove_everything(self):
        """Test removing every element gives an empty list."""
        result = remove_from_slice(["B", "B"], "B")
        assert result == []
        assert result is not None

    def test_input_not_modified(self):
        """Test the input list is not modified."""
        values = ["A", "B"]
        remove_from_slice(values, "B")
        assert values == ["A", "B"]


class TestFileNames:
    """Test file name predicates."""

    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("filename.yaml", True),
            ("filename.yml", True),
            ("filename.json", True),
            ("filename.txt", False),
            ("yaml", False),
        ],
    )
    def test_is_supported_kubernetes_format(self, name, expected):
        """Test manifest extensions are recognised."""
        assert is_supported_kubernetes_format(name) is expected

    def test_is_hidden_dir(self):
        """Test dot-directories are hidden except navigation entries."""
        assert is_hidden_dir(".hidden")
        assert not is_hidden_dir("not_hidden")
        assert not is_hidden_dir(".")
        assert not is_hidden_dir("..")

    def test_is_hidden_file(self):
        """Test dot-files are hidden."""
        assert is_hidden_file(".hidden")
        assert not is_hidden_file("not_hidden")
