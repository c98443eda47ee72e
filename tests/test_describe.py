"""Tests for depth-limited context rendering."""

import json

import pytest

from propbag.core.describe import ContextTooDeep, context_type_name, describe_context


class Holder:
    def __init__(self, payload) -> None:
        self.payload = payload
        self._private = "hidden"


class TestDescribeContext:
    """Verify the JSON dump and its depth limit."""

    def test_scalars_need_no_depth(self) -> None:
        """Scalars render even at depth zero."""
        assert describe_context("label", 0) == '"label"'
        assert describe_context(3, 0) == "3"

    def test_containers_count_levels(self) -> None:
        """Each container opens one level."""
        assert json.loads(describe_context({"a": [1, 2]}, 2)) == {"a": [1, 2]}
        with pytest.raises(ContextTooDeep):
            describe_context({"a": [1, 2]}, 1)

    def test_pretty_printed(self) -> None:
        """Output is indented JSON."""
        assert describe_context({"a": 1}, 1) == '{\n    "a": 1\n}'

    def test_plain_object_public_attributes(self) -> None:
        """Objects render their public attributes only."""
        rendered = json.loads(describe_context(Holder([1]), 2))
        assert rendered == {"payload": [1]}

    def test_non_string_keys(self) -> None:
        """Mapping keys are rendered as strings."""
        assert json.loads(describe_context({1: "a"}, 1)) == {"1": "a"}

    def test_nan_rejected(self) -> None:
        """NaN is not valid JSON and raises."""
        with pytest.raises(ValueError):
            describe_context(float("nan"), 1)


def test_context_type_name() -> None:
    """Type names are the bare class names."""
    assert context_type_name({}) == "dict"
    assert context_type_name(Holder(None)) == "Holder"
