"""Tests for the pure ``set`` and the in-place removal operations."""

from types import MappingProxyType

from propbag import PropertyAccessor


class TestSet:
    """Verify ``set`` copies instead of mutating."""

    def test_input_unchanged(self, accessor: PropertyAccessor) -> None:
        """The caller's bag must not see the new key."""
        bag = {"a": 1}
        updated = accessor.set(bag, "b", 2)
        assert bag == {"a": 1}
        assert updated == {"a": 1, "b": 2}

    def test_overwrites(self, accessor: PropertyAccessor) -> None:
        """An existing key is replaced in the copy."""
        updated = accessor.set({"a": 1}, "a", "new")
        assert accessor.get(updated, "a") == "new"

    def test_accepts_read_only_mapping(self, accessor: PropertyAccessor) -> None:
        """Read-only mappings are fine because nothing is written to them."""
        frozen = MappingProxyType({"a": 1})
        assert accessor.set(frozen, "b", 2) == {"a": 1, "b": 2}


class TestRemove:
    """Verify in-place removal."""

    def test_removes_present_key(self, accessor: PropertyAccessor) -> None:
        """The key disappears from the caller's bag."""
        bag = {"a": 1, "b": 2}
        accessor.remove(bag, "a")
        assert bag == {"b": 2}

    def test_absent_key_is_noop(self, accessor: PropertyAccessor) -> None:
        """Removing twice is not an error."""
        bag = {"a": 1}
        accessor.remove(bag, "a")
        accessor.remove(bag, "a")
        assert not accessor.has(bag, "a")


class TestGetAndRemove:
    """Verify read-then-delete."""

    def test_returns_value_and_removes(self, accessor: PropertyAccessor) -> None:
        """The pre-removal value comes back and the key is gone."""
        bag = {"name": "x", "count": 0}
        assert accessor.get_and_remove(bag, "name") == "x"
        assert not accessor.has(bag, "name")
        assert bag == {"count": 0}

    def test_absent_returns_default(self, accessor: PropertyAccessor) -> None:
        """A missing key yields the default and leaves the bag alone."""
        bag = {"a": 1}
        assert accessor.get_and_remove(bag, "z", "d") == "d"
        assert bag == {"a": 1}
