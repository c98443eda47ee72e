"""
propbag.runtime  ──  process-wide default accessor plus module-level shortcuts.

Usage pattern in user code
--------------------------
    import propbag

    propbag.configure(debug=True)          # once, during start-up

    port = propbag.get_int(params, "port", 8080)
    name = propbag.get_required(params, "name", context="loading service")

Code that prefers explicit wiring builds its own `PropertyAccessor(config)`
and never touches this module.
"""

from __future__ import annotations

from collections.abc import Mapping, MutableMapping
from typing import Any, ClassVar, Dict, Optional

from .core.accessor import PropertyAccessor
from .core.config import AccessorConfig


class Runtime:
    """Holds the singleton accessor swapped in by `propbag.configure()`."""

    _accessor: ClassVar[Optional[PropertyAccessor]] = None

    @classmethod
    def install(cls, config: AccessorConfig) -> PropertyAccessor:
        cls._accessor = PropertyAccessor(config)
        return cls._accessor

    @classmethod
    def accessor(cls) -> PropertyAccessor:
        # lazily fall back to a quiet, depth-2 accessor
        if cls._accessor is None:
            cls._accessor = PropertyAccessor()
        return cls._accessor

    @classmethod
    def reset(cls) -> None:
        cls._accessor = None


def default_accessor() -> PropertyAccessor:
    return Runtime.accessor()


# ---------- module-level shortcuts ----------
def has(bag: Mapping[str, Any], key: str) -> bool:
    return Runtime.accessor().has(bag, key)


def get(bag: Mapping[str, Any], key: str, default: Any = None) -> Any:
    return Runtime.accessor().get(bag, key, default)


def get_int(bag: Mapping[str, Any], key: str, default: Any = None) -> Any:
    return Runtime.accessor().get_int(bag, key, default)


def get_bool(bag: Mapping[str, Any], key: str, default: Any = None) -> Any:
    return Runtime.accessor().get_bool(bag, key, default)


def get_string(bag: Mapping[str, Any], key: str, default: Any = None) -> Any:
    return Runtime.accessor().get_string(bag, key, default)


def get_array(bag: Mapping[str, Any], key: str, default: Any = None) -> Any:
    return Runtime.accessor().get_array(bag, key, default)


def is_empty(bag: Mapping[str, Any], key: str) -> bool:
    return Runtime.accessor().is_empty(bag, key)


def get_default_if_empty(bag: Mapping[str, Any], key: str, default: Any = None) -> Any:
    return Runtime.accessor().get_default_if_empty(bag, key, default)


# kept out of `propbag.__all__` so star-imports keep the builtin
def set(bag: Mapping[str, Any], key: str, value: Any) -> Dict[str, Any]:  # noqa: A001
    return Runtime.accessor().set(bag, key, value)


def remove(bag: MutableMapping[str, Any], key: str) -> None:
    Runtime.accessor().remove(bag, key)


def get_and_remove(bag: MutableMapping[str, Any], key: str, default: Any = None) -> Any:
    return Runtime.accessor().get_and_remove(bag, key, default)


def get_required(bag: Mapping[str, Any], key: str, context: Any = None) -> Any:
    return Runtime.accessor().get_required(bag, key, context)


def get_and_remove_required(bag: MutableMapping[str, Any], key: str, context: Any = None) -> Any:
    return Runtime.accessor().get_and_remove_required(bag, key, context)


def assert_has(bag: Mapping[str, Any], key: str, context: Any = None) -> None:
    Runtime.accessor().assert_has(bag, key, context)


def assert_not_has(bag: Mapping[str, Any], key: str, context: Any = None) -> None:
    Runtime.accessor().assert_not_has(bag, key, context)


def assert_not_empty(bag: Mapping[str, Any], key: str, context: Any = None) -> None:
    Runtime.accessor().assert_not_empty(bag, key, context)
