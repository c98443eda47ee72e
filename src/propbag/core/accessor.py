"""
PropertyAccessor – safe reads, writes and assertions on flat property bags.

* Lookups never raise; missing keys fall back to the caller's default.
* `set` is pure and returns a new dict; `remove` / `get_and_remove*`
  mutate the caller's bag in place.
* Assertions raise `MissingPropertyError` / `IllegalPropertyError` with the
  key and an optional context rendered into the message.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, MutableMapping
from pprint import pformat
from typing import Any, Dict, List, NoReturn

from .coercion import is_empty_value, to_array, to_bool, to_int, to_string
from .config import AccessorConfig
from .describe import context_type_name, describe_context
from .errors import IllegalPropertyError, MissingPropertyError, PropertyBagError

logger = logging.getLogger(__name__)

MISSING_MESSAGE = "Property ({key}) is missing and is required"
EMPTY_MESSAGE = "Property ({key}) is missing and is required and can not be empty"
ILLEGAL_MESSAGE = "Illegal property ({key}) was found"


class PropertyAccessor:
    """Operations over `Mapping[str, Any]` bags, configured once at construction."""

    def __init__(self, config: AccessorConfig | None = None):
        self.config = config if config is not None else AccessorConfig()

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(debug={self.config.debug}, "
            f"context_dump_depth={self.config.context_dump_depth})"
        )

    # ------------------------------------------------------------------ #
    # lookups
    # ------------------------------------------------------------------ #
    def has(self, bag: Mapping[str, Any], key: str) -> bool:
        """Key is present, whatever its value."""
        return key in bag

    def get(self, bag: Mapping[str, Any], key: str, default: Any = None) -> Any:
        if self.has(bag, key):
            return bag[key]
        return default

    def get_int(self, bag: Mapping[str, Any], key: str, default: Any = None) -> int | Any:
        if self.has(bag, key):
            return to_int(bag[key])
        return default

    def get_bool(self, bag: Mapping[str, Any], key: str, default: Any = None) -> bool | Any:
        if self.has(bag, key):
            return to_bool(bag[key])
        return default

    def get_string(self, bag: Mapping[str, Any], key: str, default: Any = None) -> str | Any:
        if self.has(bag, key):
            return to_string(bag[key])
        return default

    def get_array(
        self, bag: Mapping[str, Any], key: str, default: Any = None
    ) -> List[Any] | Dict[Any, Any] | Any:
        if self.has(bag, key):
            return to_array(bag[key])
        return default

    def is_empty(self, bag: Mapping[str, Any], key: str) -> bool:
        """Absent, or holding None/False/0/""/"0"/an empty collection."""
        return is_empty_value(self.get(bag, key, None))

    def get_default_if_empty(self, bag: Mapping[str, Any], key: str, default: Any = None) -> Any:
        if self.is_empty(bag, key):
            return default
        return self.get(bag, key, default)

    # ------------------------------------------------------------------ #
    # mutation
    # ------------------------------------------------------------------ #
    def set(self, bag: Mapping[str, Any], key: str, value: Any) -> Dict[str, Any]:
        """Return a copy of *bag* with *key* bound to *value*."""
        updated = dict(bag)
        updated[key] = value
        return updated

    def remove(self, bag: MutableMapping[str, Any], key: str) -> None:
        """Delete *key* from the caller's bag (no error if absent)."""
        bag.pop(key, None)

    def get_and_remove(self, bag: MutableMapping[str, Any], key: str, default: Any = None) -> Any:
        value = self.get(bag, key, default)
        self.remove(bag, key)
        return value

    def get_required(self, bag: Mapping[str, Any], key: str, context: Any = None) -> Any:
        self.assert_has(bag, key, context)
        return bag[key]

    def get_and_remove_required(
        self, bag: MutableMapping[str, Any], key: str, context: Any = None
    ) -> Any:
        value = self.get_required(bag, key, context)
        self.remove(bag, key)
        return value

    # ------------------------------------------------------------------ #
    # assertions
    # ------------------------------------------------------------------ #
    def assert_has(self, bag: Mapping[str, Any], key: str, context: Any = None) -> None:
        if self.has(bag, key):
            return
        self._fail(bag, key, MissingPropertyError, MISSING_MESSAGE.format(key=key), context)

    def assert_not_has(self, bag: Mapping[str, Any], key: str, context: Any = None) -> None:
        if not self.has(bag, key):
            return
        self._fail(bag, key, IllegalPropertyError, ILLEGAL_MESSAGE.format(key=key), context)

    def assert_not_empty(self, bag: Mapping[str, Any], key: str, context: Any = None) -> None:
        """Present and non-empty; an empty value counts as missing."""
        self.assert_has(bag, key, context)
        if self.is_empty(bag, key):
            self._fail(bag, key, MissingPropertyError, EMPTY_MESSAGE.format(key=key), context)

    # ------------------------------------------------------------------ #
    # failure construction
    # ------------------------------------------------------------------ #
    def build_message(self, message: str, context: Any = None) -> str:
        """Append the rendered context to *message*; never raises."""
        if context is None:
            return message
        try:
            dump = describe_context(context, self.config.context_dump_depth)
        except Exception:
            logger.debug("Dropping unrenderable %s context", context_type_name(context), exc_info=True)
            return message
        return f"{message} - Context ({context_type_name(context)}): \n{dump}"

    def _fail(
        self,
        bag: Mapping[str, Any],
        key: str,
        error_cls: type[PropertyBagError],
        message: str,
        context: Any,
    ) -> NoReturn:
        error = error_cls(self.build_message(message, context), key=key, context=context)
        logger.debug("%s for key %r", error_cls.__name__, key)
        if self.config.debug:
            self._emit_diagnostic(bag, key, error.message)
        raise error

    def _emit_diagnostic(self, bag: Mapping[str, Any], key: str, message: str) -> None:
        """Best effort; a broken repr or stream must not replace the failure."""
        try:
            self._write_diagnostic(bag, key, message)
        except Exception:
            logger.debug("Could not write diagnostic for key %r", key, exc_info=True)

    def _write_diagnostic(self, bag: Mapping[str, Any], key: str, message: str) -> None:
        print(
            "\n"
            f"Property error: {message}\n"
            f" key: {key}\n"
            f" bag dump: {pformat(dict(bag))}\n",
            file=self.config.stream(),
        )
