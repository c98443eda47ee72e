"""
Failure kinds raised by the assertion family.

* `MissingPropertyError` – a required key is absent (or present but empty).
* `IllegalPropertyError`  – a key that must be absent was found.

Both share `PropertyBagError`, so callers can catch either kind at once.
"""

from __future__ import annotations

from typing import Any


class PropertyBagError(Exception):
    """Base class for every property-bag assertion failure."""

    def __init__(self, message: str, *, key: str | None = None, context: Any = None):
        super().__init__(message)
        self.message = message
        self.key = key
        self.context = context

    def __str__(self) -> str:
        return self.message


class MissingPropertyError(PropertyBagError, LookupError):
    """Required property is absent, or empty where a value was required."""


class IllegalPropertyError(PropertyBagError, ValueError):
    """Property that must not be supplied is present."""
