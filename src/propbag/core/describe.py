"""
Depth-limited rendering of diagnostic context objects.

The context attached to an assertion is turned into plain JSON-able data
while counting container levels. Anything nested deeper than the configured
depth raises `ContextTooDeep`; cycles therefore stop at the limit as well.
"""

from __future__ import annotations

import json
from collections.abc import Mapping, Set
from dataclasses import fields, is_dataclass
from typing import Any

from pydantic import BaseModel


class ContextTooDeep(ValueError):
    """Context nests more containers than the dump depth allows."""


def context_type_name(context: Any) -> str:
    return type(context).__name__


def _plain(value: Any, budget: int) -> Any:
    if value is None or isinstance(value, (bool, int, float, str)):
        return value
    if isinstance(value, bytes):
        return value.decode("latin-1")

    # everything below opens a container level
    if budget <= 0:
        raise ContextTooDeep(f"context deeper than dump depth at {type(value).__name__}")
    inner = budget - 1

    if isinstance(value, BaseModel):
        return _plain_mapping(value.model_dump(mode="json"), inner)
    if is_dataclass(value) and not isinstance(value, type):
        return _plain_mapping({f.name: getattr(value, f.name) for f in fields(value)}, inner)
    if isinstance(value, Mapping):
        return _plain_mapping(value, inner)
    if isinstance(value, (list, tuple)):
        return [_plain(v, inner) for v in value]
    if isinstance(value, Set):
        return [_plain(v, inner) for v in sorted(value, key=repr)]

    attrs = getattr(value, "__dict__", None)
    if attrs is None:
        return str(value)
    return _plain_mapping({k: v for k, v in attrs.items() if not k.startswith("_")}, inner)


def _plain_mapping(mapping: Mapping[Any, Any], budget: int) -> dict[str, Any]:
    return {str(k): _plain(v, budget) for k, v in mapping.items()}


def describe_context(context: Any, depth: int) -> str:
    """Pretty JSON dump of *context*, at most *depth* container levels deep.

    Raises `ContextTooDeep` past the limit, and `ValueError`/`TypeError`
    when the plain form still cannot be encoded (e.g. NaN).
    """
    plain = _plain(context, depth)
    return json.dumps(plain, indent=4, allow_nan=False, default=str)
