"""
Explicit coercion table used by the typed getters.

Every rule is spelled out here instead of leaning on Python's own `int()`,
`bool()` or `str()`, which disagree with what loosely-typed input usually
means (`bool("0")` is True, `int("12abc")` raises, ...).

* `to_int`    – numeric prefix of strings, truncation of floats.
* `to_bool`   – the falsy set is `FALSY_STRINGS` plus zero/None/empty.
* `to_string` – canonical text for scalars.
* `to_array`  – collections keep their shape, scalars get wrapped.
"""

from __future__ import annotations

import math
import re
from collections.abc import Mapping, Set
from dataclasses import asdict, is_dataclass
from decimal import Decimal
from numbers import Real
from typing import Any, Dict, List

from pydantic import BaseModel

# whitespace, sign, digits with optional fraction, optional exponent
_NUMERIC_PREFIX = re.compile(r"\s*([+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?)")

FALSY_STRINGS = frozenset({"", "0"})

# Decimal is not registered as numbers.Real
NUMBER_TYPES = (Real, Decimal)


# helpers
def _is_collection(value: Any) -> bool:
    return isinstance(value, (Mapping, list, tuple, Set))


def _text(value: str | bytes) -> str:
    if isinstance(value, bytes):
        return value.decode("latin-1")
    return value


def _number_to_int(value: Any) -> int:
    if isinstance(value, Decimal):
        return int(value) if value.is_finite() else 0
    if math.isnan(value) or math.isinf(value):
        return 0
    return int(math.trunc(value))


def _float_to_string(value: float) -> str:
    if math.isnan(value):
        return "NAN"
    if math.isinf(value):
        return "INF" if value > 0 else "-INF"
    if value.is_integer() and abs(value) < 1e15:
        return str(int(value))
    text = repr(value)
    if "e" not in text and not value.is_integer():
        return text
    # exponent form: 1.0E+20, 1.5E-7
    mantissa, exponent = format(Decimal(text).normalize(), "E").split("E")
    if "." not in mantissa:
        mantissa += ".0"
    return f"{mantissa}E{exponent}"


# ------------------------------------------------------------------ #
# emptiness
# ------------------------------------------------------------------ #
def is_empty_value(value: Any) -> bool:
    """True for None, False, zero, "", "0", b"", b"0" and empty collections."""
    if value is None or value is False:
        return True
    if isinstance(value, Decimal):
        return value.is_zero()
    if isinstance(value, NUMBER_TYPES):
        return value == 0
    if isinstance(value, (str, bytes)):
        return _text(value) in FALSY_STRINGS
    if _is_collection(value):
        return len(value) == 0
    return False


# ------------------------------------------------------------------ #
# coercions
# ------------------------------------------------------------------ #
def to_int(value: Any) -> int:
    if value is None:
        return 0
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    if isinstance(value, NUMBER_TYPES):
        return _number_to_int(value)
    if isinstance(value, (str, bytes)):
        match = _NUMERIC_PREFIX.match(_text(value))
        if match is None:
            return 0
        number = match.group(1)
        if number.lstrip("+-").isdigit():
            return int(number)
        return _number_to_int(float(number))
    if _is_collection(value):
        return 1 if len(value) else 0
    return 1


def to_bool(value: Any) -> bool:
    return not is_empty_value(value)


def to_string(value: Any) -> str:
    if value is None or value is False:
        return ""
    if value is True:
        return "1"
    if isinstance(value, float):
        return _float_to_string(value)
    if isinstance(value, (str, bytes)):
        return _text(value)
    return str(value)


def to_array(value: Any) -> List[Any] | Dict[Any, Any]:
    """Collections keep their shape; objects expose their fields; scalars wrap."""
    if value is None:
        return []
    if isinstance(value, Mapping):
        return dict(value)
    if isinstance(value, (list, tuple, Set)):
        return list(value)
    if isinstance(value, BaseModel):
        return value.model_dump()
    if is_dataclass(value) and not isinstance(value, type):
        return asdict(value)
    if isinstance(value, (str, bytes, *NUMBER_TYPES)):
        return [value]
    fields = getattr(value, "__dict__", None)
    if fields is None:
        return [value]
    return {k: v for k, v in fields.items() if not k.startswith("_")}
