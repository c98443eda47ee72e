"""
Public surface for propbag.
Importing this module has no side effects; call `propbag.configure(...)`
during application start-up to enable debug diagnostics.
"""

from .bootstrap import configure, configure_from_env
from .core.accessor import PropertyAccessor
from .core.config import AccessorConfig
from .core.errors import IllegalPropertyError, MissingPropertyError, PropertyBagError
from .runtime import (
    assert_has,
    assert_not_empty,
    assert_not_has,
    default_accessor,
    get,
    get_and_remove,
    get_and_remove_required,
    get_array,
    get_bool,
    get_default_if_empty,
    get_int,
    get_required,
    get_string,
    has,
    is_empty,
    remove,
    set,
)

__all__ = [
    "AccessorConfig",
    "IllegalPropertyError",
    "MissingPropertyError",
    "PropertyAccessor",
    "PropertyBagError",
    "assert_has",
    "assert_not_empty",
    "assert_not_has",
    "configure",
    "configure_from_env",
    "default_accessor",
    "get",
    "get_and_remove",
    "get_and_remove_required",
    "get_array",
    "get_bool",
    "get_default_if_empty",
    "get_int",
    "get_required",
    "get_string",
    "has",
    "is_empty",
    "remove",
]
