"""Shared fixtures for the propbag test-suite."""

import io

import pytest

from propbag import AccessorConfig, PropertyAccessor
from propbag.runtime import Runtime


@pytest.fixture
def accessor() -> PropertyAccessor:
    """A quiet accessor with the default dump depth."""
    return PropertyAccessor()


@pytest.fixture
def stream() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def debug_accessor(stream: io.StringIO) -> PropertyAccessor:
    """An accessor that writes diagnostics into ``stream``."""
    return PropertyAccessor(AccessorConfig(debug=True, diagnostic_stream=stream))


@pytest.fixture(autouse=True)
def _reset_runtime():
    """Drop any default accessor installed by a test."""
    Runtime.reset()
    yield
    Runtime.reset()
