# tests/conftest.py
import pytest

import dimvalue.values  # noqa: F401  registers the shipped value types
from dimvalue.core import formatting
from dimvalue.core.registry import DEFAULT_REGISTRY as _registry


@pytest.fixture(scope="session")
def registry():
    return _registry


@pytest.fixture
def default_locale():
    """Yield ``set_default_locale``; the previous default is restored afterwards."""
    previous = formatting.get_default_locale()
    yield formatting.set_default_locale
    formatting.set_default_locale(previous)
