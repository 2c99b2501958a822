"""Global pytest fixtures."""

import pytest

from ln.configuration import get_settings


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Drop the cached settings singleton around each test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
