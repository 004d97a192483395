"""Shared fixtures."""

import pytest

from astar_search.config import reset_config


@pytest.fixture(autouse=True)
def clean_global_config():
    """Keep configuration loaded by one test from leaking into the next."""
    reset_config()
    yield
    reset_config()
