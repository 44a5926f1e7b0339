"""Shared fixtures for mpmetrics tests."""

import pytest

from mpmetrics.config import GLOBAL_TAGS_VARIABLE, reset_config


@pytest.fixture(autouse=True)
def clean_global_tags(monkeypatch):
    """Start every test without global tags from the real environment."""
    monkeypatch.delenv(GLOBAL_TAGS_VARIABLE, raising=False)
    reset_config()
    yield
    reset_config()
