# tests/conftest.py
"""Shared fixtures: isolate every test from FUZZY_SEARCH_* environment settings."""

from __future__ import annotations

import pytest

from fuzzy_search.utils import log as log_mod
from fuzzy_search.utils.config import BACKEND_ENV


@pytest.fixture(autouse=True)
def clean_fuzzy_env(monkeypatch):
    """
    Does: Drop backend/topic variables before each test and reload topics after.
    """
    monkeypatch.delenv(BACKEND_ENV, raising=False)
    monkeypatch.delenv(log_mod.TOPICS_ENV, raising=False)
    log_mod.reload_topics()
    yield
    monkeypatch.undo()
    log_mod.reload_topics()
