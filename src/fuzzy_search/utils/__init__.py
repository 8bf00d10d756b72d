# src/fuzzy_search/utils/__init__.py
"""

Does: Provide environment settings and lightweight debug logging utilities for the matching core.
Returns: Public API via distance_backend and debug/reload_topics.
Used by: matching.distance, matching.fuzzy_core, tests.
"""

from __future__ import annotations

from .config import (
    BACKEND_PYTHON,
    BACKEND_RAPIDFUZZ,
    distance_backend,
)
from .log import (
    debug,
    reload_topics,
    topic_enabled,
)

__all__ = [
    # Settings
    "BACKEND_PYTHON",
    "BACKEND_RAPIDFUZZ",
    "distance_backend",
    # Logging helpers
    "debug",
    "reload_topics",
    "topic_enabled",
]
