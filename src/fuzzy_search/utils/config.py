# src/fuzzy_search/utils/config.py

"""Environment-driven settings for the matching core.

Variables:
- FUZZY_SEARCH_DISTANCE_BACKEND -> "python" (default) or "rapidfuzz"
- FUZZY_SEARCH_DEBUG_TOPICS     -> read by utils.log

Settings never raise: an unsupported value is logged and replaced by the default.
"""

from __future__ import annotations

import logging
import os

# ── Public surface ────────────────────────────────────────────────────────────
__all__ = [
    "BACKEND_ENV",
    "BACKEND_PYTHON",
    "BACKEND_RAPIDFUZZ",
    "distance_backend",
]

BACKEND_ENV = "FUZZY_SEARCH_DISTANCE_BACKEND"
BACKEND_PYTHON = "python"
BACKEND_RAPIDFUZZ = "rapidfuzz"
_BACKENDS = frozenset({BACKEND_PYTHON, BACKEND_RAPIDFUZZ})

log = logging.getLogger(__name__)


def distance_backend() -> str:
    """Return the edit-distance backend name; unknown values fall back to "python"."""
    raw = os.environ.get(BACKEND_ENV, "").strip().lower()
    if not raw:
        return BACKEND_PYTHON
    if raw not in _BACKENDS:
        log.warning(
            "%s=%r is not one of %s; using %r",
            BACKEND_ENV,
            raw,
            sorted(_BACKENDS),
            BACKEND_PYTHON,
        )
        return BACKEND_PYTHON
    return raw
