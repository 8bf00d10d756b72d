# src/fuzzy_search/matching/__init__.py
"""
matching.

Does: Facade exposing the edit-distance engine, the threshold table and the
fuzzy matcher.

Returns: Public API for raw distances, per-length edit budgets, and
query-vs-text fuzzy matching.
Used by: The package root and search layers.
"""

from __future__ import annotations

# ── Distance ─────────────────────────────────────────────────────────────────
from .distance import (
    edit_distance,
    levenshtein_matrix,
)

# ── Core ─────────────────────────────────────────────────────────────────────
from .fuzzy_core import (
    fuzzy_matches,
    token_matches,
)

# ── Thresholds ───────────────────────────────────────────────────────────────
from .thresholds import max_fuzzy_edits

__all__ = [
    # Distance
    "edit_distance",
    "levenshtein_matrix",
    # Thresholds
    "max_fuzzy_edits",
    # Core
    "fuzzy_matches",
    "token_matches",
]

__docformat__ = "google"
