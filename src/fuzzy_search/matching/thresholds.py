# src/fuzzy_search/matching/thresholds.py
"""
thresholds.py

Does: Map a query token length to the number of edits it may absorb.
Returns: max_fuzzy_edits().
"""

from __future__ import annotations

__all__ = ["max_fuzzy_edits"]

__docformat__ = "google"

# ── Tunables ─────────────────────────────────────────────────────────────────
SHORT_MAX_LEN = 2
MEDIUM_MAX_LEN = 5
LONG_MAX_LEN = 9


def max_fuzzy_edits(token_length: int) -> int:
    """
    Does: Step function over token length: <=2 → 1, <=5 → 1, <=9 → 2, else 3.
    Returns: Allowed edit budget.
    """
    if token_length <= SHORT_MAX_LEN:
        return 1
    if token_length <= MEDIUM_MAX_LEN:
        return 1
    if token_length <= LONG_MAX_LEN:
        return 2
    return 3
