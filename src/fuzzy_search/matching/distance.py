# src/fuzzy_search/matching/distance.py
"""
distance.py

Does: Levenshtein edit distance between two strings (insert/delete/substitute,
      unit cost), computed over code points.
Returns: edit_distance() with a two-row dynamic program, and levenshtein_matrix()
         exposing the full table for diagnostics.
Used by: fuzzy_core.token_matches and anything needing a raw distance.
"""

from __future__ import annotations

from typing import List, Optional

from rapidfuzz.distance import Levenshtein as rf_levenshtein

from fuzzy_search.utils.config import BACKEND_RAPIDFUZZ, distance_backend

__all__ = [
    "edit_distance",
    "levenshtein_matrix",
]

__docformat__ = "google"


# ─────────────────────────────────────────────────────────────────────────────
# 1) Full matrix
# ─────────────────────────────────────────────────────────────────────────────

def levenshtein_matrix(a: str, b: str) -> List[List[int]]:
    """
    Does: Build the (len(a)+1) x (len(b)+1) edit-distance table.
    Returns: Nested lists; the distance is table[-1][-1].
    """
    m, n = len(a), len(b)
    d = [[0] * (n + 1) for _ in range(m + 1)]
    for i in range(m + 1):
        d[i][0] = i
    for j in range(n + 1):
        d[0][j] = j

    for i in range(1, m + 1):
        for j in range(1, n + 1):
            cost = 0 if a[i - 1] == b[j - 1] else 1
            d[i][j] = min(d[i - 1][j] + 1, d[i][j - 1] + 1, d[i - 1][j - 1] + cost)
    return d


# ─────────────────────────────────────────────────────────────────────────────
# 2) Rolling rows
# ─────────────────────────────────────────────────────────────────────────────

def _two_row_distance(a: str, b: str) -> int:
    if not a:
        return len(b)
    if not b:
        return len(a)

    # keep the shorter string on the row axis
    if len(b) > len(a):
        a, b = b, a

    prev = list(range(len(b) + 1))
    for i, ca in enumerate(a, start=1):
        curr = [i] + [0] * len(b)
        for j, cb in enumerate(b, start=1):
            cost = 0 if ca == cb else 1
            curr[j] = min(prev[j] + 1, curr[j - 1] + 1, prev[j - 1] + cost)
        prev = curr
    return prev[-1]


def edit_distance(a: str, b: str, *, backend: Optional[str] = None) -> int:
    """
    Does: Minimum number of single-character edits turning `a` into `b`.
          `backend` ("python" or "rapidfuzz") defaults to the configured one;
          both agree on every input.
    Returns: Non-negative integer.
    """
    if backend is None:
        backend = distance_backend()
    if backend == BACKEND_RAPIDFUZZ:
        return int(rf_levenshtein.distance(a, b))
    return _two_row_distance(a, b)
