# src/fuzzy_search/token/normalize.py
# ──────────────────────────────────────────────────────────────
# Input coercion and single-pass tokenization
# ──────────────────────────────────────────────────────────────
"""
normalize.

Does: Coerce arbitrary inputs to text, then split queries on whitespace and
      candidate text on runs of Unicode letters.
Returns: coerce_text(), tokenize_query(), tokenize_text(), is_letter().
Used by: matching.fuzzy_core.
"""

from __future__ import annotations

import unicodedata
from typing import Any

__all__ = [
    "coerce_text",
    "is_letter",
    "tokenize_query",
    "tokenize_text",
]

__docformat__ = "google"


# ──────────────────────────────────────────────────────────────
# 0) Coercion
# ──────────────────────────────────────────────────────────────


def coerce_text(value: Any) -> str:
    """
    Does: Convert an input to text:
          - None → ""
          - str → unchanged
          - bytes/bytearray → UTF-8 decode, invalid sequences replaced
          - anything else → str(value)
    Returns: A str (never raises for ordinary values).
    """
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("utf-8", errors="replace")
    return str(value)


# ──────────────────────────────────────────────────────────────
# 1) Query tokens
# ──────────────────────────────────────────────────────────────


def tokenize_query(query: Any) -> list[str]:
    """
    Does: Lowercase and split on runs of whitespace, dropping empty fragments.
          Whitespace is whatever str.split() treats as such: Unicode spaces plus
          the separators U+001C..U+001F; U+FEFF is not whitespace and stays in a token.
    Returns: Query tokens in input order.
    """
    return coerce_text(query).lower().split()


# ──────────────────────────────────────────────────────────────
# 2) Text tokens
# ──────────────────────────────────────────────────────────────


def is_letter(ch: str) -> bool:
    """Does: True for code points in a Unicode letter category (Lu, Ll, Lt, Lm, Lo)."""
    return unicodedata.category(ch).startswith("L")


def tokenize_text(text: Any) -> list[str]:
    """
    Does: Lowercase, then group maximal runs of letter code points.
          Digits, punctuation, symbols, marks and whitespace only separate tokens.
    Returns: Text tokens in input order.
    """
    tokens: list[str] = []
    current: list[str] = []
    for ch in coerce_text(text).lower():
        if is_letter(ch):
            current.append(ch)
        elif current:
            tokens.append("".join(current))
            current = []
    if current:
        tokens.append("".join(current))
    return tokens
