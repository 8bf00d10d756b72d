# src/fuzzy_search/token/__init__.py
"""
token.

Does: Facade for input coercion and query/text tokenization.
Used by: matching.fuzzy_core and callers that want the raw token lists.
"""

from __future__ import annotations

from .normalize import (
    coerce_text,
    is_letter,
    tokenize_query,
    tokenize_text,
)

__all__ = [
    "coerce_text",
    "is_letter",
    "tokenize_query",
    "tokenize_text",
]

__docformat__ = "google"
