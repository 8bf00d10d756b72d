# src/fuzzy_search/matching/fuzzy_core.py
"""
fuzzy_core.py

Does: Decide whether a query approximately occurs in a text block: tokenize both
      sides, then accept any query/text token pair within the length-based edit
      budget or related by substring containment.
Returns: token_matches() for one pair, fuzzy_matches() for query vs text.
Used by: Search/filter layers deciding whether to keep a candidate document.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from fuzzy_search.token import tokenize_query, tokenize_text
from fuzzy_search.utils.config import distance_backend
from fuzzy_search.utils.log import debug as topic_debug
from fuzzy_search.utils.log import topic_enabled

from .distance import edit_distance
from .thresholds import max_fuzzy_edits

__all__ = [
    "token_matches",
    "fuzzy_matches",
]

__docformat__ = "google"

# ── Logging ──────────────────────────────────────────────────────────────────
log = logging.getLogger(__name__)
TOPIC = "matching"


# ─────────────────────────────────────────────────────────────────────────────
# 1) Single pair
# ─────────────────────────────────────────────────────────────────────────────

def token_matches(
    query_token: str, text_token: str, *, backend: Optional[str] = None
) -> bool:
    """
    Does: Accept when the edit distance fits the query token's budget, or when
          either token contains the other.
    Returns: Boolean.
    """
    allowed = max_fuzzy_edits(len(query_token))
    return (
        edit_distance(query_token, text_token, backend=backend) <= allowed
        or query_token in text_token
        or text_token in query_token
    )


# ─────────────────────────────────────────────────────────────────────────────
# 2) Query vs text
# ─────────────────────────────────────────────────────────────────────────────

def fuzzy_matches(query: Any = None, text: Any = None, *, debug: bool = False) -> bool:
    """
    Does: Existential fuzzy match of any query token against any text token.
          Missing inputs count as empty text; non-text inputs are stringified.
    Returns: False when either side has no tokens, else True on the first matching pair.
    """
    query_tokens = tokenize_query(query)
    text_tokens = tokenize_text(text)
    if not query_tokens or not text_tokens:
        if debug:
            log.debug(
                "[EMPTY] query_tokens=%d text_tokens=%d", len(query_tokens), len(text_tokens)
            )
        return False

    backend = distance_backend()
    for qt in query_tokens:
        for tt in text_tokens:
            if token_matches(qt, tt, backend=backend):
                if debug:
                    log.debug("[MATCH] %r ~ %r", qt, tt)
                if topic_enabled(TOPIC):
                    topic_debug(f"match {qt!r} ~ {tt!r}", topic=TOPIC)
                return True

    if debug:
        log.debug("[NO MATCH] %d x %d pairs", len(query_tokens), len(text_tokens))
    return False
