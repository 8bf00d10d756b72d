"""
fuzzy_search
============

Does: Root package initializer for the fuzzy matching core.
Returns: Re-exports edit_distance, max_fuzzy_edits and fuzzy_matches.
Used by: Search layers filtering candidate documents against a user query.
"""

from .matching import edit_distance, fuzzy_matches, max_fuzzy_edits

__all__: list[str] = [
    "edit_distance",
    "fuzzy_matches",
    "max_fuzzy_edits",
]
__docformat__ = "google"
__version__ = "0.1.0"
