# tests/test_token.py
"""
Tests: token/normalize.py

- coerce_text() policy for None/bytes/other values
- tokenize_query(): whitespace split only
- tokenize_text(): Unicode letter runs, everything else separates
"""

from __future__ import annotations

import pytest

from fuzzy_search.token import normalize as N


# ──────────────────────────────────────────────────────────────────────────────
# coerce_text
# ──────────────────────────────────────────────────────────────────────────────

@pytest.mark.parametrize(
    "value, expected",
    [
        (None, ""),
        ("", ""),
        ("Hello", "Hello"),
        (b"caf\xc3\xa9", "café"),
        (bytearray(b"abc"), "abc"),
        (b"\xff", "\ufffd"),
        (42, "42"),
        (False, "False"),
    ],
)
def test_coerce_text(value, expected):
    assert N.coerce_text(value) == expected


# ──────────────────────────────────────────────────────────────────────────────
# tokenize_query
# ──────────────────────────────────────────────────────────────────────────────

def test_tokenize_query_splits_on_whitespace_runs():
    assert N.tokenize_query("  Hello\tWORLD\n  again ") == ["hello", "world", "again"]


def test_tokenize_query_keeps_punctuation():
    assert N.tokenize_query("Node.js rocks!") == ["node.js", "rocks!"]


def test_tokenize_query_whitespace_set():
    # information separators split; a byte-order mark is not whitespace
    assert N.tokenize_query("a\x1fb\x1cc") == ["a", "b", "c"]
    assert N.tokenize_query("a\ufeffb c") == ["a\ufeffb", "c"]


def test_tokenize_query_empty():
    assert N.tokenize_query("") == []
    assert N.tokenize_query(None) == []
    assert N.tokenize_query("   ") == []


# ──────────────────────────────────────────────────────────────────────────────
# tokenize_text
# ──────────────────────────────────────────────────────────────────────────────

def test_tokenize_text_drops_digits_and_punctuation():
    assert N.tokenize_text("Hello, World! 42 times") == ["hello", "world", "times"]
    assert N.tokenize_text("abc123def") == ["abc", "def"]
    assert N.tokenize_text("snake_case-word") == ["snake", "case", "word"]


def test_tokenize_text_unicode_letters():
    assert N.tokenize_text("Naïve CAFÉ") == ["naïve", "café"]
    assert N.tokenize_text("日本語のテキスト。") == ["日本語のテキスト"]


def test_tokenize_text_combining_mark_separates():
    # decomposed é: U+0301 is a mark, not a letter
    assert N.tokenize_text("cafe\u0301 au lait") == ["cafe", "au", "lait"]


def test_tokenize_text_empty():
    assert N.tokenize_text("") == []
    assert N.tokenize_text("123 ... !!!") == []
    assert N.tokenize_text(None) == []


@pytest.mark.parametrize(
    "ch, expected",
    [("a", True), ("Ж", True), ("語", True), ("1", False), ("_", False), ("\u0301", False), (" ", False)],
)
def test_is_letter(ch, expected):
    assert N.is_letter(ch) is expected
