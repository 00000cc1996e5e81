"""
Lexical similarity scoring for fuzzy lookups.

The scorer compares a query with a dictionary text word by word and returns
a value that is 1.0 for identical strings, 0.85-0.9 for multi-word phrases
that fully overlap, ``0.7 + 0.1 * n`` for ``n`` exactly shared words and a
lower partial-match score for substring overlaps.

The score is directional: rules 3 and 4 count the words of the first
argument only, so callers pass the query first and the dictionary text
second. The exact-word rule is not clamped and reaches 1.1 with four shared
words; ranking relies on that ordering.
"""

from __future__ import annotations

# Partial-match penalty applies when a query word is this short or shorter
SHORT_WORD_LENGTH = 2
SHORT_WORD_PENALTY = 0.2


def _exact_word_matches(words_a: list[str], words_b: list[str]) -> int:
    return sum(1 for wa in words_a if any(wa == wb for wb in words_b))


def _partial_word_matches(words_a: list[str], words_b: list[str]) -> int:
    return sum(1 for wa in words_a if any(wa in wb or wb in wa for wb in words_b))


def similarity_score(a: str, b: str) -> float:
    """Score how closely ``b`` matches the query ``a``.

    Rules, first match wins:
    1. Equal after lower-casing and trimming: 1.0
    2. Both multi-word: substring either way 0.9; every word of ``a``
       found in ``b`` 0.85
    3. ``n`` words of ``a`` found exactly in ``b``: ``0.7 + 0.1 * n``
    4. ``n`` words of ``a`` overlapping a word of ``b`` as substrings:
       ``0.3 + 0.1 * n``, minus 0.2 if ``a`` has a word of length <= 2
    5. Otherwise 0.0

    Example:
        >>> similarity_score("perro", "perro")
        1.0
        >>> round(similarity_score("perros", "perro"), 2)
        0.4
    """
    a = (a or "").lower().strip()
    b = (b or "").lower().strip()

    if a == b:
        return 1.0

    words_a = a.split()
    words_b = b.split()
    if not words_a or not words_b:
        return 0.0

    if len(words_a) > 1 and len(words_b) > 1:
        if a in b or b in a:
            return 0.9
        if all(wa in words_b for wa in words_a):
            return 0.85

    exact = _exact_word_matches(words_a, words_b)
    if exact > 0:
        return 0.7 + exact * 0.1

    partial = _partial_word_matches(words_a, words_b)
    if partial > 0:
        penalty = SHORT_WORD_PENALTY if any(len(wa) <= SHORT_WORD_LENGTH for wa in words_a) else 0.0
        return 0.3 + partial * 0.1 - penalty

    return 0.0
