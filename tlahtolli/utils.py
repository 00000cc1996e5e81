"""
Text helpers shared by the dictionary, the phrase translator and the ranker.

Functions:
    normalize_text: Lower-case and trim (dictionary and ranker keys)
    normalize_key: Aggressive token normalization for phrase lookups
    split_variants: Split a comma-separated synonym list
    capitalize_first: Upper-case the first character only
    dedupe_preserve_order: Drop repeated items, keeping the first

Example:
    >>> normalize_key("¡Árbol!")
    'arbol'
    >>> normalize_key("Niño")
    'niño'
"""

from __future__ import annotations

import re
import unicodedata
from typing import Iterable, List

# Letters that keep their diacritic after normalization
_PRESERVED = {"ñ", "Ñ"}

# Anything that is not a letter, digit, whitespace, apostrophe, comma or hyphen
_DISALLOWED_RE = re.compile(r"[^\w\s',\-]|_")


def normalize_text(text: object) -> str:
    """Return ``text`` lower-cased and trimmed, or ``""`` for non-strings."""
    if not isinstance(text, str):
        return ""
    return text.lower().strip()


def strip_diacritics(text: str) -> str:
    """Remove combining accents from ``text`` while keeping ``ñ``."""
    out = []
    for ch in text:
        if ch in _PRESERVED:
            out.append(ch)
            continue
        decomposed = unicodedata.normalize("NFD", ch)
        out.append("".join(c for c in decomposed if not unicodedata.combining(c)))
    return "".join(out)


def normalize_key(text: object) -> str:
    """Normalize a phrase token for dictionary lookup.

    Applies, in order: NFC composition, diacritic removal (except ``ñ``),
    removal of characters other than letters, digits, whitespace,
    apostrophes, commas and hyphens, lower-casing and trimming.
    """
    if not isinstance(text, str):
        return ""
    text = unicodedata.normalize("NFC", text)
    text = strip_diacritics(text)
    text = _DISALLOWED_RE.sub("", text)
    return text.lower().strip()


def split_variants(value: str) -> List[str]:
    """Split ``"a, b,, c"`` into ``["a", "b", "c"]``."""
    return [piece.strip() for piece in value.split(",") if piece.strip()]


def capitalize_first(text: str) -> str:
    """Upper-case the first character, leaving the rest untouched."""
    if not text:
        return text
    return text[0].upper() + text[1:]


def dedupe_preserve_order(items: Iterable[str]) -> List[str]:
    seen: set[str] = set()
    result: List[str] = []
    for item in items:
        if item not in seen:
            seen.add(item)
            result.append(item)
    return result
