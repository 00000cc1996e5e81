"""
Phrase translation by token lookup and candidate combination.

This module handles:
- Splitting input into word tokens and separators (whitespace, punctuation)
- Resolving each word token: exact index hit, then fuzzy word overlap,
  then the token itself
- Carrying the input casing over to the replacements
- Combining per-token candidates into whole-phrase translations

Separators are kept as tokens, so joining the first candidate of every
token reproduces the input layout exactly. Combination is a cartesian
product and grows exponentially with ambiguous tokens; it stops as soon as
``max_combinations`` distinct phrases have been produced.
"""

from __future__ import annotations

import itertools
import math
import re
from dataclasses import dataclass, field
from typing import Iterator

from tlahtolli.models import DictionaryIndex, Direction, TokenCandidates
from tlahtolli.utils import capitalize_first, dedupe_preserve_order, normalize_key

PUNCTUATION = '.,!?;:()[]{}"“”«»'

_SPLIT_RE = re.compile(r"(\s+|[" + re.escape(PUNCTUATION) + r"]+)")
_WHITESPACE_RE = re.compile(r"\s+")
_PUNCTUATION_RE = re.compile(r"[" + re.escape(PUNCTUATION) + r"]+")

LISTING_HEADER = "Possible translations:"


def tokenize(text: str) -> list[str]:
    """Split ``text`` into words and separators; ``"".join`` restores it."""
    return [part for part in _SPLIT_RE.split(text) if part]


def is_separator(token: str) -> bool:
    return bool(_WHITESPACE_RE.fullmatch(token) or _PUNCTUATION_RE.fullmatch(token))


def _words_overlap(query_words: list[str], key_words: list[str]) -> bool:
    return any(kw in qw or qw in kw for qw in query_words for kw in key_words)


def fuzzy_candidates(key: str, mapping: dict[str, str]) -> list[str]:
    """Collect values whose key equals ``key`` or shares a word overlap with it.

    A word overlaps when one is a substring of the other. Values come back
    deduplicated in dictionary order.
    """
    query_words = key.split()
    if not query_words:
        return []
    found = []
    for dict_key, value in mapping.items():
        if dict_key == key or _words_overlap(query_words, dict_key.split()):
            found.append(value)
    return dedupe_preserve_order(found)


def resolve_token(token: str, index: DictionaryIndex, direction: Direction) -> TokenCandidates:
    """Find the translation candidates for a single token."""
    if is_separator(token):
        return TokenCandidates(original=token, candidates=[token], source="separator")

    key = normalize_key(token)
    if not key:
        return TokenCandidates(original=token, candidates=[token], source="identity")

    mapping = index.folded(direction)
    exact = index.lookup(key, direction) or mapping.get(key)
    if exact:
        candidates, source = [exact], "exact"
    else:
        candidates, source = fuzzy_candidates(key, mapping), "fuzzy"
        if not candidates:
            return TokenCandidates(original=token, candidates=[token], source="identity")

    if token[0].isupper():
        candidates = dedupe_preserve_order(capitalize_first(c) for c in candidates)
    return TokenCandidates(original=token, candidates=candidates, source=source)


def iter_combinations(tokens: list[TokenCandidates]) -> Iterator[str]:
    """Yield every phrase built from one candidate per token, in token order.

    The product is lazy, so callers can stop early on long phrases.
    """
    for parts in itertools.product(*(t.candidates for t in tokens)):
        yield "".join(parts)


def generate_combinations(tokens: list[TokenCandidates], limit: int = 5) -> list[str]:
    """Return up to ``limit`` distinct phrase combinations."""
    kept: list[str] = []
    seen: set[str] = set()
    for phrase in iter_combinations(tokens):
        if phrase in seen:
            continue
        seen.add(phrase)
        kept.append(phrase)
        if len(kept) >= limit:
            break
    return kept


def format_listing(combinations: list[str]) -> str:
    lines = [LISTING_HEADER]
    lines.extend(f"{i}. {phrase}" for i, phrase in enumerate(combinations, start=1))
    return "\n".join(lines)


@dataclass
class PhraseTranslation:
    """Result of translating a phrase.

    Attributes:
        source_text: Input text
        tokens: Per-token candidates, separators included
        combinations: Distinct phrase translations, capped
        total_combinations: Size of the full cartesian product
    """
    source_text: str
    tokens: list[TokenCandidates] = field(default_factory=list)
    combinations: list[str] = field(default_factory=list)
    total_combinations: int = 1

    @property
    def is_single(self) -> bool:
        return self.total_combinations == 1

    @property
    def word_tokens(self) -> list[TokenCandidates]:
        return [t for t in self.tokens if not t.is_separator]

    @property
    def has_translation(self) -> bool:
        """Whether at least one token was found in the dictionary."""
        return any(t.is_translated for t in self.tokens)

    @property
    def fully_exact(self) -> bool:
        """Whether every word token was an exact dictionary hit."""
        words = self.word_tokens
        return bool(words) and all(t.source == "exact" for t in words)

    @property
    def text(self) -> str:
        if self.is_single:
            return self.combinations[0] if self.combinations else self.source_text
        return format_listing(self.combinations)

    def __str__(self) -> str:
        return self.text


def resolve_phrase(
    text: str,
    direction: Direction | str,
    index: DictionaryIndex,
    max_combinations: int = 5,
) -> PhraseTranslation:
    """Translate ``text`` token by token and combine the candidates."""
    direction = Direction.parse(direction)
    tokens = [resolve_token(token, index, direction) for token in tokenize(text)]
    total = math.prod(len(t.candidates) for t in tokens)
    return PhraseTranslation(
        source_text=text,
        tokens=tokens,
        combinations=generate_combinations(tokens, limit=max_combinations),
        total_combinations=total,
    )


def translate_phrase(
    text: str,
    direction: Direction | str,
    index: DictionaryIndex,
    max_combinations: int = 5,
) -> str:
    """Translate a phrase and render it.

    Returns the translation itself when exactly one combination exists,
    otherwise a numbered listing headed ``Possible translations:``.

    Example:
        >>> index = DictionaryIndex({"perro": "chichi"}, {"chichi": "perro"})
        >>> translate_phrase("Perro, perro.", "es-ind", index)
        'Chichi, chichi.'
    """
    return resolve_phrase(text, direction, index, max_combinations).text
