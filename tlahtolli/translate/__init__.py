"""
Translation module: dictionary store and phrase translator.

This module provides:
- Schema detection and synonym-variant expansion of language datasets
- The bidirectional exact-match index
- Token-level phrase translation with fuzzy fallback
"""

from tlahtolli.translate.dictionary import (
    build,
    build_index,
    detect_schema,
    expand_record,
    load_dictionary,
)
from tlahtolli.translate.phrase import (
    PhraseTranslation,
    resolve_phrase,
    tokenize,
    translate_phrase,
)

__all__ = [
    "build",
    "build_index",
    "detect_schema",
    "expand_record",
    "load_dictionary",
    "PhraseTranslation",
    "resolve_phrase",
    "tokenize",
    "translate_phrase",
]
