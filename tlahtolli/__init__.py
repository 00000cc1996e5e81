"""
Tlahtolli: Spanish <-> indigenous Mexican languages word and phrase translator

Translates between Spanish and Náhuatl, Mixteco, Zapoteco, Totonaco, Maya
and Otomí using a bidirectional dictionary:

1. Exact and fuzzy token lookup with casing carried over
2. Multiple candidate phrase translations for ambiguous words
3. Ranked "did you mean" suggestions with confidence labels
4. Approximate phonetic readout for speech playback

License: MIT
"""

__version__ = "0.1.0"

from tlahtolli.models import Direction, DictionaryEntry, Suggestion
from tlahtolli.pipeline import TranslatorSession, translate_text

__all__ = [
    "Direction",
    "DictionaryEntry",
    "Suggestion",
    "TranslatorSession",
    "translate_text",
]
