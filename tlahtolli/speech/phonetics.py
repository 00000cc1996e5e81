"""
Approximate pronunciation for speech playback.

Indigenous-language text is read aloud by a Spanish voice. To get closer to
the real pronunciation, the text is lower-cased and passed through a fixed
list of spelling substitutions per language (digraph or letter to an
IPA-like approximation). Spanish text is spoken as typed.

The tables are applied in order, one global find/replace per rule, so a
later rule sees the output of the earlier ones (Náhuatl ``qu`` runs before
``c``). Their output is consumed by speech engines; keep it stable.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Protocol

from tlahtolli.config import SPEECH_PITCH, SPEECH_RATE, SPEECH_VOICE_LANG, SPEECH_VOLUME
from tlahtolli.utils import normalize_key

SPANISH = "es"

PHONETIC_RULES: dict[str, tuple[tuple[str, str], ...]] = {
    "nahuatl": (
        ("x", "sh"),
        ("tl", "t-l"),
        ("tz", "ts"),
        ("cu", "kw"),
        ("hu", "w"),
        ("qu", "k"),
        ("c", "k"),
        ("z", "s"),
    ),
    "mixteco": (
        ("dx", "dʲ"),
        ("tx", "tʲ"),
        ("ch", "tʃ"),
        ("ñ", "ɲ"),
        ("x", "ʃ"),
    ),
    "zapoteco": (
        ("zh", "ʒ"),
        ("x", "ʃ"),
        ("qu", "k"),
        ("ch", "tʃ"),
    ),
    "totonaco": (
        ("ch", "tʃ"),
        ("lh", "ɬ"),
        ("x", "ʃ"),
        ("qu", "k"),
    ),
    "maya": (
        ("x", "sh"),
        ("ch", "tʃ"),
        ("tz", "ts"),
        ("pp", "pʼ"),
        ("tt", "tʼ"),
    ),
}


def phonetic_rules(language: str) -> tuple[tuple[str, str], ...]:
    """Return the substitution table for ``language`` (empty when unknown)."""
    return PHONETIC_RULES.get(normalize_key(language or ""), ())


def phoneticize(text: str, language: str) -> str:
    """Lower-case ``text`` and apply the substitution table of ``language``.

    Example:
        >>> phoneticize("Xochitl", "nahuatl")
        'shokhit-l'
    """
    result = text.lower()
    for original, replacement in phonetic_rules(language):
        result = result.replace(original, replacement)
    return result


@dataclass(frozen=True)
class SpeechRequest:
    """Everything a speech engine needs to read one text aloud.

    Attributes:
        text: Text to speak (phonetic approximation for indigenous text)
        language: Language the text is written in (``es`` or a language code)
        voice_lang: BCP 47 tag of the voice to use
    """
    text: str
    language: str
    voice_lang: str = SPEECH_VOICE_LANG
    rate: float = SPEECH_RATE
    pitch: float = SPEECH_PITCH
    volume: float = SPEECH_VOLUME


def build_speech_request(text: str, language: str = SPANISH) -> SpeechRequest:
    """Prepare ``text`` for playback in ``language``.

    Spanish is spoken verbatim; any other language goes through
    :func:`phoneticize` and is read by the Spanish voice.
    """
    spoken = text if language == SPANISH else phoneticize(text, language)
    return SpeechRequest(text=spoken, language=language)


class Voice(Protocol):
    name: str
    lang: str


def select_voice(voices: Iterable[Voice]) -> Optional[Voice]:
    """Pick the first Spanish voice, or ``None`` if there is none."""
    for voice in voices:
        if "es" in voice.lang or "ES" in voice.lang:
            return voice
    return None
