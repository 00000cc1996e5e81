"""Phonetic approximation and speech requests."""

from tlahtolli.speech.phonetics import (
    PHONETIC_RULES,
    SpeechRequest,
    build_speech_request,
    phoneticize,
    select_voice,
)

__all__ = [
    "PHONETIC_RULES",
    "SpeechRequest",
    "build_speech_request",
    "phoneticize",
    "select_voice",
]
