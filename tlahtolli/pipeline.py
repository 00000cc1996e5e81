"""
Translation session for Tlahtolli.

This module ties the engine together for one user:
1. Load a language dataset into a dictionary (schema, index, corpus)
2. Validate a query
3. Translate it token by token into one or more phrases
4. Rank "did you mean" suggestions when the query is not fully covered
5. Prepare speech requests for the original text and its translation

Design Philosophy:
- All state lives in a ``TranslatorSession`` owned by the caller; nothing
  is global
- Loading builds the new dictionary completely before it replaces the old
  one; a failed load clears the session and translation stays disabled
  until a load succeeds
- "No translation" is not an error: the outcome always carries either
  suggestions or the input echoed back
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping, Optional, Sequence

from tlahtolli.config import EngineConfig
from tlahtolli.errors import EmptyQueryError, LoadError, SchemaError
from tlahtolli.ingest.datasets import dataset_path, language_label, load_records
from tlahtolli.models import Direction, LoadedDictionary, Suggestion
from tlahtolli.refine.rerank import rank_suggestions
from tlahtolli.speech.phonetics import SPANISH, SpeechRequest, build_speech_request
from tlahtolli.translate.dictionary import load_dictionary
from tlahtolli.translate.phrase import PhraseTranslation, resolve_phrase

logger = logging.getLogger(__name__)

MSG_EMPTY_QUERY = "Enter a word or phrase."
MSG_NO_DICTIONARY = "Select a dictionary first."
MSG_WAITING = "Waiting for a language selection."


def validate_query(text: Optional[str]) -> str:
    """Return ``text`` stripped, or raise ``EmptyQueryError``."""
    if text is None or not text.strip():
        raise EmptyQueryError(MSG_EMPTY_QUERY)
    return text.strip()


@dataclass
class TranslationOutcome:
    """Result of one translation request.

    Attributes:
        query: Text as submitted
        direction: Direction used
        phrase: Token-level translation, ``None`` if the request was rejected
        suggestions: Ranked suggestions (empty when the phrase was an exact hit)
        speech: Requests for the original text and the translation
        message: User-facing note when the request could not run
    """
    query: str
    direction: Direction
    phrase: Optional[PhraseTranslation] = None
    suggestions: list[Suggestion] = field(default_factory=list)
    speech: tuple[SpeechRequest, ...] = ()
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.phrase is not None

    @property
    def text(self) -> str:
        if self.phrase is None:
            return self.message
        return self.phrase.text

    @property
    def speakable(self) -> bool:
        return bool(self.speech)


class TranslatorSession:
    """Holds the loaded dictionary and serves translation requests.

    Example:
        >>> session = TranslatorSession()
        >>> session.load([{"espanol": "perro, can", "nahuatl": "chichi"}])
        >>> session.translate("Perro", "es-ind").text
        'Chichi'
    """

    def __init__(self, config: EngineConfig | None = None):
        self.config = config or EngineConfig()
        self.dictionary: Optional[LoadedDictionary] = None
        self.source: str = ""
        self.last_error: str = ""

    @property
    def ready(self) -> bool:
        return self.dictionary is not None

    @property
    def language(self) -> str:
        if self.dictionary is None:
            return ""
        return self.dictionary.language or self.dictionary.schema.target_field

    @property
    def status(self) -> str:
        if self.dictionary is not None:
            label = language_label(self.language)
            return f"Dictionary {label} loaded ({self.dictionary.word_count} words)"
        if self.last_error:
            return f"Error: {self.last_error}"
        return MSG_WAITING

    def clear(self) -> None:
        self.dictionary = None
        self.source = ""

    def load(
        self,
        records: Sequence[Mapping[str, object]],
        language_key: Optional[str] = None,
        source: str = "",
    ) -> None:
        """Build a dictionary from ``records`` and make it the active one.

        Raises:
            SchemaError: If the records have no indigenous-language field;
                the session is cleared
        """
        try:
            loaded = load_dictionary(records, language_key)
        except SchemaError as exc:
            self._fail(exc)
            raise
        self.dictionary = loaded
        self.source = source
        self.last_error = ""

    def load_source(self, source: str | Path, language_key: Optional[str] = None) -> None:
        """Load a dataset from a file path or URL.

        Raises:
            LoadError: If the dataset cannot be read; the session is cleared
            SchemaError: If the dataset has no indigenous-language field
        """
        try:
            records = load_records(source, timeout=self.config.request_timeout)
        except LoadError as exc:
            self._fail(exc)
            raise
        self.load(records, language_key, source=str(source))

    def load_language(self, language: str) -> None:
        """Load the dataset file of ``language`` from the configured data dir."""
        try:
            path = dataset_path(language, self.config.data_dir)
        except LoadError as exc:
            self._fail(exc)
            raise
        self.load_source(path)

    def _fail(self, exc: Exception) -> None:
        logger.warning("Dictionary load failed: %s", exc)
        self.clear()
        self.last_error = str(exc)

    def speech_for(self, original: str, translation: str, direction: Direction) -> tuple[SpeechRequest, SpeechRequest]:
        """Speech requests for the original text and its translation."""
        language = self.language
        if direction is Direction.SPANISH_TO_INDIGENOUS:
            return (build_speech_request(original, SPANISH), build_speech_request(translation, language))
        return (build_speech_request(original, language), build_speech_request(translation, SPANISH))

    def suggest(self, query: str, direction: Direction | str, top_n: int | None = None) -> list[Suggestion]:
        """Rank suggestions for ``query`` against the loaded corpus."""
        if self.dictionary is None:
            return []
        return rank_suggestions(
            query,
            direction,
            self.dictionary.corpus,
            top_n=self.config.top_n if top_n is None else top_n,
            min_score=self.config.min_score,
        )

    def translate(self, text: Optional[str], direction: Direction | str) -> TranslationOutcome:
        """Translate ``text`` in ``direction``.

        Rejected requests (empty query, no dictionary) come back with a
        ``message`` and no phrase.
        """
        direction = Direction.parse(direction)
        try:
            query = validate_query(text)
        except EmptyQueryError as exc:
            return TranslationOutcome(query=text or "", direction=direction, message=str(exc))

        if self.dictionary is None:
            return TranslationOutcome(query=query, direction=direction, message=MSG_NO_DICTIONARY)

        phrase = resolve_phrase(
            query,
            direction,
            self.dictionary.index,
            max_combinations=self.config.max_combinations,
        )
        outcome = TranslationOutcome(query=query, direction=direction, phrase=phrase)

        if not phrase.fully_exact:
            outcome.suggestions = self.suggest(query, direction)
        if phrase.is_single and phrase.has_translation:
            outcome.speech = self.speech_for(query, phrase.text, direction)

        logger.debug(
            "Translated %r (%s): %d combination(s), %d suggestion(s)",
            query,
            direction.value,
            phrase.total_combinations,
            len(outcome.suggestions),
        )
        return outcome


def translate_text(
    text: str,
    records: Sequence[Mapping[str, object]],
    direction: Direction | str = Direction.SPANISH_TO_INDIGENOUS,
    config: EngineConfig | None = None,
) -> str:
    """One-shot helper: load ``records`` and translate ``text``."""
    session = TranslatorSession(config)
    session.load(records)
    return session.translate(text, direction).text
