"""
Core data models for Tlahtolli.

These models describe the dictionary built from a language dataset and the
values handed back by the translation engine.

Design Philosophy:
- Immutable: entries and schemas are frozen dataclasses
- Explicit direction: every lookup names the direction it runs in
- Full replace: a loaded dictionary is rebuilt wholesale, never patched
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from tlahtolli.config import HIGH_CONFIDENCE, MEDIUM_CONFIDENCE, SPANISH_FIELD_NAMES
from tlahtolli.utils import normalize_key


class Direction(Enum):
    """Translation direction between Spanish and the loaded language."""
    SPANISH_TO_INDIGENOUS = "es_indigena"
    INDIGENOUS_TO_SPANISH = "indigena_es"

    @classmethod
    def parse(cls, value: str | Direction) -> Direction:
        """Parse a direction from its value or one of its aliases.

        Accepts the enum values, the form values of the web interface
        (``espanol`` / ``indigena``) and the short forms ``es-ind`` /
        ``ind-es``.
        """
        if isinstance(value, Direction):
            return value
        key = (value or "").strip().lower().replace("_", "-")
        if key in ("es-indigena", "espanol", "español", "es-ind", "es"):
            return cls.SPANISH_TO_INDIGENOUS
        if key in ("indigena-es", "indigena", "indígena", "ind-es", "ind"):
            return cls.INDIGENOUS_TO_SPANISH
        raise ValueError(
            f"Unknown direction: {value!r}. Use 'es-ind' or 'ind-es'."
        )


@dataclass(frozen=True)
class DatasetSchema:
    """Field layout of a language dataset.

    Attributes:
        target_field: Key holding the indigenous-language form, detected
            once when the dataset is loaded
        spanish_fields: Keys accepted for the Spanish form
    """
    target_field: str
    spanish_fields: tuple[str, ...] = SPANISH_FIELD_NAMES

    def is_spanish_field(self, key: str) -> bool:
        return key.lower() in self.spanish_fields

    def spanish_value(self, record: dict) -> object:
        """Return the value of the first Spanish key present in ``record``.

        Keys are compared case-insensitively, as in :meth:`is_spanish_field`.
        """
        for name in self.spanish_fields:
            for key, value in record.items():
                if str(key).lower() == name and value:
                    return value
        return None


@dataclass(frozen=True)
class DictionaryEntry:
    """A single Spanish/indigenous word pair.

    Both sides are lower case and trimmed; an entry never holds a
    comma-separated variant list.
    """
    spanish: str
    indigenous: str

    def source(self, direction: Direction) -> str:
        """Side of the entry that a query in ``direction`` is compared to."""
        if direction is Direction.SPANISH_TO_INDIGENOUS:
            return self.spanish
        return self.indigenous

    def target(self, direction: Direction) -> str:
        if direction is Direction.SPANISH_TO_INDIGENOUS:
            return self.indigenous
        return self.spanish


@dataclass
class DictionaryIndex:
    """Bidirectional exact-match lookup tables.

    Keys are normalized text; when two entries share a key the later one
    wins in that direction.
    """
    spanish_to_indigenous: dict[str, str] = field(default_factory=dict)
    indigenous_to_spanish: dict[str, str] = field(default_factory=dict)
    _folded: dict = field(default_factory=dict, init=False, repr=False, compare=False)

    def __len__(self) -> int:
        return len(self.spanish_to_indigenous)

    def mapping(self, direction: Direction) -> dict[str, str]:
        if direction is Direction.SPANISH_TO_INDIGENOUS:
            return self.spanish_to_indigenous
        return self.indigenous_to_spanish

    def folded(self, direction: Direction) -> dict[str, str]:
        """The table of ``direction`` keyed by ``normalize_key`` (accents removed).

        Phrase tokens are accent-folded before lookup, so they are matched
        against this view. Built on first use.
        """
        table = self._folded.get(direction)
        if table is None:
            table = {normalize_key(k): v for k, v in self.mapping(direction).items()}
            self._folded[direction] = table
        return table

    def lookup(self, key: str, direction: Direction) -> Optional[str]:
        return self.mapping(direction).get(key)

    def add(self, entry: DictionaryEntry) -> None:
        self.spanish_to_indigenous[entry.spanish] = entry.indigenous
        self.indigenous_to_spanish[entry.indigenous] = entry.spanish
        self._folded.clear()


@dataclass
class LoadedDictionary:
    """Everything built from one language dataset.

    Attributes:
        schema: Detected field layout
        index: Exact-match lookup tables
        corpus: Every expanded entry in dataset order (not deduplicated)
        language: Language code derived from the target field, if known
        record_count: Number of raw records read
        skipped_count: Records dropped for an empty or missing field
    """
    schema: DatasetSchema
    index: DictionaryIndex
    corpus: list[DictionaryEntry] = field(default_factory=list)
    language: str = ""
    record_count: int = 0
    skipped_count: int = 0

    @property
    def word_count(self) -> int:
        return len(self.index)


@dataclass
class TokenCandidates:
    """Translation candidates for one token of a phrase.

    Attributes:
        original: Token text as typed, casing and punctuation included
        candidates: Ordered, deduplicated replacement strings
        source: How the candidates were found: ``separator``, ``exact``,
            ``fuzzy`` or ``identity``
    """
    original: str
    candidates: list[str]
    source: str = "identity"

    @property
    def is_separator(self) -> bool:
        return self.source == "separator"

    @property
    def is_translated(self) -> bool:
        return self.source in ("exact", "fuzzy")

    @property
    def is_ambiguous(self) -> bool:
        return len(self.candidates) > 1


_CONFIDENCE_ES = {"High": "Alta", "Medium": "Media", "Low": "Baja"}


def confidence_label(score: float) -> str:
    """Bucket a similarity score into ``High``, ``Medium`` or ``Low``."""
    if score > HIGH_CONFIDENCE:
        return "High"
    if score > MEDIUM_CONFIDENCE:
        return "Medium"
    return "Low"


@dataclass(frozen=True)
class Suggestion:
    """A ranked "did you mean" translation.

    Attributes:
        translation: Target-side text of the matched entry
        matched_source: Source-side text the query was compared to
        score: Similarity score (may exceed 1.0)
        confidence: ``High``, ``Medium`` or ``Low``
    """
    translation: str
    matched_source: str
    score: float
    confidence: str

    @property
    def confianza(self) -> str:
        """Spanish confidence label shown by the web interface."""
        return _CONFIDENCE_ES[self.confidence]

    def to_dict(self) -> dict:
        return {
            "traduccion": self.translation,
            "palabraOriginal": self.matched_source,
            "similitud": self.score,
            "confianza": self.confianza,
        }
