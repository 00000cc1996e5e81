"""
Dictionary store for Spanish/indigenous word pairs.

This module handles:
- Detecting which record field holds the indigenous-language form
- Expanding comma-separated synonym lists into individual entries
- Building the bidirectional exact-match index
- Keeping the full expanded corpus for suggestion ranking

Design Philosophy:
- A dataset is turned into a ``LoadedDictionary`` in one call and never
  patched afterwards; loading another language builds a new one
- The exact index collapses duplicate keys (last write wins) while the
  corpus keeps every entry, so ranking still sees all synonyms
"""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, Mapping, Optional, Sequence

from tlahtolli.config import LANGUAGES, SPANISH_FIELD_NAMES
from tlahtolli.errors import SchemaError
from tlahtolli.models import (
    DatasetSchema,
    DictionaryEntry,
    DictionaryIndex,
    LoadedDictionary,
)
from tlahtolli.utils import normalize_key, normalize_text, split_variants

logger = logging.getLogger(__name__)


def detect_schema(
    records: Sequence[Mapping[str, object]],
    language_key: Optional[str] = None,
    spanish_fields: tuple[str, ...] = SPANISH_FIELD_NAMES,
) -> DatasetSchema:
    """Work out the field layout of ``records``.

    The indigenous field is the single key of the first record that is not
    one of ``spanish_fields`` (compared case-insensitively). An explicit
    ``language_key`` must be present in the first record and skips
    detection.

    Raises:
        SchemaError: If the dataset is empty, or the first record has no
            indigenous key or more than one candidate
    """
    if not records:
        raise SchemaError("Dataset is empty; no indigenous-language field to detect.")

    first = records[0]
    if not isinstance(first, Mapping):
        raise SchemaError("Dataset records must be objects mapping field names to text.")

    if language_key is not None:
        if language_key not in first:
            raise SchemaError(
                f"Field {language_key!r} not found in dataset "
                f"(available: {', '.join(map(str, first.keys()))})"
            )
        return DatasetSchema(target_field=language_key, spanish_fields=spanish_fields)

    candidates = [str(key) for key in first.keys() if str(key).lower() not in spanish_fields]
    if not candidates:
        raise SchemaError("Invalid dataset structure: no indigenous-language field found.")
    if len(candidates) > 1:
        raise SchemaError(
            f"Ambiguous dataset structure: several possible indigenous-language "
            f"fields ({', '.join(candidates)}); pass the field name explicitly."
        )
    return DatasetSchema(target_field=candidates[0], spanish_fields=spanish_fields)


def expand_record(
    record: Mapping[str, object],
    schema: DatasetSchema,
) -> list[DictionaryEntry]:
    """Expand one raw record into its Spanish × indigenous variant pairs.

    ``{"espanol": "a, b", "nahuatl": "x, y"}`` yields four entries. A record
    with an empty or missing side yields none.
    """
    spanish = normalize_text(schema.spanish_value(record))
    indigenous = normalize_text(record.get(schema.target_field))
    if not spanish or not indigenous:
        return []

    return [
        DictionaryEntry(spanish=es, indigenous=ind)
        for es in split_variants(spanish)
        for ind in split_variants(indigenous)
    ]


def iter_entries(
    records: Iterable[Mapping[str, object]],
    schema: DatasetSchema,
) -> Iterator[DictionaryEntry]:
    for record in records:
        yield from expand_record(record, schema)


def build_index(entries: Iterable[DictionaryEntry]) -> DictionaryIndex:
    """Insert every entry into both direction maps, in order.

    A key seen twice keeps the later value.
    """
    index = DictionaryIndex()
    for entry in entries:
        if logger.isEnabledFor(logging.DEBUG):
            previous = index.spanish_to_indigenous.get(entry.spanish)
            if previous is not None and previous != entry.indigenous:
                logger.debug(
                    "'%s' -> '%s' overwrites '%s'", entry.spanish, entry.indigenous, previous
                )
        index.add(entry)
    return index


def build(
    records: Sequence[Mapping[str, object]],
    schema: DatasetSchema,
) -> tuple[DictionaryIndex, list[DictionaryEntry]]:
    """Build the exact index and the expanded corpus from ``records``."""
    corpus = list(iter_entries(records, schema))
    return build_index(corpus), corpus


def _language_code(field_name: str) -> str:
    code = normalize_key(field_name)
    return code if code in LANGUAGES else ""


def load_dictionary(
    records: Sequence[Mapping[str, object]],
    language_key: Optional[str] = None,
) -> LoadedDictionary:
    """Turn raw dataset records into a ready-to-use dictionary.

    Args:
        records: Ordered dataset records (field name → text)
        language_key: Indigenous field name; detected when omitted

    Returns:
        LoadedDictionary with schema, exact index and expanded corpus

    Raises:
        SchemaError: If no indigenous-language field can be found
    """
    schema = detect_schema(records, language_key)
    corpus: list[DictionaryEntry] = []
    skipped = 0
    for record in records:
        if not isinstance(record, Mapping):
            skipped += 1
            continue
        expanded = expand_record(record, schema)
        if not expanded:
            skipped += 1
        corpus.extend(expanded)

    index = build_index(corpus)
    loaded = LoadedDictionary(
        schema=schema,
        index=index,
        corpus=corpus,
        language=_language_code(schema.target_field),
        record_count=len(records),
        skipped_count=skipped,
    )
    logger.info(
        "Loaded '%s' dictionary: %d records, %d skipped, %d entries, %d words",
        schema.target_field,
        loaded.record_count,
        skipped,
        len(corpus),
        loaded.word_count,
    )
    return loaded
