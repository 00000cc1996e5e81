"""
Dataset loading for language dictionaries.

A dataset is a JSON array of flat objects, one per dictionary record:

    [{"espanol": "perro, can", "nahuatl": "chichi"}, ...]

Datasets are read from a local file or fetched over HTTP(S). Files are
decoded as UTF-8 (with or without BOM) and fall back to UTF-16, since
spreadsheet exports of these word lists come in both.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import requests

from tlahtolli.config import DATA_DIR, LANGUAGES
from tlahtolli.errors import LoadError
from tlahtolli.utils import normalize_key

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10.0


def is_url(source: str | Path) -> bool:
    return isinstance(source, str) and source.lower().startswith(("http://", "https://"))


def _decode(raw: bytes) -> str:
    for enc in ("utf-8-sig", "utf-16"):
        try:
            return raw.decode(enc)
        except UnicodeDecodeError:
            continue
    raise LoadError("Dataset is neither UTF-8 nor UTF-16 encoded")


def parse_records(text: str, origin: str = "dataset") -> list[dict[str, Any]]:
    """Parse dataset JSON and check it is an array of objects."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise LoadError(f"Invalid JSON in {origin}: {exc}") from exc

    if not isinstance(data, list):
        raise LoadError(f"{origin} must contain a JSON array of records")
    if not all(isinstance(item, dict) for item in data):
        raise LoadError(f"Every record in {origin} must be a JSON object")
    return data


def fetch_records(url: str, timeout: float = DEFAULT_TIMEOUT) -> list[dict[str, Any]]:
    """Download a dataset from ``url``."""
    try:
        resp = requests.get(url, timeout=timeout)
        resp.raise_for_status()
    except requests.RequestException as exc:
        raise LoadError(f"Error loading {url}: {exc}") from exc
    return parse_records(_decode(resp.content), origin=url)


def read_records(path: str | Path) -> list[dict[str, Any]]:
    """Read a dataset from a local JSON file."""
    path = Path(path)
    try:
        raw = path.read_bytes()
    except OSError as exc:
        raise LoadError(f"Error loading {path}: {exc}") from exc
    return parse_records(_decode(raw), origin=path.name)


def load_records(source: str | Path, timeout: float = DEFAULT_TIMEOUT) -> list[dict[str, Any]]:
    """Load dataset records from a file path or an HTTP(S) URL.

    Raises:
        LoadError: On network, I/O, decoding or structure problems
    """
    if is_url(source):
        records = fetch_records(str(source), timeout=timeout)
    else:
        records = read_records(source)
    logger.info("Read %d records from %s", len(records), source)
    return records


def language_label(code: str) -> str:
    return LANGUAGES.get(normalize_key(code), code)


def dataset_path(language: str, data_dir: str | Path = DATA_DIR) -> Path:
    """Find the dataset file of ``language`` inside ``data_dir``.

    The file stem must equal the language code; the ``.json`` extension is
    matched case-insensitively (``nahuatl.JSON`` is found too).

    Raises:
        LoadError: If no dataset file exists for the language
    """
    code = normalize_key(language)
    data_dir = Path(data_dir)
    if data_dir.is_dir():
        for candidate in sorted(data_dir.iterdir()):
            if candidate.is_file() and candidate.suffix.lower() == ".json" and candidate.stem.lower() == code:
                return candidate
    raise LoadError(f"No dataset for '{language}' in {data_dir}")


def available_languages(data_dir: str | Path = DATA_DIR) -> dict[str, bool]:
    """Map each known language code to whether its dataset file exists."""
    available = {}
    for code in LANGUAGES:
        try:
            dataset_path(code, data_dir)
        except LoadError:
            available[code] = False
        else:
            available[code] = True
    return available
