"""
Ingestion module for language datasets.

This module provides:
- Reading dataset JSON from files (UTF-8 or UTF-16) and URLs
- Resolving a language code to its dataset file
"""

from tlahtolli.ingest.datasets import (
    available_languages,
    dataset_path,
    load_records,
    parse_records,
)

__all__ = [
    "available_languages",
    "dataset_path",
    "load_records",
    "parse_records",
]
