"""
Project-wide configuration for Tlahtolli.

This module defines the paths, field names and tuning values used by the
translation engine. Module-level constants cover things that never change
at runtime; ``EngineConfig`` carries the values a caller may want to tune
per session (combination cap, suggestion count, score threshold).

Module Contents:
    APP_NAME: Application name for display purposes
    DATA_DIR: Directory holding the language datasets (``<code>.json``)
    SPANISH_FIELD_NAMES: Record keys accepted for the Spanish form
    LANGUAGES: Supported language codes and their display labels
    HIGH_CONFIDENCE / MEDIUM_CONFIDENCE: Score thresholds for labels
    SPEECH_*: Voice settings for speech playback
    EngineConfig: Per-session tuning values

``DATA_DIR`` can be overridden with the ``TLAHTOLLI_DATA_DIR`` environment
variable.

Example:
    >>> from tlahtolli.config import EngineConfig
    >>> config = EngineConfig(max_combinations=3)
    >>> config.top_n
    5
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

# Application name for display and identification
APP_NAME = "Tlahtolli"

# Language datasets directory
DATA_DIR = Path(
    os.environ.get("TLAHTOLLI_DATA_DIR", Path(__file__).resolve().parent / "data")
)

# Keys that hold the Spanish side of a dataset record
SPANISH_FIELD_NAMES = ("espanol", "español")

# Supported languages: code (dataset file stem) -> display label
LANGUAGES = {
    "mixteco": "Mixteco",
    "nahuatl": "Náhuatl",
    "totonaco": "Totonaco",
    "zapoteco": "Zapoteco",
    "maya": "Maya",
    "otomi": "Otomí",
}

# Confidence label thresholds (strictly greater than)
HIGH_CONFIDENCE = 0.8
MEDIUM_CONFIDENCE = 0.5

# Voice settings used for speech playback
SPEECH_VOICE_LANG = "es-ES"
SPEECH_RATE = 0.8
SPEECH_PITCH = 1.0
SPEECH_VOLUME = 1.0


@dataclass
class EngineConfig:
    """Tuning values for a translator session.

    Attributes:
        max_combinations: Upper bound on distinct phrase combinations kept
            while expanding ambiguous tokens
        top_n: Number of ranked suggestions returned
        min_score: Suggestions must score strictly above this value
        request_timeout: Timeout in seconds for dataset downloads
        data_dir: Directory searched for ``<language>.json`` datasets
    """
    max_combinations: int = 5
    top_n: int = 5
    min_score: float = 0.2
    request_timeout: float = 10.0
    data_dir: Path = field(default_factory=lambda: DATA_DIR)

    def __post_init__(self):
        if self.max_combinations < 1:
            raise ValueError("max_combinations must be at least 1")
        if self.top_n < 0:
            raise ValueError("top_n must not be negative")
        self.data_dir = Path(self.data_dir)

    def to_dict(self) -> dict:
        """Serialize config for logging/debugging."""
        return {
            "max_combinations": self.max_combinations,
            "top_n": self.top_n,
            "min_score": self.min_score,
            "request_timeout": self.request_timeout,
            "data_dir": str(self.data_dir),
        }
