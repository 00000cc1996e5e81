"""Exceptions raised by the Tlahtolli engine."""

from __future__ import annotations


class TlahtolliError(Exception):
    """Base class for all engine errors."""


class SchemaError(TlahtolliError):
    """The dataset has no detectable indigenous-language field."""


class LoadError(TlahtolliError):
    """A dataset could not be fetched, read or parsed."""


class EmptyQueryError(TlahtolliError):
    """The query is empty or whitespace only."""
