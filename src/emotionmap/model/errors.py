"""
Error Taxonomy
==============
All errors raised or reported by the dataset pipeline derive from
EmotionMapError, so the load boundary can catch them in one place.

Classes:
    LoadError: Acquisition failures (FetchError, ParseError).
    ValidationError: Schema violations (ShapeError, FieldError, RangeError,
        DuplicateKeyError).
    RenderStateError: Reconciler invariant violation (programming fault).
"""
from __future__ import annotations

from typing import Optional


class EmotionMapError(Exception):
    """Base class for all emotionmap errors."""


# ------------------------------------------------------------------------------
# Acquisition
# ------------------------------------------------------------------------------

class LoadError(EmotionMapError):
    """The dataset document could not be obtained or decoded."""


class FetchError(LoadError):
    """Network, status or filesystem failure while reading the source."""

    def __init__(self, message: str, source: str, status: Optional[int] = None) -> None:
        super().__init__(message)
        self.source = source
        self.status = status


class ParseError(LoadError):
    """The document is not well-formed JSON."""


# ------------------------------------------------------------------------------
# Schema
# ------------------------------------------------------------------------------

class ValidationError(EmotionMapError):
    """The document does not match the category -> words schema."""


class ShapeError(ValidationError):
    """Top-level value is not a non-empty sequence of category groups."""


class FieldError(ValidationError):
    """A group or a word entry is missing a required field."""

    def __init__(self, message: str, index: int, word_index: Optional[int] = None) -> None:
        super().__init__(message)
        self.index = index
        self.word_index = word_index


class RangeError(ValidationError):
    """A coordinate lies outside [-1, 1]."""

    def __init__(self, message: str, word: str) -> None:
        super().__init__(message)
        self.word = word


class DuplicateKeyError(ValidationError):
    """Two entries share the same (word, category, level) identity key."""

    def __init__(self, message: str, key: tuple[str, str, str]) -> None:
        super().__init__(message)
        self.key = key


# ------------------------------------------------------------------------------
# Rendering
# ------------------------------------------------------------------------------

class RenderStateError(EmotionMapError):
    """Rendered markers no longer match the visible point set."""
