"""Kinds of document elements that can receive an identifier."""

from enum import Enum


class ElementKind(Enum):
    """Closed set of element kinds; only the fallback token depends on it."""

    HEADING = "heading"
    OTHER = "other"
