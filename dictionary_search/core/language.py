"""Heuristic classification of keywords into source or translation queries."""

import re
from dataclasses import dataclass
from typing import Optional, Union

from .normalizer import KeywordPattern

# Base letters of the Igbo alphabet once diacritics are stripped.
# "c" only occurs in the digraph "ch"; q and x never occur.
SOURCE_LETTERS = frozenset("abcdefghijklmnoprstuvwyz")
# Glottal marks appear as ASCII, typographic (U+2019) or modifier (U+02BC) apostrophes
SOURCE_PUNCTUATION = frozenset("-'\u2019\u02bc ")
_LONE_C_REGEX = re.compile(r"c(?!h)")


@dataclass(frozen=True)
class SourceQuery:
    """Keyword that looks like a headword in the source language."""

    pattern: KeywordPattern


@dataclass(frozen=True)
class TranslationQuery:
    """Keyword matched against translated meanings (definitions)."""

    pattern: KeywordPattern


Query = Union[SourceQuery, TranslationQuery]


def looks_like_translation(normalized: str) -> bool:
    """
    Whether a normalized keyword contains a token outside the source alphabet.

    Args:
        normalized: Keyword in comparison form (see TextNormalizer.normalize)

    Returns:
        True when a character or letter sequence cannot occur in a source word
    """
    for char in normalized:
        if char in SOURCE_LETTERS or char in SOURCE_PUNCTUATION:
            continue
        return True

    return _LONE_C_REGEX.search(normalized) is not None


def classify(pattern: KeywordPattern, is_english: Optional[bool] = None) -> Query:
    """Pick the matching strategy for a keyword."""
    if is_english or looks_like_translation(pattern.normalized):
        return TranslationQuery(pattern)
    return SourceQuery(pattern)
