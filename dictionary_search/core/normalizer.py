"""Accent normalization and keyword pattern building for loose matching."""

import re
import unicodedata
from dataclasses import dataclass
from typing import Optional

# Combining marks left behind by NFD decomposition (tone marks, dot below, etc.)
COMBINING_MARKS = "\u0300-\u036f"
_COMBINING_REGEX = re.compile(f"[{COMBINING_MARKS}]")
_WHITESPACE_REGEX = re.compile(r"\s+")


class TextNormalizer:
    """Handles accent stripping and case folding for comparison forms."""

    def __init__(self) -> None:
        """Initialize the normalizer."""
        self.whitespace_regex = _WHITESPACE_REGEX
        self.combining_regex = _COMBINING_REGEX

    def decompose(self, text: str) -> str:
        """Return the NFD form of ``text`` so diacritics become separate marks."""
        if not text:
            return ""
        return unicodedata.normalize("NFD", text)

    def normalize(self, text: Optional[str]) -> str:
        """
        Normalize text to its comparison form.

        Args:
            text: Input text to normalize

        Returns:
            Lowercased text with diacritics and tone marks stripped and
            internal whitespace collapsed
        """
        if not text:
            return ""

        normalized = self.combining_regex.sub("", self.decompose(text))
        normalized = unicodedata.normalize("NFC", normalized).casefold()
        normalized = self.whitespace_regex.sub(" ", normalized)

        return normalized.strip()


@dataclass(frozen=True)
class KeywordPattern:
    """A normalized keyword together with its accent-tolerant regex."""

    raw: str
    normalized: str
    regex: "re.Pattern[str]"

    def search(self, text: Optional[str]) -> bool:
        """Whether the keyword occurs in ``text``, ignoring case and diacritics."""
        if not text or not self.normalized:
            return False
        return self.regex.search(unicodedata.normalize("NFD", text)) is not None

    def equals(self, text: Optional[str]) -> bool:
        """Whether ``text`` is the keyword, ignoring case and diacritics."""
        if not text or not self.normalized:
            return False
        return self.regex.fullmatch(unicodedata.normalize("NFD", text).strip()) is not None


class PatternBuilder:
    """Builds accent-insensitive patterns from raw keywords."""

    def __init__(self, normalizer: Optional[TextNormalizer] = None) -> None:
        self.normalizer = normalizer or TextNormalizer()

    def build(self, keyword: str) -> KeywordPattern:
        """
        Build a matching pattern for a keyword.

        Every character of the normalized keyword may be followed by any
        number of combining marks, so the pattern matches the decomposed
        form of stored text whether or not it carries diacritics. The
        query side is stripped first, which makes matching bidirectional.

        Args:
            keyword: Raw keyword as typed by the user

        Returns:
            KeywordPattern for the keyword
        """
        normalized = self.normalizer.normalize(keyword)

        parts = []
        for char in normalized:
            if char == " ":
                parts.append(r"\s+")
            else:
                parts.append(re.escape(char))
            parts.append(f"[{COMBINING_MARKS}]*")

        regex = re.compile("".join(parts), re.IGNORECASE)
        return KeywordPattern(raw=keyword, normalized=normalized, regex=regex)
