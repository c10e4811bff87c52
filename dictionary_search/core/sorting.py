"""Parsing and application of explicit field sorts.

Sort specs arrive hand-typed in query strings, e.g. ``["word": "desc"]``.
Parsing never fails: a malformed spec keeps whatever field name can be
recovered and sorts ascending, and a spec with no recoverable field
leaves the natural order alone.
"""

import re
from dataclasses import dataclass
from typing import Any, List, Optional, Sequence

import structlog

from ..models.word import StoredExample, StoredWord
from .matcher import Candidate
from .normalizer import TextNormalizer

logger = structlog.get_logger(__name__)

ASCENDING = "asc"
DESCENDING = "desc"

# Public field name -> attribute on the stored word
SORTABLE_FIELDS = {
    "id": "id",
    "word": "word",
    "normalized": "normalized",
    "wordClass": "word_class",
    "definitions": "definitions",
    "variations": "variations",
    "stems": "stems",
    "examples": "examples",
}
_FIELD_LOOKUP = {name.lower(): name for name in SORTABLE_FIELDS}

_TOKEN_REGEX = re.compile(r"[A-Za-z_]+")
_STRICT_REGEX = re.compile(
    r"""^\[\s*["']?(?P<field>[A-Za-z_]+)["']?\s*:\s*["']?(?P<direction>[A-Za-z]+)["']?\s*\]$"""
)


@dataclass(frozen=True)
class SortSpec:
    """A parsed sort request; ``field`` is None when nothing was recoverable."""

    field: Optional[str] = None
    direction: str = ASCENDING
    malformed: bool = False

    @property
    def descending(self) -> bool:
        return self.direction == DESCENDING

    @property
    def cache_key(self) -> str:
        return f"{self.field or ''}:{self.direction}"


NATURAL_ORDER = SortSpec()


def parse_sort(raw: Optional[str]) -> SortSpec:
    """
    Parse a raw sort parameter.

    Args:
        raw: Sort parameter as received, or None

    Returns:
        SortSpec; never raises
    """
    if raw is None or not str(raw).strip():
        return NATURAL_ORDER

    text = str(raw).strip()
    strict = _STRICT_REGEX.match(text)
    if strict:
        field = _FIELD_LOOKUP.get(strict.group("field").lower())
        direction = strict.group("direction").lower()
        if field and direction in (ASCENDING, DESCENDING):
            return SortSpec(field=field, direction=direction)

    # Best effort: first token naming a known field, ascending
    field = None
    for token in _TOKEN_REGEX.findall(text):
        field = _FIELD_LOOKUP.get(token.lower())
        if field:
            break

    logger.debug("Malformed sort spec", raw=text, recovered_field=field)
    return SortSpec(field=field, direction=ASCENDING, malformed=True)


def sort_value(word: StoredWord, field: str, normalizer: TextNormalizer) -> str:
    """String representation of a word's field used for ordering."""
    if field == "normalized":
        return normalizer.normalize(word.word)
    return _as_text(getattr(word, SORTABLE_FIELDS[field]))


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, (list, tuple)):
        # Sequences sort on their first element, like the relevance ranker
        return _as_text(value[0]) if value else ""
    if isinstance(value, StoredExample):
        return value.igbo
    return str(value)


def apply_sort(
    candidates: Sequence[Candidate],
    spec: SortSpec,
    normalizer: Optional[TextNormalizer] = None
) -> List[Candidate]:
    """
    Sort candidates lexicographically on the requested field.

    The sort is stable in both directions: words with equal keys keep
    their incoming order.
    """
    if spec.field is None:
        return list(candidates)

    normalizer = normalizer or TextNormalizer()
    return sorted(
        candidates,
        key=lambda candidate: sort_value(candidate.word, spec.field, normalizer),
        reverse=spec.descending
    )
