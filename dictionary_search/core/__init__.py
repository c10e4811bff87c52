"""Core dictionary search functionality."""

from .engine import SearchEngine
from .errors import (
    DictionarySearchError,
    InvalidRequestError,
    UpstreamUnavailableError,
    WordNotFoundError,
)
from .matcher import CandidateMatcher
from .normalizer import PatternBuilder, TextNormalizer
from .ranker import RelevanceRanker
from .repository import WordRepository

__all__ = [
    "SearchEngine",
    "DictionarySearchError",
    "InvalidRequestError",
    "UpstreamUnavailableError",
    "WordNotFoundError",
    "CandidateMatcher",
    "PatternBuilder",
    "TextNormalizer",
    "RelevanceRanker",
    "WordRepository",
]
