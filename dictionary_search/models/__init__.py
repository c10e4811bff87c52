"""Data models for the dictionary search service."""

from .response import (
    ExampleResponse,
    WordResponse,
    ErrorResponse,
    HealthResponse,
    MetricsResponse,
)
from .request import WordQuery
from .word import StoredExample, StoredWord, WORD_CLASSES

__all__ = [
    "ExampleResponse",
    "WordResponse",
    "ErrorResponse",
    "HealthResponse",
    "MetricsResponse",
    "WordQuery",
    "StoredExample",
    "StoredWord",
    "WORD_CLASSES",
]
