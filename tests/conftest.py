"""Shared fixtures for the dictionary search tests."""

import json

import pytest

from dictionary_search.config.settings import DEFAULT_DATA_FILE
from dictionary_search.models.word import StoredExample, StoredWord


@pytest.fixture
def sample_documents():
    """Raw word documents from the packaged seed corpus."""
    with open(DEFAULT_DATA_FILE, "r", encoding="utf-8") as f:
        return json.load(f)


@pytest.fixture
def sample_words(sample_documents):
    """Seed corpus validated into stored words, in natural order."""
    return [StoredWord.model_validate(document) for document in sample_documents]


@pytest.fixture
def make_word():
    """Factory for small hand-built corpora."""
    def _make(word_id, word, definitions=None, variations=None, stems=None,
              word_class="noun", examples=None):
        return StoredWord(
            id=word_id,
            word=word,
            word_class=word_class,
            definitions=definitions or [],
            variations=variations or [],
            stems=stems or [],
            examples=[StoredExample(**example) for example in examples or []]
        )
    return _make
