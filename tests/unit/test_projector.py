"""Unit tests for the result projector."""

import pytest

from dictionary_search.core.projector import ResultProjector
from dictionary_search.models.word import StoredWord

WORD_KEYS = {"variations", "definitions", "stems", "examples", "id", "normalized", "word", "wordClass"}
EXAMPLE_KEYS = {"igbo", "english", "associatedWords", "id"}
EXCLUDE_KEYS = {"__v", "_id"}


class TestResultProjector:
    """Test cases for the ResultProjector class."""
    
    @pytest.fixture
    def projector(self):
        return ResultProjector()
    
    @pytest.fixture
    def stored_word(self):
        return StoredWord.model_validate({
            "_id": "abc",
            "__v": 3,
            "id": "abc",
            "word": "Anụ",
            "wordClass": "noun",
            "definitions": ["animal; meat"],
            "variations": ["anu"],
            "stems": [],
            "internalNote": "do not publish",
            "examples": [{
                "_id": "ex1",
                "__v": 0,
                "id": "ex1",
                "igbo": "Anụ a dị ụtọ.",
                "english": "This meat is tasty.",
                "associatedWords": ["abc"],
                "reviewedBy": "editor"
            }]
        })
    
    def test_exact_field_whitelist(self, projector, stored_word):
        payload = projector.project_word(stored_word).model_dump(by_alias=True)
        
        assert set(payload.keys()) == WORD_KEYS
        assert not set(payload.keys()) & EXCLUDE_KEYS
        for example in payload["examples"]:
            assert set(example.keys()) == EXAMPLE_KEYS
            assert not set(example.keys()) & EXCLUDE_KEYS
    
    def test_normalized_is_derived(self, projector, stored_word):
        projected = projector.project_word(stored_word)
        
        assert projected.word == "Anụ"
        assert projected.normalized == "anu"
    
    def test_values_copied(self, projector, stored_word):
        payload = projector.project_word(stored_word).model_dump(by_alias=True)
        
        assert payload["id"] == "abc"
        assert payload["wordClass"] == "noun"
        assert payload["definitions"] == ["animal; meat"]
        assert payload["examples"][0]["associatedWords"] == ["abc"]
    
    def test_sample_corpus(self, projector, sample_words):
        for projected in projector.project(sample_words):
            payload = projected.model_dump(by_alias=True)
            assert set(payload.keys()) == WORD_KEYS
            assert all(set(example.keys()) == EXAMPLE_KEYS for example in payload["examples"])
