"""Unit tests for relevance ranking and the ordering chain."""

import pytest

from dictionary_search.core.language import SourceQuery, TranslationQuery
from dictionary_search.core.matcher import CandidateMatcher
from dictionary_search.core.normalizer import PatternBuilder
from dictionary_search.core.ordering import ResultOrderer
from dictionary_search.core.ranker import RelevanceRanker
from dictionary_search.core.sorting import parse_sort


class TestRelevanceRanker:
    """Test cases for the RelevanceRanker class."""
    
    @pytest.fixture
    def ranker(self):
        return RelevanceRanker()
    
    def test_score_range(self, ranker):
        assert ranker.score("water", "water") == 1.0
        assert ranker.score("water", "WATER") == 1.0
        assert ranker.score("water", "") == 0.0
        assert 0.0 < ranker.score("water", "rain water") < 1.0
    
    def test_rank_descending(self, ranker, sample_words):
        candidates = CandidateMatcher().match(
            TranslationQuery(PatternBuilder().build("water")), sample_words
        )
        
        ranked = ranker.rank("water", candidates)
        
        assert ranked[0].word.word == "mmiri"
        scores = [c.score for c in ranked]
        assert scores == sorted(scores, reverse=True)
    
    def test_missing_definition_scores_zero(self, ranker, make_word):
        candidates = CandidateMatcher().all_words([make_word("w1", "nri")])
        
        ranked = ranker.rank("food", candidates)
        
        assert ranked[0].score == 0.0
    
    def test_ties_keep_input_order(self, ranker, make_word):
        words = [
            make_word("w1", "a", definitions=["water"]),
            make_word("w2", "b", definitions=["water"]),
            make_word("w3", "c", definitions=["water"]),
        ]
        candidates = CandidateMatcher().all_words(words)
        
        first = ranker.rank("water", candidates)
        second = ranker.rank("water", candidates)
        
        assert [c.word.id for c in first] == ["w1", "w2", "w3"]
        assert [c.word.id for c in second] == ["w1", "w2", "w3"]


class TestResultOrderer:
    """Test cases for the ordering precedence chain."""
    
    @pytest.fixture
    def orderer(self):
        return ResultOrderer()
    
    @pytest.fixture
    def water_query(self):
        return TranslationQuery(PatternBuilder().build("water"))
    
    def test_translation_queries_are_ranked(self, orderer, water_query, sample_words):
        candidates = CandidateMatcher().match(water_query, sample_words)
        
        ordered = orderer.order(candidates, water_query, parse_sort(None))
        
        assert [c.word.word for c in ordered][:2] == ["mmiri", "mmiri ozuzo"]
    
    def test_explicit_sort_replaces_ranking(self, orderer, water_query, sample_words):
        candidates = CandidateMatcher().match(water_query, sample_words)
        
        ordered = orderer.order(candidates, water_query, parse_sort('["word": "asc"]'))
        
        assert [c.word.word for c in ordered] == ["iyi", "mmiri", "mmiri ozuzo", "osimiri"]
    
    def test_source_queries_keep_matcher_order(self, orderer, sample_words):
        query = SourceQuery(PatternBuilder().build("anu"))
        candidates = CandidateMatcher().match(query, sample_words)
        
        ordered = orderer.order(candidates, query, parse_sort(None))
        
        assert ordered == candidates
        assert ordered[0].word.word == "anụ"
    
    def test_explicit_sort_ties_fall_back_to_scan_order(self, orderer, make_word):
        words = [
            make_word("w1", "ụlọ", word_class="noun"),
            make_word("w2", "bịa", word_class="verb"),
            make_word("w3", "nne", word_class="noun"),
        ]
        candidates = CandidateMatcher().all_words(words)
        
        ordered = orderer.order(candidates, None, parse_sort('["wordClass": "desc"]'))
        
        assert [c.word.id for c in ordered] == ["w2", "w1", "w3"]
