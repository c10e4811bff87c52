"""Unit tests for candidate matching."""

import pytest

from dictionary_search.core.language import SourceQuery, TranslationQuery
from dictionary_search.core.matcher import CandidateMatcher, MatchChannel
from dictionary_search.core.normalizer import PatternBuilder


class TestCandidateMatcher:
    """Test cases for the CandidateMatcher class."""
    
    @pytest.fixture
    def matcher(self):
        return CandidateMatcher()
    
    @pytest.fixture
    def builder(self):
        return PatternBuilder()
    
    def test_exact_matches_come_before_substrings(self, matcher, builder, sample_words):
        candidates = matcher.match(SourceQuery(builder.build("akikà")), sample_words)
        
        assert [c.word.word for c in candidates] == ["akịka", "akịkà", "akịkàrị"]
        assert [c.channel for c in candidates] == [
            MatchChannel.EXACT, MatchChannel.EXACT, MatchChannel.PATTERN
        ]
    
    def test_variation_match_records_variation(self, matcher, builder, sample_words):
        candidates = matcher.match(SourceQuery(builder.build("mili")), sample_words)
        
        assert [c.word.word for c in candidates] == ["mmiri", "mmiri ozuzo"]
        assert [c.matched_variation for c in candidates] == ["mili", "mili ozuzo"]
    
    def test_headword_and_variation_hits(self, matcher, builder, sample_words):
        candidates = matcher.match(SourceQuery(builder.build("-mu-mù")), sample_words)
        
        assert len(candidates) == 2
        assert candidates[0].word.word == "-mụ-mù"
        assert candidates[0].channel == MatchChannel.EXACT
        assert candidates[1].word.variations == ["-mu-mù"]
        assert candidates[1].matched_variation == "-mu-mù"
    
    def test_stem_channel(self, matcher, builder, make_word):
        words = [
            make_word("w1", "erimeri", stems=["rie"]),
            make_word("w2", "rie"),
            make_word("w3", "nri", variations=["riri"]),
        ]
        
        candidates = matcher.match(SourceQuery(builder.build("rie")), words)
        
        assert [c.word.id for c in candidates] == ["w2", "w1"]
        assert candidates[1].channel == MatchChannel.STEM
    
    def test_translation_query_uses_definitions_only(self, matcher, builder, sample_words):
        candidates = matcher.match(TranslationQuery(builder.build("water")), sample_words)
        
        assert [c.word.word for c in candidates] == ["mmiri", "mmiri ozuzo", "osimiri", "iyi"]
        assert all(c.channel == MatchChannel.DEFINITION for c in candidates)
    
    def test_exact_translation(self, matcher, builder, sample_words):
        candidates = matcher.match(TranslationQuery(builder.build("animal; meat")), sample_words)
        
        assert [c.word.word for c in candidates] == ["anụ"]
    
    def test_matches_any_definition(self, matcher, builder, sample_words):
        candidates = matcher.match(TranslationQuery(builder.build("friend")), sample_words)
        
        assert [c.word.word for c in candidates] == ["enyi"]
    
    def test_duplicate_ids_appear_once(self, matcher, builder, make_word):
        words = [
            make_word("w1", "bịa", definitions=["come"]),
            make_word("w1", "bịa", definitions=["come"]),
            make_word("w2", "bịaruo"),
        ]
        
        candidates = matcher.match(SourceQuery(builder.build("bia")), words)
        
        assert [c.word.id for c in candidates] == ["w1", "w2"]
    
    def test_no_match(self, matcher, builder, sample_words):
        assert matcher.match(SourceQuery(builder.build("zzzz")), sample_words) == []
        assert matcher.match(TranslationQuery(builder.build("zzzz")), sample_words) == []
    
    def test_tolerates_unknown_word_class(self, matcher, builder, make_word):
        words = [make_word("w1", "bịa", word_class="n.")]
        
        candidates = matcher.match(SourceQuery(builder.build("bia")), words)
        
        assert len(candidates) == 1
    
    def test_all_words_keeps_natural_order(self, matcher, sample_words):
        candidates = matcher.all_words(sample_words + sample_words[:2])
        
        assert [c.word.id for c in candidates] == [w.id for w in sample_words]
        assert [c.position for c in candidates] == list(range(len(sample_words)))
