"""Candidate matching of stored words against a classified keyword."""

from dataclasses import dataclass
from enum import IntEnum
from typing import List, Optional, Sequence

from ..models.word import StoredWord
from .language import Query, TranslationQuery
from .normalizer import KeywordPattern


class MatchChannel(IntEnum):
    """How a word matched, in precedence order (lower wins)."""

    CORPUS = 0
    EXACT = 1
    PATTERN = 2
    STEM = 3
    DEFINITION = 4


@dataclass(frozen=True)
class Candidate:
    """A stored word that survived matching."""

    word: StoredWord
    position: int
    channel: MatchChannel
    matched_variation: Optional[str] = None
    score: float = 0.0


class CandidateMatcher:
    """Scans the corpus and keeps the words that match a query."""

    def match(self, query: Query, words: Sequence[StoredWord]) -> List[Candidate]:
        """
        Find every word matching the query.

        Source queries try the headword exactly, then the headword and
        variations as accent-insensitive substrings, then the stems.
        Translation queries look only at the definitions. A word appears
        at most once, through its highest-precedence channel.

        Args:
            query: Classified keyword
            words: Corpus snapshot in natural order

        Returns:
            Candidates ordered by channel precedence, then corpus order
        """
        if isinstance(query, TranslationQuery):
            classify = self._match_definitions
        else:
            classify = self._match_source

        candidates = []
        seen = set()
        for position, word in enumerate(words):
            if word.id in seen:
                continue
            candidate = classify(query.pattern, word, position)
            if candidate is not None:
                seen.add(word.id)
                candidates.append(candidate)

        candidates.sort(key=lambda candidate: (candidate.channel, candidate.position))
        return candidates

    def all_words(self, words: Sequence[StoredWord]) -> List[Candidate]:
        """Every word of the corpus, deduplicated by id, in natural order."""
        candidates = []
        seen = set()
        for position, word in enumerate(words):
            if word.id in seen:
                continue
            seen.add(word.id)
            candidates.append(Candidate(word=word, position=position, channel=MatchChannel.CORPUS))
        return candidates

    def _match_source(
        self, pattern: KeywordPattern, word: StoredWord, position: int
    ) -> Optional[Candidate]:
        if pattern.equals(word.word):
            return Candidate(word=word, position=position, channel=MatchChannel.EXACT)

        if pattern.search(word.word):
            return Candidate(word=word, position=position, channel=MatchChannel.PATTERN)

        for variation in word.variations:
            if pattern.search(variation):
                return Candidate(
                    word=word,
                    position=position,
                    channel=MatchChannel.PATTERN,
                    matched_variation=variation
                )

        if any(pattern.equals(stem) for stem in word.stems):
            return Candidate(word=word, position=position, channel=MatchChannel.STEM)

        return None

    def _match_definitions(
        self, pattern: KeywordPattern, word: StoredWord, position: int
    ) -> Optional[Candidate]:
        # Exact and substring hits share the channel; the ranker orders them
        if any(pattern.search(definition) for definition in word.definitions):
            return Candidate(word=word, position=position, channel=MatchChannel.DEFINITION)
        return None

