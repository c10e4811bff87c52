"""Relevance ranking for translation-language queries."""

from dataclasses import replace
from typing import List, Sequence

from rapidfuzz import fuzz

from .matcher import Candidate


class RelevanceRanker:
    """Orders candidates by similarity of their primary definition to the query."""

    def score(self, query: str, gloss: str) -> float:
        """
        Similarity between the query and a gloss.

        Args:
            query: Keyword as typed
            gloss: Primary definition ("" when the word has none)

        Returns:
            Normalized similarity score between 0 and 1
        """
        if not query or not gloss:
            return 0.0
        return fuzz.ratio(query.lower(), gloss.lower()) / 100.0

    def rank(self, query: str, candidates: Sequence[Candidate]) -> List[Candidate]:
        """
        Rank candidates by descending similarity.

        Equal scores keep their input order, so repeated calls on the
        same input always produce the same ranking.
        """
        scored = [
            replace(candidate, score=self.score(query, candidate.word.primary_definition))
            for candidate in candidates
        ]
        return sorted(scored, key=lambda candidate: -candidate.score)
