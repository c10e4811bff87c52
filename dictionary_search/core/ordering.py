"""Final ordering of candidates before pagination."""

from functools import partial
from typing import Callable, List, Optional, Sequence

from .language import Query, TranslationQuery
from .matcher import Candidate
from .normalizer import TextNormalizer
from .ranker import RelevanceRanker
from .sorting import SortSpec, apply_sort

Orderer = Callable[[Sequence[Candidate]], List[Candidate]]


class ResultOrderer:
    """Applies the first applicable ordering out of a fixed chain.

    The chain is: explicit sort, then relevance ranking for translation
    queries, then the matcher's order. Every step is a stable sort over
    input already in scan order, so equal keys always fall back to the
    order the words were scanned in.
    """

    def __init__(
        self,
        ranker: Optional[RelevanceRanker] = None,
        normalizer: Optional[TextNormalizer] = None
    ) -> None:
        self.ranker = ranker or RelevanceRanker()
        self.normalizer = normalizer or TextNormalizer()

    def order(
        self,
        candidates: Sequence[Candidate],
        query: Optional[Query],
        sort_spec: SortSpec
    ) -> List[Candidate]:
        """
        Order candidates for one response.

        Args:
            candidates: Matched candidates in matcher order
            query: Classified keyword, or None when browsing
            sort_spec: Parsed sort request

        Returns:
            Fully ordered candidates
        """
        chain = self._chain(query, sort_spec)
        if chain:
            return chain[0](candidates)
        return list(candidates)

    def _chain(self, query: Optional[Query], sort_spec: SortSpec) -> List[Orderer]:
        chain: List[Orderer] = []
        if sort_spec.field is not None:
            chain.append(partial(self._explicit_sort, sort_spec=sort_spec))
        if isinstance(query, TranslationQuery):
            chain.append(partial(self.ranker.rank, query.pattern.raw.strip()))
        return chain

    def _explicit_sort(self, candidates: Sequence[Candidate], sort_spec: SortSpec) -> List[Candidate]:
        in_scan_order = sorted(candidates, key=lambda candidate: candidate.position)
        return apply_sort(in_scan_order, sort_spec, self.normalizer)
