"""Main dictionary search engine implementation."""

import time
from typing import Any, Dict, List, Optional, Sequence, Tuple

import structlog

from ..models.request import WordQuery
from ..models.response import WordResponse
from ..models.word import StoredWord
from .cache import CacheKey, QueryCache
from .errors import InvalidRequestError, WordNotFoundError
from .language import Query, SourceQuery, TranslationQuery, classify
from .matcher import Candidate, CandidateMatcher
from .normalizer import PatternBuilder, TextNormalizer
from .ordering import ResultOrderer
from .pagination import SliceSpec, parse_pagination
from .projector import ResultProjector
from .repository import WordRepository
from .sorting import SortSpec, parse_sort

logger = structlog.get_logger(__name__)


class SearchEngine:
    """Matches, orders, paginates and projects dictionary words."""

    def __init__(
        self,
        repository: WordRepository,
        min_keyword_length: int = 3,
        max_query_length: int = 100,
        enable_cache: bool = True,
        cache_max_size: int = 1024
    ) -> None:
        """
        Initialize the search engine.

        Args:
            repository: Storage collaborator the corpus is read from
            min_keyword_length: Keywords shorter than this match nothing
            max_query_length: Longer keywords are rejected
            enable_cache: Whether to cache projected pages
            cache_max_size: Maximum number of cached pages
        """
        self.repository = repository
        self.min_keyword_length = min_keyword_length
        self.max_query_length = max_query_length
        self.normalizer = TextNormalizer()
        self.pattern_builder = PatternBuilder(self.normalizer)
        self.matcher = CandidateMatcher()
        self.orderer = ResultOrderer(normalizer=self.normalizer)
        self.projector = ResultProjector(self.normalizer)
        self.cache = QueryCache(cache_max_size) if enable_cache else None

        self._stats = self._empty_stats()

    async def search(self, request: WordQuery) -> List[WordResponse]:
        """
        Search the corpus for one request.

        Args:
            request: Structured query from the request handler

        Returns:
            One page of projected words, possibly empty

        Raises:
            InvalidRequestError: If the request has no usable query mode
            UpstreamUnavailableError: If the corpus cannot be read
        """
        start_time = time.time()
        keyword = self._validate_keyword(request)
        sort_spec = parse_sort(request.sort)
        slice_spec = parse_pagination(request.page, request.range)

        self._stats["total_queries"] += 1

        cache_key = self._cache_key(keyword, request.is_english, sort_spec, slice_spec)
        if self.cache is not None:
            cached = self.cache.get(cache_key, self.repository.version)
            if cached is not None:
                self._stats["cache_hits"] += 1
                self._stats["total_execution_time"] += (time.time() - start_time) * 1000
                logger.debug("Served word search from cache", keyword=keyword)
                return cached
            self._stats["cache_misses"] += 1

        version = self.repository.version
        words = await self.repository.fetch_all()
        results = self.search_corpus(words, keyword, request.is_english, sort_spec, slice_spec)

        if self.cache is not None:
            self.cache.put(cache_key, version, results)

        execution_time = (time.time() - start_time) * 1000
        self._stats["total_execution_time"] += execution_time
        logger.info(
            "Word search completed",
            keyword=keyword,
            page_mode=slice_spec.mode,
            sort_field=sort_spec.field,
            returned=len(results),
            execution_time_ms=round(execution_time, 3)
        )
        return results

    def search_corpus(
        self,
        words: Sequence[StoredWord],
        keyword: Optional[str],
        is_english: Optional[bool] = None,
        sort_spec: Optional[SortSpec] = None,
        slice_spec: Optional[SliceSpec] = None
    ) -> List[WordResponse]:
        """
        Run a query against an already fetched corpus snapshot.

        Args:
            words: Corpus snapshot in natural order
            keyword: Validated keyword, or None to browse the whole corpus
            is_english: Force the translation strategy
            sort_spec: Parsed sort (natural order when None)
            slice_spec: Parsed pagination (first page when None)

        Returns:
            One page of projected words
        """
        sort_spec = sort_spec or parse_sort(None)
        slice_spec = slice_spec or parse_pagination()

        query, candidates = self._match(words, keyword, is_english)

        if not candidates:
            self._stats["no_matches"] += 1
            return []

        if isinstance(query, TranslationQuery):
            self._stats["translation_matches"] += 1
        elif isinstance(query, SourceQuery):
            self._stats["source_matches"] += 1

        ordered = self.orderer.order(candidates, query, sort_spec)
        page = slice_spec.apply(ordered)
        return self.projector.project([candidate.word for candidate in page])

    async def get_word(self, word_id: str) -> WordResponse:
        """
        Get one projected word by id.

        Raises:
            WordNotFoundError: If no stored word has this id
            UpstreamUnavailableError: If the corpus cannot be read
        """
        word = self.repository.get(word_id)
        if word is None:
            raise WordNotFoundError(word_id)
        return self.projector.project_word(word)

    def _validate_keyword(self, request: WordQuery) -> Optional[str]:
        if request.keyword is None:
            return None

        keyword = request.keyword.strip()
        if not keyword:
            if request.has_modifiers:
                return None
            raise InvalidRequestError("A keyword, page, range or sort is required")

        if len(keyword) > self.max_query_length:
            raise InvalidRequestError(
                f"Keyword too long. Maximum length is {self.max_query_length} characters"
            )

        return keyword

    def _match(
        self,
        words: Sequence[StoredWord],
        keyword: Optional[str],
        is_english: Optional[bool]
    ) -> Tuple[Optional[Query], List[Candidate]]:
        if keyword is None:
            return None, self.matcher.all_words(words)

        pattern = self.pattern_builder.build(keyword)
        if len(pattern.normalized) < self.min_keyword_length:
            logger.debug("Keyword below minimum length", keyword=keyword)
            return None, []

        query = classify(pattern, is_english)
        candidates = self.matcher.match(query, words)

        # Plain English keywords can pass for source words; retry on definitions
        if not candidates and isinstance(query, SourceQuery):
            query = TranslationQuery(pattern)
            candidates = self.matcher.match(query, words)

        return query, candidates

    def _cache_key(
        self,
        keyword: Optional[str],
        is_english: Optional[bool],
        sort_spec: SortSpec,
        slice_spec: SliceSpec
    ) -> CacheKey:
        normalized = None if keyword is None else self.normalizer.normalize(keyword)
        # Ranking compares the raw keyword, so it is part of the key as well
        return (normalized, keyword, bool(is_english), sort_spec.cache_key, slice_spec.cache_key)

    def get_stats(self) -> Dict[str, Any]:
        """Get engine statistics."""
        stats = self._stats.copy()

        if stats["total_queries"] > 0:
            stats["average_execution_time_ms"] = (
                stats["total_execution_time"] / stats["total_queries"]
            )
            stats["source_match_rate"] = stats["source_matches"] / stats["total_queries"]
            stats["translation_match_rate"] = stats["translation_matches"] / stats["total_queries"]
            stats["no_match_rate"] = stats["no_matches"] / stats["total_queries"]
        else:
            stats["average_execution_time_ms"] = 0.0
            stats["source_match_rate"] = 0.0
            stats["translation_match_rate"] = 0.0
            stats["no_match_rate"] = 0.0

        lookups = stats["cache_hits"] + stats["cache_misses"]
        stats["cache_hit_rate"] = stats["cache_hits"] / lookups if lookups else 0.0

        stats["repository_stats"] = self.repository.get_stats()

        return stats

    def reset_stats(self) -> None:
        """Reset statistics and drop cached pages."""
        self._stats = self._empty_stats()
        if self.cache is not None:
            self.cache.clear()

    @staticmethod
    def _empty_stats() -> Dict[str, Any]:
        return {
            "total_queries": 0,
            "source_matches": 0,
            "translation_matches": 0,
            "no_matches": 0,
            "total_execution_time": 0.0,
            "cache_hits": 0,
            "cache_misses": 0
        }
