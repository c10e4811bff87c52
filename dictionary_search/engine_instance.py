"""Global repository and search engine instances to avoid circular imports."""

from .core.engine import SearchEngine
from .core.repository import WordRepository
from .config import get_settings

# Global instances
settings = get_settings()
word_repository = WordRepository()
search_engine = SearchEngine(
    word_repository,
    min_keyword_length=settings.min_keyword_length,
    max_query_length=settings.max_query_length,
    enable_cache=settings.enable_cache,
    cache_max_size=settings.cache_max_size
)
