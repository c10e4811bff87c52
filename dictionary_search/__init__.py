"""
Dictionary Search - bilingual Igbo/English headword search engine.

Given a keyword in either language, returns matching headword entries
ranked and paginated deterministically, with accent-insensitive matching
of headwords and variations and similarity ranking of English queries.
"""

__version__ = "1.0.0"

from .core.engine import SearchEngine
from .core.repository import WordRepository
from .models.request import WordQuery
from .models.response import ExampleResponse, WordResponse

__all__ = [
    "SearchEngine",
    "WordRepository",
    "WordQuery",
    "ExampleResponse",
    "WordResponse",
]
