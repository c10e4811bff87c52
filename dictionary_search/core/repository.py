"""In-memory word store standing in for the persistent storage collaborator."""

import json
import threading
import time
from typing import Any, Dict, Iterable, List, Optional, Tuple

import structlog
from pydantic import ValidationError

from ..models.word import StoredWord, WORD_CLASSES
from .errors import UpstreamUnavailableError

logger = structlog.get_logger(__name__)


class WordRepository:
    """Read-mostly store of word documents with a write version counter."""

    def __init__(self) -> None:
        """Initialize an empty repository."""
        self._words: Tuple[StoredWord, ...] = ()
        self._by_id: Dict[str, StoredWord] = {}
        self._version = 0
        self._loaded = False
        self._lock = threading.Lock()
        self._stats = {
            "total_words": 0,
            "total_examples": 0,
            "unknown_word_classes": 0,
            "last_updated": None
        }

    @property
    def version(self) -> int:
        """Monotonic counter bumped on every write."""
        return self._version

    def load_documents(self, documents: Iterable[Dict[str, Any]]) -> int:
        """
        Replace the corpus with the given documents.

        Args:
            documents: Raw word documents, nested examples resolved

        Returns:
            Number of words loaded
        """
        words: List[StoredWord] = []
        for document in documents:
            try:
                words.append(StoredWord.model_validate(document))
            except ValidationError as e:
                raise ValueError(f"Invalid word document: {e}") from e

        with self._lock:
            self._words = tuple(words)
            self._by_id = {word.id: word for word in self._words}
            self._version += 1
            self._loaded = True
            self._stats = {
                "total_words": len(self._words),
                "total_examples": sum(len(word.examples) for word in self._words),
                "unknown_word_classes": sum(
                    1 for word in self._words if word.word_class not in WORD_CLASSES
                ),
                "last_updated": time.time()
            }

        logger.info("Corpus loaded", total_words=len(words), version=self._version)
        return len(words)

    def load_file(self, path: str) -> int:
        """Load the corpus from a JSON file holding a list of word documents."""
        with open(path, "r", encoding="utf-8") as f:
            documents = json.load(f)

        if not isinstance(documents, list):
            raise ValueError(f"Expected a list of word documents in {path}")

        return self.load_documents(documents)

    async def fetch_all(self) -> Tuple[StoredWord, ...]:
        """
        Read a snapshot of the whole corpus.

        The returned tuple is never mutated; a later write swaps in a
        new tuple, so callers keep a consistent view for one query.
        """
        with self._lock:
            if not self._loaded:
                raise UpstreamUnavailableError("Word corpus has not been loaded")
            return self._words

    def get(self, word_id: str) -> Optional[StoredWord]:
        """Get a stored word by id."""
        with self._lock:
            if not self._loaded:
                raise UpstreamUnavailableError("Word corpus has not been loaded")
            return self._by_id.get(word_id)

    def clear(self) -> None:
        """Remove every word; the store reports unavailable until reloaded."""
        with self._lock:
            self._words = ()
            self._by_id = {}
            self._version += 1
            self._loaded = False
            self._stats = {
                "total_words": 0,
                "total_examples": 0,
                "unknown_word_classes": 0,
                "last_updated": None
            }

    def get_stats(self) -> Dict[str, Any]:
        """Get repository statistics."""
        stats = self._stats.copy()
        stats["version"] = self._version
        return stats
