"""Projection of stored words onto the public response contract."""

from typing import List, Optional, Sequence

from ..models.response import ExampleResponse, WordResponse
from ..models.word import StoredExample, StoredWord
from .normalizer import TextNormalizer


class ResultProjector:
    """Copies whitelisted fields only, so storage fields never leak out."""

    def __init__(self, normalizer: Optional[TextNormalizer] = None) -> None:
        self.normalizer = normalizer or TextNormalizer()

    def project_example(self, example: StoredExample) -> ExampleResponse:
        return ExampleResponse(
            igbo=example.igbo,
            english=example.english,
            associated_words=list(example.associated_words),
            id=example.id
        )

    def project_word(self, word: StoredWord) -> WordResponse:
        """
        Build the public view of a stored word.

        Args:
            word: Stored word, possibly carrying storage-internal fields

        Returns:
            WordResponse with ``normalized`` computed from ``word``
        """
        return WordResponse(
            variations=list(word.variations),
            definitions=list(word.definitions),
            stems=list(word.stems),
            examples=[self.project_example(example) for example in word.examples],
            id=word.id,
            normalized=self.normalizer.normalize(word.word),
            word=word.word,
            word_class=word.word_class
        )

    def project(self, words: Sequence[StoredWord]) -> List[WordResponse]:
        return [self.project_word(word) for word in words]
