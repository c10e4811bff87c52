"""Exceptions raised by the search core and its storage collaborator."""


class DictionarySearchError(Exception):
    """Base class for dictionary search errors."""


class InvalidRequestError(DictionarySearchError):
    """The request carries no usable query mode."""


class WordNotFoundError(DictionarySearchError):
    """No stored word has the requested identifier."""

    def __init__(self, word_id: str) -> None:
        super().__init__(f"Word '{word_id}' not found")
        self.word_id = word_id


class UpstreamUnavailableError(DictionarySearchError):
    """The storage collaborator could not produce the corpus."""
