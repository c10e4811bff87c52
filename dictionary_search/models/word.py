"""Stored document models read from the storage collaborator."""

from typing import List

from pydantic import BaseModel, ConfigDict, Field

WORD_CLASSES = frozenset({
    "noun",
    "verb",
    "adjective",
    "adverb",
    "pronoun",
    "preposition",
    "conjunction",
    "interjection",
    "number",
    "auxiliary verb",
    "phrase",
    "idiom",
    "affix",
    "prefix",
    "suffix",
})


class StoredExample(BaseModel):
    """Example sentence as persisted, storage-internal fields included."""
    
    id: str = Field(..., description="Example identifier")
    igbo: str = Field(default="", description="Source-language sentence")
    english: str = Field(default="", description="Translated sentence")
    associated_words: List[str] = Field(
        default_factory=list, alias="associatedWords", description="Cross-referenced word ids"
    )

    model_config = ConfigDict(populate_by_name=True, extra="allow", frozen=True)


class StoredWord(BaseModel):
    """Headword document as persisted, storage-internal fields included."""
    
    id: str = Field(..., description="Word identifier")
    word: str = Field(..., description="Primary surface form")
    word_class: str = Field(default="", alias="wordClass", description="Grammatical category")
    definitions: List[str] = Field(default_factory=list, description="Ordered translated meanings")
    variations: List[str] = Field(default_factory=list, description="Alternate surface forms")
    stems: List[str] = Field(default_factory=list, description="Root forms")
    examples: List[StoredExample] = Field(default_factory=list, description="Owned examples")

    model_config = ConfigDict(populate_by_name=True, extra="allow", frozen=True)

    @property
    def primary_definition(self) -> str:
        """First definition, or an empty string when there is none."""
        return self.definitions[0] if self.definitions else ""
