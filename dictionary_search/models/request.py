"""Request models for API endpoints."""

from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class WordQuery(BaseModel):
    """Structured word search request handed to the engine.

    Pagination and sort values stay raw strings: the engine degrades
    malformed values instead of rejecting them.
    """
    
    keyword: Optional[str] = Field(None, description="Keyword in either language")
    is_english: Optional[bool] = Field(
        None, alias="isEnglish", description="Force matching against definitions"
    )
    page: Optional[Union[int, str]] = Field(None, description="1-indexed page number")
    range: Optional[str] = Field(None, description="Closed index interval, e.g. [10,19]")
    sort: Optional[str] = Field(None, description='Sort spec, e.g. ["word": "desc"]')

    model_config = ConfigDict(populate_by_name=True)

    @property
    def has_modifiers(self) -> bool:
        """Whether any of page, range or sort was supplied."""
        return any(value is not None for value in (self.page, self.range, self.sort))
