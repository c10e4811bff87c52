"""Response models for API endpoints."""

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class ExampleResponse(BaseModel):
    """Public view of an example sentence."""
    
    igbo: str = Field(..., description="Source-language sentence")
    english: str = Field(..., description="Translated sentence")
    associated_words: List[str] = Field(
        ..., alias="associatedWords", description="Cross-referenced word ids"
    )
    id: str = Field(..., description="Example identifier")

    model_config = ConfigDict(populate_by_name=True, extra="forbid", frozen=True)


class WordResponse(BaseModel):
    """Public view of a headword entry."""
    
    variations: List[str] = Field(..., description="Alternate surface forms")
    definitions: List[str] = Field(..., description="Ordered translated meanings")
    stems: List[str] = Field(..., description="Root forms")
    examples: List[ExampleResponse] = Field(..., description="Example sentences")
    id: str = Field(..., description="Word identifier")
    normalized: str = Field(..., description="Accent-stripped, case-folded word")
    word: str = Field(..., description="Primary surface form")
    word_class: str = Field(..., alias="wordClass", description="Grammatical category")

    model_config = ConfigDict(populate_by_name=True, extra="forbid", frozen=True)


class ErrorResponse(BaseModel):
    """Error response model."""
    
    error: str = Field(..., description="Error type")
    message: str = Field(..., description="Error message")
    details: Optional[Dict[str, Any]] = Field(None, description="Additional error details")
    timestamp: datetime = Field(default_factory=datetime.utcnow, description="Error timestamp")


class HealthResponse(BaseModel):
    """Health check response."""
    
    status: str = Field(..., description="Service status")
    version: str = Field(..., description="Application version")
    uptime: float = Field(..., description="Service uptime in seconds")
    timestamp: datetime = Field(default_factory=datetime.utcnow, description="Check timestamp")
    dependencies: Dict[str, str] = Field(..., description="Dependency status")


class MetricsResponse(BaseModel):
    """Query metrics response."""
    
    total_queries: int = Field(..., description="Total queries processed")
    source_matches: int = Field(..., description="Queries answered from headwords")
    translation_matches: int = Field(..., description="Queries answered from definitions")
    no_matches: int = Field(..., description="Queries with an empty result")
    average_response_time_ms: float = Field(..., description="Average response time")
    cache_hit_rate: float = Field(..., description="Cache hit rate")
    corpus_size: int = Field(..., description="Number of stored words")
    memory_usage_mb: float = Field(..., description="Process memory usage in MB")
    timestamp: datetime = Field(default_factory=datetime.utcnow, description="Metrics timestamp")
