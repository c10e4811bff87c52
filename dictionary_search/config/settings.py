"""Application settings and configuration management."""

import os
from functools import lru_cache
from typing import List

from pydantic import Field, ConfigDict
from pydantic_settings import BaseSettings

DEFAULT_DATA_FILE = os.path.join(
    os.path.dirname(os.path.dirname(__file__)), "data", "sample_words.json"
)


class Settings(BaseSettings):
    """Application settings with environment variable support."""
    
    # Application
    app_name: str = Field(default="Dictionary Search")
    app_version: str = Field(default="1.0.0")
    debug: bool = Field(default=False)
    
    # Server
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8000)
    workers: int = Field(default=1)
    
    # Search Configuration
    min_keyword_length: int = Field(default=3)
    max_query_length: int = Field(default=100)
    
    # Cache Configuration
    enable_cache: bool = Field(default=True)
    cache_max_size: int = Field(default=1024)
    
    # Storage
    data_file: str = Field(default=DEFAULT_DATA_FILE)
    
    # Logging
    log_level: str = Field(default="INFO")
    log_format: str = Field(default="json")
    
    # CORS
    cors_origins: List[str] = Field(
        default=["http://localhost:3000", "http://localhost:8080", "http://localhost:8000"]
    )
    
    model_config = ConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


@lru_cache()
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()
