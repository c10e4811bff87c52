"""Configuration management for the dictionary search service."""

from .settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
