"""Application configuration."""

from calendar_parser.config.settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
