"""Configuration module for SeriesIndex."""

from .settings import DatabaseSettings, LoggingSettings, Settings, get_settings

__all__ = ["Settings", "DatabaseSettings", "LoggingSettings", "get_settings"]
