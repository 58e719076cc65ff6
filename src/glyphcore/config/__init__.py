"""Configuration management for glyphcore.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- ParsingConfig: Font decoding settings
- LoggingConfig: Logging settings
- GlyphcoreSettings: Main application settings
"""

from glyphcore.config.settings import (
    GlyphcoreSettings,
    LoggingConfig,
    ParsingConfig,
    get_default_settings,
)

__all__ = [
    "GlyphcoreSettings",
    "LoggingConfig",
    "ParsingConfig",
    "get_default_settings",
]
