"""Configuration settings for glyphcore."""

from pathlib import Path

from pydantic import BaseModel, Field, field_validator


class ParsingConfig(BaseModel):
    """Configuration for font decoding."""

    normalize_contours: bool = Field(
        default=True,
        description="Insert implied points so on/off-curve points alternate",
    )
    cmap_preferences: list[tuple[int, int]] = Field(
        default_factory=lambda: [(3, 1), (0, 3)],
        min_length=1,
        description="cmap (platform, encoding) pairs to accept, most preferred first",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )

    @field_validator("log_level", "file_log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"unknown log level: {value}")
        return level


class GlyphcoreSettings(BaseModel):
    """Main application settings."""

    parsing: ParsingConfig = Field(default_factory=ParsingConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> GlyphcoreSettings:
    """Get default application settings."""
    return GlyphcoreSettings()
