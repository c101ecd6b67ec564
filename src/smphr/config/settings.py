"""Configuration settings for Smphr."""

from pathlib import Path

from pydantic import BaseModel, Field

DEFAULT_WIDTH = 600
DEFAULT_HEIGHT = 400


class CanvasConfig(BaseModel):
    """Size of the rendered image."""

    width: int = Field(
        default=DEFAULT_WIDTH,
        ge=1,
        description="Image width in pixels",
    )
    height: int = Field(
        default=DEFAULT_HEIGHT,
        ge=1,
        description="Image height in pixels",
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


class SmphrSettings(BaseModel):
    """Main application settings."""

    canvas: CanvasConfig = Field(default_factory=CanvasConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> SmphrSettings:
    """Get default application settings."""
    return SmphrSettings()
