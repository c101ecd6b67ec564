"""Configuration management for smphr.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- CanvasConfig: Output image size
- LoggingConfig: Logging settings
- SmphrSettings: Main application settings
"""

from smphr.config.settings import (
    CanvasConfig,
    LoggingConfig,
    SmphrSettings,
    get_default_settings,
)

__all__ = [
    "CanvasConfig",
    "LoggingConfig",
    "SmphrSettings",
    "get_default_settings",
]
