"""Utility functions for smphr.

This module provides utility functions including:

- Logging setup and configuration
- Render statistics collection
"""

from smphr.utils.logging import (
    RenderLogger,
    RenderStats,
    configure_logging,
)

__all__ = [
    "RenderLogger",
    "RenderStats",
    "configure_logging",
]
