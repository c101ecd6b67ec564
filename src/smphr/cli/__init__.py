"""Command-line interface for smphr.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- Configurable image size
- Verbose/quiet output modes
- Warnings for skipped characters and truncated text
"""

from smphr.cli.app import app, cli, main

__all__ = ["app", "cli", "main"]
