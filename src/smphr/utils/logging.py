"""Logging utilities for Smphr."""

import logging
import sys
from dataclasses import dataclass, field
from pathlib import Path

import structlog


@dataclass
class RenderStats:
    """Statistics from a render pass."""

    drawn_count: int = 0
    blank_count: int = 0
    skipped_count: int = 0
    skipped_chars: list[str] = field(default_factory=list)
    truncated: bool = False
    start_time: float | None = None
    end_time: float | None = None

    @property
    def duration_seconds(self) -> float:
        """Calculate render duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "INFO",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        root_logger.addHandler(file_handler)

    if not quiet:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(getattr(logging, console_level.upper()))
        console_handler.setFormatter(logging.Formatter("%(message)s"))
        root_logger.addHandler(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("smphr")
    logger.info(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


def _default_logger() -> structlog.stdlib.BoundLogger:
    """Return the configured logger, or a stderr logger limited to warnings."""
    if structlog.is_configured():
        return structlog.get_logger("smphr")
    return structlog.wrap_logger(
        structlog.PrintLogger(file=sys.stderr),
        wrapper_class=structlog.make_filtering_bound_logger(logging.WARNING),
    )


class RenderLogger:
    """Logger for tracking render progress and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None) -> None:
        if logger is None:
            logger = _default_logger()
        self._logger = logger
        self._stats = RenderStats()

    def log_render_start(self, width: int, height: int, length: int) -> None:
        """Log start of a render pass."""
        self._logger.debug("Rendering text", width=width, height=height, length=length)

    def log_figure_drawn(self, char: str, x: int, y: int) -> None:
        """Log a figure drawn on the canvas."""
        self._logger.debug("Figure drawn", char=char, x=x, y=y)
        self._stats.drawn_count += 1

    def log_blank_figure(self, char: str, x: int, y: int) -> None:
        """Log a space or newline taking up a cell."""
        self._logger.debug("Blank cell", char=char, x=x, y=y)
        self._stats.blank_count += 1

    def log_char_skipped(self, char: str, reason: str) -> None:
        """Log a character that produced no figure."""
        self._logger.warning("Character skipped", char=char, reason=reason)
        self._stats.skipped_count += 1
        self._stats.skipped_chars.append(char)

    def log_unknown_figure(self, char: str) -> None:
        """Log a figure of unknown kind."""
        self._logger.warning("Unknown figure", char=char)

    def log_vertical_overflow(self, remaining: int) -> None:
        """Log the end of a render pass cut short by the canvas height."""
        self._logger.warning(
            "Vertical overflow, input text truncated", remaining_chars=remaining
        )
        self._stats.truncated = True

    @property
    def stats(self) -> RenderStats:
        """Get current render statistics."""
        return self._stats
