"""Render driver turning a text into a canvas of semaphore figures.

Key components:
- validate_text: Reject inputs that cannot produce any figure
- render_text: Lay out and draw every figure of a text
- RenderResult: Canvas plus what happened during the pass
"""

import time
from dataclasses import dataclass, field

from smphr.core.figure import Figure, FigureKind, first_figure, next_figure
from smphr.domain import Canvas, Point
from smphr.exceptions import (
    InvalidCharacterError,
    InvalidDataError,
    NoDataError,
    VerticalOverflowError,
)
from smphr.utils import RenderLogger, RenderStats


@dataclass
class RenderResult:
    """Outcome of a render pass.

    Attributes:
        canvas: The rendered buffer, complete or partially drawn
        figures: Figures placed on the canvas, blank ones included
        stats: Counters collected during the pass
    """

    canvas: Canvas
    figures: list[Figure] = field(default_factory=list)
    stats: RenderStats = field(default_factory=RenderStats)

    @property
    def truncated(self) -> bool:
        """Whether the text did not fit and was cut."""
        return self.stats.truncated

    @property
    def skipped_chars(self) -> list[str]:
        """Characters that produced no figure."""
        return self.stats.skipped_chars

    @property
    def anchors(self) -> list[Point]:
        """Anchors of all placed figures, in text order."""
        return [figure.anchor for figure in self.figures]


def validate_text(text: str) -> None:
    """Check that a text can be rendered.

    Raises:
        NoDataError: If the text is empty
        InvalidDataError: If no character of the text is alphanumeric
    """
    if not text:
        raise NoDataError()
    if not any(char.isascii() and char.isalnum() for char in text):
        raise InvalidDataError()


def _place(
    figure: Figure, char: str, canvas: Canvas, render_logger: RenderLogger
) -> None:
    x, y = figure.anchor.to_tuple()
    if not figure.draw(canvas):
        render_logger.log_unknown_figure(char)
    elif figure.kind is FigureKind.CHARACTER:
        render_logger.log_figure_drawn(char, x, y)
    else:
        render_logger.log_blank_figure(char, x, y)


def render_text(
    width: int,
    height: int,
    text: str,
    render_logger: RenderLogger | None = None,
) -> RenderResult:
    """Render a text as semaphore figures on a new canvas.

    The first letter or digit is drawn in the top-left cell; characters
    before it produce nothing. Each following character goes into the next
    cell. Characters without a figure are reported and take no cell. When
    the next row would fall below the canvas, the rest of the text is
    dropped and the partially drawn canvas is returned.

    Args:
        width: Canvas width in pixels
        height: Canvas height in pixels
        text: Text to render
        render_logger: Collects diagnostics and statistics

    Returns:
        RenderResult with the canvas and render statistics
    """
    if render_logger is None:
        render_logger = RenderLogger()
    render_logger.stats.start_time = time.time()
    render_logger.log_render_start(width, height, len(text))

    canvas = Canvas(width, height)
    result = RenderResult(canvas=canvas, stats=render_logger.stats)

    chars = iter(enumerate(text))
    previous: Figure | None = None
    for _, char in chars:
        try:
            figure = first_figure(char)
        except InvalidCharacterError as e:
            render_logger.log_char_skipped(char, str(e))
            continue
        if figure.kind is FigureKind.CHARACTER:
            _place(figure, char, canvas, render_logger)
            result.figures.append(figure)
            previous = figure
            break

    if previous is not None:
        for index, char in chars:
            try:
                figure = next_figure(char, previous.anchor, width, height)
            except InvalidCharacterError as e:
                render_logger.log_char_skipped(char, str(e))
                continue
            except VerticalOverflowError:
                render_logger.log_vertical_overflow(len(text) - index)
                break
            _place(figure, char, canvas, render_logger)
            result.figures.append(figure)
            previous = figure

    render_logger.stats.end_time = time.time()
    return result
