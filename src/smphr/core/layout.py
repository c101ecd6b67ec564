"""Grid layout of figures on the canvas.

Figures are placed left to right in fixed-size cells. The position of each
figure only depends on the previous figure's anchor, so the layout of a
whole text is a fold over its characters carrying the last anchor.
"""

from smphr.core.anatomy import CELL_HEIGHT, CELL_WIDTH
from smphr.domain import Point
from smphr.exceptions import VerticalOverflowError


def advance(point: Point, canvas_width: int, canvas_height: int) -> Point:
    """Compute the anchor of the cell following ``point``.

    Moves one cell to the right. When that would reach the right edge of the
    canvas, wraps to the first cell of the next row instead.

    Args:
        point: Anchor of the previous figure
        canvas_width: Canvas width in pixels
        canvas_height: Canvas height in pixels

    Returns:
        Anchor for the next figure

    Raises:
        VerticalOverflowError: If the wrapped row does not fit in the canvas
    """
    if point.x + CELL_WIDTH >= canvas_width:
        wrapped = Point(CELL_WIDTH // 2, point.y + CELL_HEIGHT)
        if wrapped.y + CELL_HEIGHT > canvas_height:
            raise VerticalOverflowError()
        return wrapped
    return Point(point.x + CELL_WIDTH, point.y)
