"""Core geometric type for figure placement.

Points are used in two coordinate spaces:
- Model space: offsets relative to a figure's anchor (body part positions)
- Canvas space: absolute pixel coordinates

Converting from model space to canvas space is ``anchor + offset``.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Point:
    """A point on the integer pixel grid.

    Immutable and hashable for use in sets/dicts. Coordinates may be
    negative; raster operations clamp them onto the canvas.

    Attributes:
        x: X coordinate, growing to the right
        y: Y coordinate, growing downwards
    """

    x: int
    y: int

    def __add__(self, other: "Point") -> "Point":
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Point") -> "Point":
        return Point(self.x - other.x, self.y - other.y)

    def to_tuple(self) -> tuple[int, int]:
        """Convert to simple (x, y) tuple.

        Returns:
            Tuple of (x, y) coordinates
        """
        return (self.x, self.y)
