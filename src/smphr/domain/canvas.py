"""Indexed pixel buffer that figures are rasterized onto."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import IntEnum


class PaletteIndex(IntEnum):
    """Colour stored in a canvas pixel.

    The canvas only ever holds these three values; the mapping to real
    colours happens when the image is encoded.
    """

    BACKGROUND = 0
    PRIMARY = 1
    ACCENT = 2


# White background, black figures, red flags
PALETTE_RGB: dict[PaletteIndex, tuple[int, int, int]] = {
    PaletteIndex.BACKGROUND: (255, 255, 255),
    PaletteIndex.PRIMARY: (0, 0, 0),
    PaletteIndex.ACCENT: (255, 0, 0),
}


@dataclass
class Canvas:
    """A fixed-size, row-major buffer of palette indices.

    Pixel ``(x, y)`` lives at ``pixels[y * width + x]``. Every read and
    write goes through :meth:`clamp`, so out-of-range coordinates land on
    the nearest edge pixel instead of raising.

    Attributes:
        width: Number of columns (must be positive)
        height: Number of rows (must be positive)
        pixels: Flat buffer of ``width * height`` palette indices
    """

    width: int
    height: int
    pixels: bytearray = field(default_factory=bytearray, repr=False)

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(
                f"Canvas dimensions must be positive, got {self.width}x{self.height}"
            )
        size = self.width * self.height
        if not self.pixels:
            self.pixels = bytearray([PaletteIndex.BACKGROUND]) * size
        elif len(self.pixels) != size:
            raise ValueError(f"Expected {size} pixels, got {len(self.pixels)}")

    def clamp(self, x: int, y: int) -> tuple[int, int]:
        """Bound a coordinate into ``[0, width-1] x [0, height-1]``."""
        return (
            min(max(x, 0), self.width - 1),
            min(max(y, 0), self.height - 1),
        )

    def get(self, x: int, y: int) -> PaletteIndex:
        """Read the palette index at a (clamped) coordinate."""
        x, y = self.clamp(x, y)
        return PaletteIndex(self.pixels[y * self.width + x])

    def set(self, x: int, y: int, color: PaletteIndex) -> None:
        """Write a palette index at a (clamped) coordinate."""
        x, y = self.clamp(x, y)
        self.pixels[y * self.width + x] = color

    def count(self, color: PaletteIndex) -> int:
        """Count pixels holding the given palette index."""
        return self.pixels.count(color)

    def coordinates_of(self, color: PaletteIndex) -> set[tuple[int, int]]:
        """Return the set of (x, y) coordinates holding the given index."""
        return {
            (i % self.width, i // self.width)
            for i, value in enumerate(self.pixels)
            if value == color
        }

    def rows(self) -> Iterator[bytes]:
        """Iterate over the buffer one row at a time, top to bottom."""
        for y in range(self.height):
            start = y * self.width
            yield bytes(self.pixels[start : start + self.width])
