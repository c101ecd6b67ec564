"""Domain models for smphr.

This module contains the plain data types the renderer works with. They
carry no drawing logic:

- Immutable where possible (using frozen dataclasses)
- Independent of the image encoding library

Key classes:
- Point: A signed 2D integer coordinate
- PaletteIndex: The three colours a canvas pixel can hold
- Canvas: A row-major buffer of palette indices
"""

from smphr.domain.canvas import PALETTE_RGB, Canvas, PaletteIndex
from smphr.domain.geometry import Point

__all__: list[str] = [
    # Enums
    "PaletteIndex",
    # Constants
    "PALETTE_RGB",
    # Core types
    "Point",
    "Canvas",
]
