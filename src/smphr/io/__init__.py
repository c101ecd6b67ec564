"""Image I/O layer for smphr.

This module encodes rendered canvases into image files using Pillow. It is
the only place that knows about real colours; the rest of the package works
with palette indices.

Key classes:
- ImageWriter: Save a canvas to an image file

Key functions:
- canvas_to_image: Convert a canvas to a PIL image
"""

from smphr.io.writer import ImageWriter, canvas_to_image

__all__ = [
    "ImageWriter",
    "canvas_to_image",
]
