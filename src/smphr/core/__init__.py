"""Core rendering algorithms for smphr.

This module contains the core algorithms for:

- Rasterization (points, lines, thick lines, triangles, circles)
- Semaphore poses (letter to arm position lookup)
- Figure geometry (body and arm/flag construction)
- Layout (fixed grid with row wrapping)
- Rendering a whole text onto a canvas

Key functions:
- draw_line_thin: One-pixel line between two points
- draw_line_thick: Line with a given width
- fill_triangle: Flood-filled triangle
- draw_circle: Ring made of tessellated circles
- pose_for: Arm pose codes of a character
- advance: Next layout cell after an anchor
- render_text: Render a text onto a new canvas

Key classes:
- Figure: One drawable semaphore figure
- RenderResult: Canvas and statistics of a render pass
"""

from smphr.core.figure import Figure, FigureKind, draw_arm, first_figure, next_figure
from smphr.core.layout import advance
from smphr.core.poses import pose_for, pose_index
from smphr.core.raster import (
    draw_circle,
    draw_circle_tessellated,
    draw_line_thick,
    draw_line_thin,
    draw_point,
    draw_triangle_outline,
    fill_triangle,
)
from smphr.core.renderer import RenderResult, render_text, validate_text

__all__ = [
    # Figure classes
    "Figure",
    "FigureKind",
    # Renderer classes
    "RenderResult",
    # Layout functions
    "advance",
    # Raster functions
    "draw_arm",
    "draw_circle",
    "draw_circle_tessellated",
    "draw_line_thick",
    "draw_line_thin",
    "draw_point",
    "draw_triangle_outline",
    "fill_triangle",
    "first_figure",
    "next_figure",
    # Pose functions
    "pose_for",
    "pose_index",
    "render_text",
    "validate_text",
]
