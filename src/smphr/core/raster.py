"""Pixel-level drawing primitives.

This module turns abstract coordinates into palette indices on a Canvas:
- Single points and one-pixel lines (integer error stepping)
- Thick lines built from two triangles
- Triangle outlines and flood-filled triangles
- Circles approximated by a fixed number of samples

Every coordinate is clamped onto the canvas before it is used, so no
primitive raises for out-of-range input. Degenerate shapes (zero-length
segments, coincident vertices) draw a single pixel or nothing.
"""

import math

from smphr.domain import Canvas, PaletteIndex, Point

# Samples per unit of radius when tessellating a circle (upper bound of 2 * pi)
CIRCLE_SAMPLES_PER_RADIUS = 20


def draw_point(canvas: Canvas, x: int, y: int, color: PaletteIndex) -> None:
    """Write one pixel, clamping the coordinate onto the canvas."""
    canvas.set(x, y, color)


def draw_line_thin(
    canvas: Canvas, x0: int, y0: int, x1: int, y1: int, color: PaletteIndex
) -> None:
    """Draw a one-pixel wide line between two points, endpoints included.

    Uses Bresenham's integer error stepping. Endpoints are clamped first and
    then ordered left to right (top to bottom on ties), so the lines going
    up-right, down-right, up-left and down-left all reduce to a walk with a
    positive x step and a signed y step. Drawing ``p0 -> p1`` and
    ``p1 -> p0`` therefore touches exactly the same pixels.

    Args:
        canvas: Target canvas
        x0: X of the first endpoint
        y0: Y of the first endpoint
        x1: X of the second endpoint
        y1: Y of the second endpoint
        color: Palette index to write
    """
    x0, y0 = canvas.clamp(x0, y0)
    x1, y1 = canvas.clamp(x1, y1)
    if (x1, y1) < (x0, y0):
        x0, y0, x1, y1 = x1, y1, x0, y0

    if x0 == x1:
        for y in range(min(y0, y1), max(y0, y1) + 1):
            canvas.set(x0, y, color)
        return
    if y0 == y1:
        for x in range(x0, x1 + 1):
            canvas.set(x, y0, color)
        return

    dx = x1 - x0
    dy = abs(y1 - y0)
    step_y = 1 if y1 > y0 else -1
    error = dx - dy

    x, y = x0, y0
    while True:
        canvas.set(x, y, color)
        if x == x1 and y == y1:
            break
        doubled = 2 * error
        if doubled > -dy:
            error -= dy
            x += 1
        if doubled < dx:
            error += dx
            y += step_y


def draw_triangle_outline(
    canvas: Canvas, a: Point, b: Point, c: Point, color: PaletteIndex
) -> None:
    """Draw the three edges of a triangle."""
    draw_line_thin(canvas, a.x, a.y, b.x, b.y, color)
    draw_line_thin(canvas, a.x, a.y, c.x, c.y, color)
    draw_line_thin(canvas, b.x, b.y, c.x, c.y, color)


def fill_triangle(
    canvas: Canvas, a: Point, b: Point, c: Point, color: PaletteIndex
) -> None:
    """Draw a triangle and flood fill its interior.

    The outline is drawn first, then a 4-connected flood fill starts from
    the integer centroid. The fill uses an explicit stack; a pixel is pushed
    only when it is recoloured, so each pixel is visited at most once.
    Neighbour lookups are clamped to the triangle's bounding box (itself
    clamped to the canvas), which keeps the fill local even when the seed
    lands outside the drawn outline.

    If the centroid pixel already holds ``color`` the fill is skipped
    entirely. This happens for degenerate triangles (the seed lies on the
    outline) but also when an earlier shape painted the seed pixel, in which
    case the interior stays unfilled.

    Args:
        canvas: Target canvas
        a: First vertex
        b: Second vertex
        c: Third vertex
        color: Palette index for outline and interior
    """
    a, b, c = (Point(*canvas.clamp(p.x, p.y)) for p in (a, b, c))
    draw_triangle_outline(canvas, a, b, c, color)

    seed = ((a.x + b.x + c.x) // 3, (a.y + b.y + c.y) // 3)
    if canvas.get(*seed) == color:
        return

    min_x, max_x = min(a.x, b.x, c.x), max(a.x, b.x, c.x)
    min_y, max_y = min(a.y, b.y, c.y), max(a.y, b.y, c.y)

    canvas.set(*seed, color)
    stack = [seed]
    while stack:
        x, y = stack.pop()
        for nx, ny in ((x + 1, y), (x - 1, y), (x, y + 1), (x, y - 1)):
            nx = min(max(nx, min_x), max_x)
            ny = min(max(ny, min_y), max_y)
            if canvas.get(nx, ny) != color:
                canvas.set(nx, ny, color)
                stack.append((nx, ny))


def draw_line_thick(
    canvas: Canvas, p0: Point, p1: Point, thickness: int, color: PaletteIndex
) -> None:
    """Draw a segment with a visible width.

    The segment is widened by half the thickness on each side, along the
    direction perpendicular to it, giving a rectangle that is drawn as two
    triangles split along a diagonal. Lines thicker than 2 pixels are filled;
    thinner ones only get the two triangle outlines.

    Args:
        canvas: Target canvas
        p0: Start of the segment
        p1: End of the segment
        thickness: Width of the segment in pixels
        color: Palette index to write
    """
    half = thickness // 2
    angle = math.atan2(p1.y - p0.y, p1.x - p0.x)
    offset_x = -half * math.sin(angle)
    offset_y = half * math.cos(angle)

    c0 = Point(int(p0.x + offset_x), int(p0.y + offset_y))
    c1 = Point(int(p0.x - offset_x), int(p0.y - offset_y))
    c2 = Point(int(p1.x + offset_x), int(p1.y + offset_y))
    c3 = Point(int(p1.x - offset_x), int(p1.y - offset_y))

    if thickness > 2:
        fill_triangle(canvas, c0, c1, c2, color)
        fill_triangle(canvas, c2, c3, c1, color)
    else:
        draw_triangle_outline(canvas, c0, c1, c2, color)
        draw_triangle_outline(canvas, c2, c3, c1, color)


def _round_half_away(value: float) -> int:
    """Round to the nearest integer, ties away from zero."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def draw_circle_tessellated(
    canvas: Canvas, center: Point, radius: int, color: PaletteIndex
) -> None:
    """Plot ``20 * radius`` evenly spaced points of a circle.

    A circle of radius r has about 2 * pi * r pixels, so the fixed angular
    density overshoots a little; small radii may still show gaps.
    """
    samples = CIRCLE_SAMPLES_PER_RADIUS * radius
    for i in range(samples):
        theta = 2.0 * math.pi * i / samples
        dx = _round_half_away(math.cos(theta) * radius)
        dy = _round_half_away(math.sin(theta) * radius)
        draw_point(canvas, center.x + dx, center.y + dy, color)


def draw_circle(
    canvas: Canvas, center: Point, radius: int, thickness: int, color: PaletteIndex
) -> None:
    """Draw a ring as ``thickness`` concentric circles growing outwards."""
    for i in range(thickness):
        draw_circle_tessellated(canvas, center, radius + i, color)
