"""Semaphore figures: one drawable unit per input character.

A Figure knows its pose, its anchor and how to draw itself onto a canvas:
- Body: torso, two legs and a ring for the head
- Arms: a segment from the shoulder to the hand, ending in a flag panel
"""

import math
from dataclasses import dataclass, replace
from enum import Enum, auto

from smphr.core import anatomy
from smphr.core.layout import advance
from smphr.core.poses import pose_for
from smphr.core.raster import (
    draw_circle,
    draw_line_thick,
    draw_line_thin,
    fill_triangle,
)
from smphr.domain import Canvas, PaletteIndex, Point
from smphr.exceptions import InvalidCharacterError


class FigureKind(Enum):
    """What a figure stands for.

    Only CHARACTER figures draw anything; SPACE and NEWLINE just take up a
    layout cell. UNKNOWN draws nothing and asks the caller to report it.
    """

    CHARACTER = auto()
    SPACE = auto()
    NEWLINE = auto()
    UNKNOWN = auto()


@dataclass(frozen=True, slots=True)
class Figure:
    """A semaphore figure placed on the canvas.

    Attributes:
        right_arm: Pose code of the right arm (0 when absent)
        left_arm: Pose code of the left arm (0 when absent)
        anchor: Canvas-space position of the figure's chest
        kind: What the figure stands for
    """

    right_arm: int = 0
    left_arm: int = 0
    anchor: Point = anatomy.DEFAULT_ANCHOR
    kind: FigureKind = FigureKind.UNKNOWN

    def with_anchor(self, anchor: Point) -> "Figure":
        """Return a copy of this figure moved to another anchor."""
        return replace(self, anchor=anchor)

    def draw(self, canvas: Canvas) -> bool:
        """Draw the figure onto the canvas.

        Args:
            canvas: Target canvas

        Returns:
            False if the figure is UNKNOWN and should be reported,
            True otherwise (including blank figures)
        """
        if self.kind is FigureKind.UNKNOWN:
            return False
        if self.kind is not FigureKind.CHARACTER:
            return True

        self._draw_body(canvas)
        draw_arm(canvas, self.right_arm, True, self.anchor)
        draw_arm(canvas, self.left_arm, False, self.anchor)
        return True

    def _draw_body(self, canvas: Canvas) -> None:
        a = self.anchor
        primary = PaletteIndex.PRIMARY
        draw_line_thick(
            canvas, a + anatomy.NECK, a + anatomy.HIP, anatomy.BODY_THICKNESS, primary
        )
        draw_line_thick(
            canvas, a + anatomy.HIP, a + anatomy.LEFT_FOOT, anatomy.LEG_THICKNESS, primary
        )
        draw_line_thick(
            canvas, a + anatomy.HIP, a + anatomy.RIGHT_FOOT, anatomy.LEG_THICKNESS, primary
        )
        draw_circle(
            canvas, a + anatomy.NOSE, anatomy.HEAD_RADIUS, anatomy.HEAD_THICKNESS, primary
        )


def draw_arm(canvas: Canvas, code: int, is_right: bool, anchor: Point) -> None:
    """Draw one arm and its flag.

    The arm points at ``45 * (code - 2)`` degrees from the shoulder: code 2
    is horizontal, away from the body for the right arm. The flag is a
    square panel on the last ``FLAG_LENGTH`` pixels of the arm. Codes 1 to 4
    put the panel on one side of the arm and codes 5 to 7 on the other, so
    the panel edges and the filled triangle both depend on that parity.

    Args:
        canvas: Target canvas
        code: Pose code, 0 for no arm
        is_right: Whether this is the figure's right arm
        anchor: Canvas-space anchor of the figure
    """
    if code == 0:
        return

    angle = math.pi / 4 * (code - 2)
    sin_a, cos_a = math.sin(angle), math.cos(angle)
    arm_sin, arm_cos = int(anatomy.ARM_LENGTH * sin_a), int(anatomy.ARM_LENGTH * cos_a)
    flag_sin, flag_cos = int(anatomy.FLAG_LENGTH * sin_a), int(anatomy.FLAG_LENGTH * cos_a)

    shoulder = anchor + (anatomy.RIGHT_SHOULDER if is_right else anatomy.LEFT_SHOULDER)
    hand = Point(shoulder.x - arm_cos, shoulder.y - arm_sin)
    flag_base = Point(hand.x + flag_cos, hand.y + flag_sin)
    if code <= 4:
        base_corner = Point(flag_base.x - flag_sin, flag_base.y + flag_cos)
        hand_corner = Point(hand.x - flag_sin, hand.y + flag_cos)
    else:
        base_corner = Point(flag_base.x + flag_sin, flag_base.y - flag_cos)
        hand_corner = Point(hand.x + flag_sin, hand.y - flag_cos)

    primary = PaletteIndex.PRIMARY
    draw_line_thin(canvas, shoulder.x, shoulder.y, hand.x, hand.y, primary)

    edge_start = flag_base if code <= 4 else hand
    draw_line_thin(canvas, edge_start.x, edge_start.y, hand_corner.x, hand_corner.y, primary)
    draw_line_thin(canvas, hand_corner.x, hand_corner.y, base_corner.x, base_corner.y, primary)
    draw_line_thin(canvas, base_corner.x, base_corner.y, flag_base.x, flag_base.y, primary)

    if code <= 4:
        fill_triangle(canvas, hand, flag_base, hand_corner, PaletteIndex.ACCENT)
    else:
        fill_triangle(canvas, hand, flag_base, base_corner, PaletteIndex.ACCENT)


def first_figure(char: str) -> Figure:
    """Build the figure for a character, placed at the default anchor.

    Args:
        char: A single character

    Returns:
        A CHARACTER figure for letters and digits, SPACE or NEWLINE otherwise

    Raises:
        InvalidCharacterError: If the character is not ASCII alphanumeric,
            a space or a newline
    """
    if char == " ":
        return Figure(kind=FigureKind.SPACE)
    if char == "\n":
        return Figure(kind=FigureKind.NEWLINE)
    if not (char.isascii() and char.isalnum()):
        raise InvalidCharacterError(char)

    right_arm, left_arm = pose_for(char)
    return Figure(
        right_arm=right_arm,
        left_arm=left_arm,
        anchor=anatomy.DEFAULT_ANCHOR,
        kind=FigureKind.CHARACTER,
    )


def next_figure(
    char: str, previous_anchor: Point, canvas_width: int, canvas_height: int
) -> Figure:
    """Build the figure for a character, placed in the cell after another.

    Args:
        char: A single character
        previous_anchor: Anchor of the figure placed before this one
        canvas_width: Canvas width in pixels
        canvas_height: Canvas height in pixels

    Returns:
        The figure, anchored in the next layout cell

    Raises:
        InvalidCharacterError: If the character has no figure
        VerticalOverflowError: If the next cell falls below the canvas
    """
    figure = first_figure(char)
    return figure.with_anchor(advance(previous_anchor, canvas_width, canvas_height))
