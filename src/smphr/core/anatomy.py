"""Fixed body geometry of a semaphore figure.

All points are model-space offsets from the figure's anchor (roughly the
middle of the chest). The layout cell size is derived from them once, so every
figure occupies the same cell regardless of its pose.
"""

from smphr.domain import Point

RIGHT_FOOT = Point(10, 40)
LEFT_FOOT = Point(-10, 40)
# The figure faces the viewer, so its right shoulder is on the image's left
RIGHT_SHOULDER = Point(-5, -10)
LEFT_SHOULDER = Point(5, -10)

HIP = Point(0, 20)
NECK = Point(0, -10)
NOSE = Point(0, -20)

HEAD_RADIUS = NECK.y - NOSE.y
ARM_LENGTH = 30
FLAG_LENGTH = 10
X_MARGIN = 1
Y_MARGIN = 1

HEAD_THICKNESS = 2
BODY_THICKNESS = 10
LEG_THICKNESS = 3

CELL_WIDTH = 2 * (LEFT_SHOULDER.x + ARM_LENGTH) + X_MARGIN
CELL_HEIGHT = RIGHT_FOOT.y - RIGHT_SHOULDER.y + ARM_LENGTH + Y_MARGIN

DEFAULT_ANCHOR = Point(CELL_WIDTH // 2, CELL_HEIGHT // 2)
