"""Semaphore arm positions for each letter.

Each letter maps to a pair of pose codes ``(right, left)``. Code 0 means the
arm is not drawn; codes 1 to 7 are 45 degree steps, see
:func:`smphr.core.figure.draw_arm`.
"""

LETTER_COUNT = 26
MAX_POSE_CODE = 7

# fmt: off
#                                 a  b  c  d  e  f  g  h  i
#                                 j  k  l  m  n  o  p  q  r
#                                 s  t  u  v  w  x  y  z
RIGHT_ARM_POSES: tuple[int, ...] = (1, 2, 3, 4, 0, 0, 0, 1, 1,
                                    4, 1, 1, 1, 1, 2, 2, 2, 2,
                                    2, 3, 3, 4, 5, 5, 3, 6)
LEFT_ARM_POSES: tuple[int, ...] = (0, 0, 0, 0, 5, 6, 7, 2, 3,
                                   6, 4, 5, 6, 7, 3, 4, 5, 6,
                                   7, 4, 5, 7, 6, 7, 6, 7)
# fmt: on


def pose_index(char: str) -> int:
    """Get the table index of a character.

    Letters map to their alphabet position regardless of case. Digits have
    no semaphore pose of their own yet and share index 0 with "a", as does
    anything else.
    """
    lowered = char.lower()
    if len(lowered) == 1 and "a" <= lowered <= "z":
        return ord(lowered) - ord("a")
    return 0


def pose_for(char: str) -> tuple[int, int]:
    """Get the ``(right, left)`` pose codes of a character."""
    index = pose_index(char)
    return RIGHT_ARM_POSES[index], LEFT_ARM_POSES[index]
