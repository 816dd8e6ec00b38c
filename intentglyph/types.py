"""Common type aliases and enumerations.

``Rect`` is the unit exchanged between the geometry resolver and the cell
renderer; ``RGB`` is used for every configurable colour.
"""

from enum import StrEnum, auto
from typing import NamedTuple, Tuple


RGB = Tuple[int, int, int]
RGBA = Tuple[int, int, int, int]


class Rect(NamedTuple):
    """Pixel rectangle ``(x, y, w, h)`` with its origin at the top-left."""

    x: int
    y: int
    w: int
    h: int

    @property
    def box(self) -> Tuple[int, int, int, int]:
        """Pillow style ``(left, upper, right, lower)`` box, right/lower exclusive."""
        return (self.x, self.y, self.x + self.w, self.y + self.h)

    @property
    def is_empty(self) -> bool:
        return self.w <= 0 or self.h <= 0


class QuitReason(StrEnum):
    """Quit signals understood by the presentation loop."""

    WINDOW_CLOSE = auto()
    ESCAPE = auto()


def to_rgba(color: RGB, alpha: int = 255) -> RGBA:
    r, g, b = color
    return (r, g, b, alpha)
