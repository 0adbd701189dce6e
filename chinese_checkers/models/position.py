"""Board coordinate model.

Coordinates follow the orientation of a terminal: the origin is the
upper-left corner, ``x`` runs along a row and ``y`` down the columns.
The hexagram is stored in a skewed frame where horizontal neighbors are
two columns apart, so every hex direction is a fixed integer offset.
"""

import math
from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class Position:
    """A point on the board, or a displacement between two points."""

    x: int
    y: int

    def __add__(self, other: "Position") -> "Position":
        return Position(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Position") -> "Position":
        return Position(self.x - other.x, self.y - other.y)

    def validate(self, size: int) -> "Position | None":
        """Return this point if it lies on a board of ``size``, else None.

        The hexagram is the union of an upward triangle and a downward
        triangle sharing the central hexagon.
        """
        upward = self.y >= size and self.y - self.x <= size and self.x + self.y <= 7 * size
        downward = (
            self.y <= 3 * size and self.x + self.y >= 3 * size and self.x - self.y <= 3 * size
        )
        if upward or downward:
            return self
        return None

    def in_triangle(self, size: int) -> int | None:
        """Return the index of the corner triangle holding this point.

        Triangles are numbered anticlockwise from the top::

              0
            1   5
            2   4
              3

        Points of the central hexagon belong to no triangle and yield None.
        The tests are evaluated in order and the first match wins.
        """
        if self.y < size:
            return 0
        if self.x + self.y < 3 * size:
            return 1
        if self.y - self.x > size:
            return 2
        if self.y > 3 * size:
            return 3
        if self.x + self.y > 7 * size:
            return 4
        if self.x - self.y > 3 * size:
            return 5
        return None

    def norm(self) -> float:
        """Length of this vector with the x axis scaled for the skew."""
        return math.sqrt(self.x * self.x / 3.0 + self.y * self.y)
