"""Points and axis-aligned rectangles in field coordinates."""

from __future__ import annotations

from dataclasses import dataclass

from line_snake.maths import maxf, minf


@dataclass(frozen=True)
class Point:
    """A 2D float coordinate. The y axis grows downward."""

    x: float
    y: float

    def __add__(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def __mul__(self, scalar: float) -> Point:
        return Point(self.x * scalar, self.y * scalar)

    def to_list(self) -> list[float]:
        return [self.x, self.y]


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle anchored at its top-left corner."""

    x: float
    y: float
    w: float
    h: float

    @property
    def left(self) -> float:
        return self.x

    @property
    def right(self) -> float:
        return self.x + self.w

    @property
    def top(self) -> float:
        return self.y

    @property
    def bottom(self) -> float:
        return self.y + self.h

    def overlaps(self, other: Rect) -> bool:
        """Return True if the intersection has positive area.

        Rectangles that only share an edge or a corner do not overlap.
        """
        width = minf(self.right, other.right) - maxf(self.left, other.left)
        height = minf(self.bottom, other.bottom) - maxf(self.top, other.top)
        return width > 0 and height > 0

    def contains(self, other: Rect) -> bool:
        """Return True if *other* lies entirely inside this rectangle."""
        return (
            other.left >= self.left
            and other.right <= self.right
            and other.top >= self.top
            and other.bottom <= self.bottom
        )

    def to_list(self) -> list[float]:
        return [self.x, self.y, self.w, self.h]
