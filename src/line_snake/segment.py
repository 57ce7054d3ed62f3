"""Straight, axis-aligned body segments."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from line_snake.direction import Axis, Direction
from line_snake.geometry import Point, Rect
from line_snake.maths import clamp, minf

# Length of a freshly laid segment.
SEGMENT_EPSILON = 0.01


@runtime_checkable
class Growable(Protocol):
    """A segment whose head-ward end extends and whose tail-ward end retracts."""

    def grow(self, distance: float) -> float: ...

    def shrink(self, distance: float) -> float: ...


@runtime_checkable
class Renderable(Protocol):
    """A segment that can be drawn and hit-tested as a rectangle."""

    def bbox(self, width: float) -> Rect: ...


@dataclass
class Line:
    """One straight run of the body between two direction changes.

    ``end`` is the head-ward point and ``begin`` the tail-ward one. Both
    points differ only along the axis of ``direction``.
    """

    begin: Point
    end: Point
    direction: Direction

    @classmethod
    def new(
        cls,
        point: Point,
        direction: Direction,
        epsilon: float = SEGMENT_EPSILON,
    ) -> Line:
        """Lay a new segment of length *epsilon* starting at *point*."""
        return cls(
            begin=point,
            end=point + direction.as_vector() * epsilon,
            direction=direction,
        )

    def size(self) -> float:
        """Return the extent of the segment along its own axis."""
        if self.direction.axis == Axis.VERTICAL:
            return abs(self.end.y - self.begin.y)
        return abs(self.end.x - self.begin.x)

    def grow(self, distance: float) -> float:
        """Push ``end`` forward by *distance*. Growth is never constrained."""
        self.end = self.end + self.direction.as_vector() * distance
        return 0.0

    def shrink(self, distance: float) -> float:
        """Pull ``begin`` toward ``end`` by *distance*.

        ``begin`` stops at ``end``. Returns the part of *distance* this
        segment could not absorb.
        """
        size = self.size()
        left = clamp(distance - size, 0.0, distance)
        self.begin = self.begin + self.direction.as_vector() * minf(distance, size)
        return left

    def bbox(self, width: float) -> Rect:
        """Return the segment thickened to *width* across its axis."""
        half = width / 2.0
        size = self.size()
        if self.direction.axis == Axis.VERTICAL:
            top = minf(self.begin.y, self.end.y)
            return Rect(self.end.x - half, top, width, size)
        left = minf(self.begin.x, self.end.x)
        return Rect(left, self.end.y - half, size, width)

    def to_dict(self) -> dict:
        """Serialize the segment to a dictionary."""
        return {
            "begin": self.begin.to_list(),
            "end": self.end.to_list(),
            "direction": self.direction.name.lower(),
        }
