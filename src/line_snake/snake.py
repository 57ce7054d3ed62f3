"""Snake body represented as a chain of line segments."""

from __future__ import annotations

import logging
from collections import deque

from line_snake.direction import Direction
from line_snake.geometry import Point, Rect
from line_snake.segment import SEGMENT_EPSILON, Line

logger = logging.getLogger(__name__)


class Snake:
    """A snake represented as an ordered deque of :class:`Line` segments.

    The tail is ``segments[0]``; the head is ``segments[-1]``. Adjacent
    segments always share an end point and never lie on the same axis.
    """

    def __init__(
        self,
        x: float,
        y: float,
        direction: Direction = Direction.RIGHT,
        initial_length: float = 0.0,
        width: float = 10.0,
        epsilon: float = SEGMENT_EPSILON,
    ) -> None:
        self.width = width
        self.epsilon = epsilon
        self.segments: deque[Line] = deque()
        self.segments.append(Line.new(Point(x, y), direction, epsilon))
        if initial_length > 0:
            self.head.grow(initial_length)

    @property
    def head(self) -> Line:
        """Return the head segment."""
        return self.segments[-1]

    @property
    def tail(self) -> Line:
        """Return the tail segment."""
        return self.segments[0]

    @property
    def direction(self) -> Direction:
        """Current direction of travel, i.e. the head segment's direction."""
        return self.head.direction

    def length(self) -> float:
        """Total length of the body."""
        return sum(seg.size() for seg in self.segments)

    def turn(self, new_direction: Direction) -> bool:
        """Start a new head segment heading in *new_direction*.

        Directions on the current axis are ignored. Returns True if a new
        segment was laid.
        """
        if new_direction.is_colinear(self.direction):
            return False
        self.segments.append(Line.new(self.head.end, new_direction, self.epsilon))
        self._retract(self.epsilon)
        logger.debug("Turned %s at %s.", new_direction.name, self.head.begin)
        return True

    def move(self, distance: float) -> None:
        """Advance the head by *distance* and pull the tail in by the same."""
        self.head.grow(distance)
        self._retract(distance)

    def grow(self, distance: float) -> None:
        """Advance the head by *distance* leaving the tail in place."""
        self.head.grow(distance)

    def _retract(self, distance: float) -> None:
        # A segment is dropped once a single step shrinks it past zero; the
        # remainder carries over to the next segment toward the head.
        left = self.tail.shrink(distance)
        while left > 0 and len(self.segments) > 1:
            self.segments.popleft()
            left = self.tail.shrink(left)

    def bboxes(self) -> list[Rect]:
        """Return the bounding box of every segment, tail first."""
        return [seg.bbox(self.width) for seg in self.segments]

    def collides(self, box: Rect) -> bool:
        """Check whether any segment overlaps *box*."""
        return any(bbox.overlaps(box) for bbox in self.bboxes())

    def self_collides(self) -> bool:
        """Check whether the head overlaps any non-adjacent segment."""
        head_box = self.head.bbox(self.width)
        others = list(self.segments)[:-2]
        return any(seg.bbox(self.width).overlaps(head_box) for seg in others)

    def wall_collides(self, bounds: Rect) -> bool:
        """Check whether the head sticks out of *bounds*."""
        return not bounds.contains(self.head.bbox(self.width))

    def to_dict(self) -> dict:
        """Serialize snake state to a dictionary."""
        return {
            "segments": [seg.to_dict() for seg in self.segments],
            "bboxes": [box.to_list() for box in self.bboxes()],
            "direction": self.direction.name.lower(),
            "length": self.length(),
        }
