"""Cardinal movement directions."""

from __future__ import annotations

import enum

from line_snake.geometry import Point


class Axis(enum.Enum):
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


class Direction(enum.Enum):
    """Cardinal movement directions with (dx, dy) screen-space values."""

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def axis(self) -> Axis:
        return Axis.VERTICAL if self.value[0] == 0 else Axis.HORIZONTAL

    def as_vector(self) -> Point:
        """Return the unit vector for this direction."""
        dx, dy = self.value
        return Point(float(dx), float(dy))

    def is_colinear(self, other: Direction) -> bool:
        """Check whether both directions lie on the same axis."""
        return self.axis == other.axis

    @classmethod
    def from_name(cls, name: str) -> Direction:
        """Look up a direction by case-insensitive name.

        Raises ``ValueError`` for unknown names.
        """
        try:
            return cls[name.upper()]
        except KeyError:
            raise ValueError(f"Unknown direction: {name!r}.") from None
