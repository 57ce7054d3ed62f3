"""Food placement logic."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

from line_snake.geometry import Point, Rect

if TYPE_CHECKING:
    from line_snake.snake import Snake

logger = logging.getLogger(__name__)

# Rejected draws after which a crowded field is reported.
_CROWDED_ATTEMPTS = 1_000


@dataclass(frozen=True)
class Food:
    """A food item: a point and the square box centred on it."""

    position: Point
    size: float

    @property
    def bbox(self) -> Rect:
        half = self.size / 2.0
        return Rect(
            self.position.x - half, self.position.y - half, self.size, self.size,
        )

    def to_dict(self) -> dict:
        return {
            "position": self.position.to_list(),
            "bbox": self.bbox.to_list(),
        }


class FoodSpawner:
    """Places food uniformly inside the field.

    Uses a seeded NumPy RNG for deterministic, reproducible placement.
    """

    def __init__(
        self,
        field: Rect,
        size: float,
        rng: np.random.Generator | None = None,
    ) -> None:
        if size <= 0:
            raise ValueError("Food size must be positive.")
        if size > field.w or size > field.h:
            raise ValueError("Food does not fit inside the field.")
        self.field = field
        self.size = size
        self.rng = rng if rng is not None else np.random.default_rng()

    def random(self) -> Food:
        """Return food at a random position fully inside the field."""
        half = self.size / 2.0
        x = self.rng.uniform(self.field.left + half, self.field.right - half)
        y = self.rng.uniform(self.field.top + half, self.field.bottom - half)
        return Food(Point(float(x), float(y)), self.size)

    def spawn(self, snake: Snake) -> Food:
        """Draw food positions until one does not overlap *snake*."""
        attempts = 0
        food = self.random()
        while snake.collides(food.bbox):
            attempts += 1
            if attempts == _CROWDED_ATTEMPTS:
                logger.warning(
                    "Food placement rejected %d draws; field is crowded.",
                    attempts,
                )
            food = self.random()
        if attempts:
            logger.debug(
                "Food placed at %s after %d rejected draws.",
                food.position, attempts,
            )
        return food
