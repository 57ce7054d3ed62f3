"""Game constants bundled into a serializable configuration."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass
from pathlib import Path

from line_snake.direction import Direction
from line_snake.geometry import Rect

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GameConfig:
    """Field, body and timing constants for a single game.

    Supports JSON serialization for reproducibility.
    """

    # Field
    field_width: float = 800.0
    field_height: float = 600.0

    # Body
    snake_width: float = 10.0
    initial_length: float = 60.0
    start_direction: str = "right"
    segment_epsilon: float = 0.01

    # Food
    food_size: float = 10.0
    growth_per_food: float = 10.0

    # Timing. One input interval of travel must cover the body width:
    # secs_per_input_update * speed >= snake_width.
    speed: float = 120.0
    secs_per_input_update: float = 0.1
    fps: int = 60

    seed: int | None = None

    def __post_init__(self) -> None:
        if self.field_width <= 0 or self.field_height <= 0:
            raise ValueError("field_width and field_height must be positive.")
        if self.snake_width <= 0:
            raise ValueError("snake_width must be positive.")
        if not 0 < self.segment_epsilon < self.snake_width:
            raise ValueError(
                "segment_epsilon must be positive and smaller than snake_width."
            )
        if self.initial_length < 0:
            raise ValueError("initial_length must be >= 0.")
        if self.food_size <= 0:
            raise ValueError("food_size must be positive.")
        if self.food_size > min(self.field_width, self.field_height):
            raise ValueError("food_size does not fit inside the field.")
        if self.growth_per_food < 0:
            raise ValueError("growth_per_food must be >= 0.")
        if self.speed <= 0:
            raise ValueError("speed must be positive.")
        if self.secs_per_input_update < 0:
            raise ValueError("secs_per_input_update must be >= 0.")
        if self.secs_per_input_update * self.speed < self.snake_width:
            raise ValueError(
                "secs_per_input_update * speed must be at least snake_width; "
                "a 180° turn would run into the body."
            )
        if self.fps < 1:
            raise ValueError("fps must be at least 1.")

        # Raises ValueError for unknown names.
        direction = self.direction
        reach = self.initial_length + self.segment_epsilon + self.snake_width / 2
        half_extent = (
            self.field_height if direction.value[0] == 0 else self.field_width
        ) / 2
        if reach >= half_extent:
            raise ValueError(
                "initial_length does not fit the configured field; increase "
                "field size or reduce initial_length."
            )

    @property
    def direction(self) -> Direction:
        return Direction.from_name(self.start_direction)

    @property
    def field(self) -> Rect:
        return Rect(0.0, 0.0, self.field_width, self.field_height)

    @property
    def frame_interval(self) -> float:
        return 1.0 / self.fps

    def to_dict(self) -> dict:
        """Serialize to a plain dict."""
        return asdict(self)

    def save(self, path: str | Path) -> None:
        """Write config to a JSON file."""
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(json.dumps(self.to_dict(), indent=2))
        logger.info("Config saved to %s", p)

    @classmethod
    def load(cls, path: str | Path) -> GameConfig:
        """Load config from a JSON file."""
        raw = json.loads(Path(path).read_text())
        return cls(**raw)
