"""Frame-driven game orchestrator composing snake, food and player input."""

from __future__ import annotations

import enum
import logging
from collections import deque

import numpy as np

from line_snake.config import GameConfig
from line_snake.direction import Direction
from line_snake.food import Food, FoodSpawner
from line_snake.snake import Snake

logger = logging.getLogger(__name__)


class GameState(str, enum.Enum):
    """Screen the game is on."""

    PRE_GAME = "pre_game"
    GAME = "game"


class GameData:
    """Holds game data, manages player input and updates objects.

    Each call to :meth:`update` advances the game by one frame of
    ``time_delta`` seconds. The snake is created in the middle of the field.
    """

    def __init__(self, config: GameConfig | None = None) -> None:
        self.config = config if config is not None else GameConfig()
        self.field = self.config.field
        self.rng = np.random.default_rng(self.config.seed)
        self.food_spawner = FoodSpawner(
            self.field, self.config.food_size, rng=self.rng,
        )

        self.snake = self._new_snake()
        self.food: Food = self.food_spawner.spawn(self.snake)
        self.inputs: deque[Direction] = deque()
        self.input_timer = 0.0
        self.score = 0
        self.frame = 0
        self.state = GameState.PRE_GAME

    def _new_snake(self) -> Snake:
        return Snake(
            self.field.w / 2.0,
            self.field.h / 2.0,
            direction=self.config.direction,
            initial_length=self.config.initial_length,
            width=self.config.snake_width,
            epsilon=self.config.segment_epsilon,
        )

    def reset(self) -> None:
        """Start over on the pre-game screen."""
        logger.info(
            "Game reset at frame %d with score %d.", self.frame, self.score,
        )
        self.snake = self._new_snake()
        self.food = self.food_spawner.spawn(self.snake)
        self.inputs.clear()
        self.input_timer = 0.0
        self.score = 0
        self.state = GameState.PRE_GAME

    def push_input(self, direction: Direction) -> None:
        """Queue a direction request. Any input starts a pending game."""
        if self.state == GameState.PRE_GAME:
            self.state = GameState.GAME
            logger.info("Game started.")
        self.inputs.append(direction)

    def update(self, time_delta: float) -> dict:
        """Advance the game by one frame.

        Returns the full game state as a serializable dict.
        """
        self.frame += 1
        if self.state == GameState.GAME:
            self.update_input(time_delta)
            self.update_snake(time_delta)
        return self.get_state()

    def update_input(self, time_delta: float) -> None:
        """Process queued input, at most one turn per input interval.

        The cap makes sure a 180° turn always leaves enough room between
        both parts of the snake.
        """
        self.input_timer += time_delta
        if self.input_timer < self.config.secs_per_input_update:
            return

        current = self.snake.direction
        for idx, new_dir in enumerate(reversed(self.inputs)):
            if not new_dir.is_colinear(current):
                # Keep only the requests older than the chosen one.
                for _ in range(idx + 1):
                    self.inputs.pop()
                self.snake.turn(new_dir)
                self.input_timer = 0.0
                return
        self.inputs.clear()

    def update_snake(self, time_delta: float) -> None:
        """Update the snake and react to collisions with food, self or walls."""
        if self.snake.collides(self.food.bbox):
            self.snake.grow(self.config.growth_per_food)
            self.score += 1
            self.food = self.food_spawner.spawn(self.snake)
            logger.debug("Food eaten; score is now %d.", self.score)
        elif self.snake.self_collides() or self.snake.wall_collides(self.field):
            self.reset()
        else:
            self.snake.move(time_delta * self.config.speed)

    def get_state(self) -> dict:
        """Return the full, serializable game state."""
        return {
            "frame": self.frame,
            "state": self.state.value,
            "score": self.score,
            "snake": self.snake.to_dict(),
            "food": self.food.to_dict(),
            "field": self.field.to_list(),
        }
