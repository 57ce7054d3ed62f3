"""Headless simulation for measuring frame throughput."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass

import numpy as np

from line_snake.config import GameConfig
from line_snake.direction import Direction
from line_snake.engine import GameData, GameState

logger = logging.getLogger(__name__)

_DIRECTIONS = list(Direction)


@dataclass
class SimulationResult:
    """Results from a headless simulation run."""

    total_games: int
    total_frames: int
    best_score: int
    mean_score: float
    wall_time_seconds: float
    frames_per_second: float

    def summary(self) -> str:
        return (
            f"Simulation: {self.total_games} games, "
            f"{self.total_frames} frames in {self.wall_time_seconds:.2f}s | "
            f"{self.frames_per_second:.1f} frames/s, "
            f"best score {self.best_score}, mean score {self.mean_score:.2f}"
        )


def simulate(
    *,
    num_games: int = 10,
    max_frames: int = 5_000,
    input_probability: float = 0.05,
    config: GameConfig | None = None,
    seed: int = 42,
) -> SimulationResult:
    """Play *num_games* games with random input at a fixed frame rate.

    Each frame queues a random direction with *input_probability*. A game
    ends when the snake crashes back to the pre-game screen or after
    *max_frames* frames.
    """
    config = config if config is not None else GameConfig()
    rng = np.random.default_rng(seed)
    time_delta = config.frame_interval

    scores: list[int] = []
    total_frames = 0
    start = time.perf_counter()

    for _ in range(num_games):
        game = GameData(config)
        game.push_input(config.direction)
        best = 0
        for _ in range(max_frames):
            if rng.random() < input_probability:
                game.push_input(_DIRECTIONS[int(rng.integers(len(_DIRECTIONS)))])
            game.update(time_delta)
            total_frames += 1
            best = max(best, game.score)
            if game.state == GameState.PRE_GAME:
                break
        scores.append(best)

    elapsed = time.perf_counter() - start
    result = SimulationResult(
        total_games=num_games,
        total_frames=total_frames,
        best_score=max(scores, default=0),
        mean_score=float(np.mean(scores)) if scores else 0.0,
        wall_time_seconds=elapsed,
        frames_per_second=total_frames / max(elapsed, 1e-9),
    )
    logger.info(result.summary())
    return result
