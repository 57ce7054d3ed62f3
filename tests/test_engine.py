"""Tests for the GameData orchestrator."""

import json

import pytest

from line_snake.config import GameConfig
from line_snake.direction import Direction
from line_snake.engine import GameData, GameState
from line_snake.food import Food
from line_snake.geometry import Point
from line_snake.snake import Snake


def _playing(seed: int = 0) -> GameData:
    """A game already past the pre-game screen with food out of the way."""
    game = GameData(GameConfig(seed=seed))
    game.state = GameState.GAME
    game.food = Food(Point(20.0, 20.0), game.config.food_size)
    return game


class TestEngineInit:
    def test_default_init(self):
        game = GameData(GameConfig(seed=0))
        assert game.score == 0
        assert game.frame == 0
        assert game.state == GameState.PRE_GAME
        assert len(game.inputs) == 0

    def test_snake_starts_center(self):
        game = GameData(GameConfig(seed=0))
        assert game.snake.tail.begin == Point(400.0, 300.0)
        assert game.snake.direction == Direction.RIGHT

    def test_food_clear_of_snake(self):
        for seed in range(20):
            game = GameData(GameConfig(seed=seed))
            assert not game.snake.collides(game.food.bbox)


class TestEngineModes:
    def test_pre_game_is_frozen(self):
        game = GameData(GameConfig(seed=0))
        head_end = game.snake.head.end
        state = game.update(0.5)
        assert state["frame"] == 1
        assert state["state"] == "pre_game"
        assert game.snake.head.end == head_end

    def test_input_starts_game(self):
        game = GameData(GameConfig(seed=0))
        game.push_input(Direction.UP)
        assert game.state == GameState.GAME
        assert list(game.inputs) == [Direction.UP]


class TestEngineInput:
    def test_newest_non_colinear_wins(self):
        game = _playing()
        game.inputs.extend(
            [Direction.RIGHT, Direction.UP, Direction.LEFT, Direction.DOWN],
        )
        game.update_input(game.config.secs_per_input_update)
        assert game.snake.direction == Direction.DOWN
        # Requests older than the applied one wait for the next tick.
        assert list(game.inputs) == [Direction.RIGHT, Direction.UP, Direction.LEFT]
        assert game.input_timer == 0.0

    def test_backlog_applied_on_next_tick(self):
        game = _playing()
        game.inputs.extend([Direction.UP, Direction.DOWN])
        game.update_input(game.config.secs_per_input_update)
        assert game.snake.direction == Direction.DOWN
        assert list(game.inputs) == [Direction.UP]
        # UP is colinear with DOWN, so the backlog is dropped.
        game.update_input(game.config.secs_per_input_update)
        assert game.snake.direction == Direction.DOWN
        assert len(game.inputs) == 0

    def test_newer_colinear_requests_discarded(self):
        game = _playing()
        game.inputs.extend([Direction.UP, Direction.LEFT, Direction.RIGHT])
        game.update_input(game.config.secs_per_input_update)
        assert game.snake.direction == Direction.UP
        assert len(game.inputs) == 0

    def test_all_colinear_clears_queue(self):
        game = _playing()
        game.inputs.extend([Direction.LEFT, Direction.RIGHT])
        game.update_input(game.config.secs_per_input_update)
        assert game.snake.direction == Direction.RIGHT
        assert len(game.inputs) == 0
        assert len(game.snake.segments) == 1
        assert game.input_timer == pytest.approx(game.config.secs_per_input_update)

    def test_rate_limited(self):
        game = _playing()
        game.inputs.append(Direction.UP)
        game.update_input(0.05)
        assert game.snake.direction == Direction.RIGHT
        assert list(game.inputs) == [Direction.UP]
        game.update_input(0.05)
        assert game.snake.direction == Direction.UP

    def test_one_turn_per_interval(self):
        game = _playing()
        game.inputs.extend([Direction.DOWN, Direction.UP])
        game.update_input(1.0)
        assert game.snake.direction == Direction.UP
        game.update_input(0.01)
        assert game.snake.direction == Direction.UP
        assert list(game.inputs) == [Direction.DOWN]


class TestEngineMovement:
    def test_move_by_elapsed_time(self):
        game = _playing()
        head_x = game.snake.head.end.x
        length = game.snake.length()
        game.update(0.1)
        assert game.snake.head.end.x == pytest.approx(head_x + 0.1 * game.config.speed)
        assert game.snake.length() == pytest.approx(length, abs=1e-4)


class TestEngineUTurn:
    def test_fastest_u_turn_clears_body(self):
        """A 180° turn at the input rate limit never hits the body."""
        config = GameConfig(seed=0, speed=100.0, secs_per_input_update=0.1)
        game = GameData(config)
        game.state = GameState.GAME
        game.food = Food(Point(20.0, 20.0), config.food_size)

        game.push_input(Direction.UP)
        for _ in range(60):
            game.update(1 / 60)
            if game.snake.direction == Direction.UP:
                break
        game.push_input(Direction.LEFT)
        for _ in range(20):
            game.update(1 / 60)

        assert game.state == GameState.GAME
        assert game.snake.direction == Direction.LEFT
        assert [seg.direction for seg in game.snake.segments] == [
            Direction.RIGHT, Direction.UP, Direction.LEFT,
        ]
        assert game.snake.segments[1].size() >= config.snake_width
        assert not game.snake.self_collides()


class TestEngineFood:
    def test_eating_grows_and_scores(self):
        game = _playing()
        head_end = game.snake.head.end
        game.food = Food(Point(head_end.x + 2.0, head_end.y), game.config.food_size)
        length = game.snake.length()
        game.update_snake(0.016)
        assert game.score == 1
        assert game.snake.length() == pytest.approx(
            length + game.config.growth_per_food,
        )
        assert not game.snake.collides(game.food.bbox)


class TestEngineReset:
    def test_wall_collision_resets(self):
        game = _playing()
        game.score = 3
        game.inputs.append(Direction.UP)
        game.snake.move(400.0)
        game.update_snake(0.016)
        assert game.state == GameState.PRE_GAME
        assert game.score == 0
        assert len(game.inputs) == 0
        assert game.snake.tail.begin == Point(400.0, 300.0)
        assert not game.snake.collides(game.food.bbox)

    def test_self_collision_resets(self):
        game = _playing()
        game.score = 2
        snake = Snake(400.0, 300.0, Direction.RIGHT, initial_length=100.0)
        snake.turn(Direction.UP)
        snake.move(5.0)
        snake.turn(Direction.LEFT)
        snake.move(20.0)
        assert snake.self_collides()
        game.snake = snake
        game.update_snake(0.016)
        assert game.state == GameState.PRE_GAME
        assert game.score == 0
        assert len(game.snake.segments) == 1


class TestEngineSerialization:
    def test_state_is_json_serializable(self):
        game = _playing(seed=42)
        game.update(0.016)
        serialized = json.dumps(game.get_state())
        assert isinstance(serialized, str)

    def test_state_structure(self):
        state = GameData(GameConfig(seed=0)).get_state()
        assert set(state) == {"frame", "state", "score", "snake", "food", "field"}
        assert state["field"] == [0.0, 0.0, 800.0, 600.0]


class TestEngineDeterminism:
    def test_same_seed_same_food(self):
        a = GameData(GameConfig(seed=123))
        b = GameData(GameConfig(seed=123))
        assert a.food == b.food

    def test_same_seed_same_outcome(self):
        """Two games with the same seed and inputs produce identical states."""
        inputs = {5: Direction.UP, 30: Direction.LEFT, 60: Direction.DOWN}
        assert self._run(123, inputs) == self._run(123, inputs)

    @staticmethod
    def _run(seed: int, inputs: dict[int, Direction]) -> dict:
        game = GameData(GameConfig(seed=seed))
        game.push_input(Direction.RIGHT)
        for frame in range(90):
            if frame in inputs:
                game.push_input(inputs[frame])
            game.update(1 / 60)
        return game.get_state()
