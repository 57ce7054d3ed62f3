"""Tests for the in-memory game registry and frame loop."""

from __future__ import annotations

import asyncio

import pytest

from line_snake.config import GameConfig
from line_snake.direction import Direction
from line_snake.engine import GameState
from line_snake.server.game_manager import GameManager
from line_snake.server.models import GameStatus


class TestGameManagerInit:
    def test_invalid_retention(self):
        with pytest.raises(ValueError, match=">= 0"):
            GameManager(max_finished_games=-1)

    def test_invalid_overrides(self):
        manager = GameManager()
        with pytest.raises(ValueError):
            manager.create_game(snake_width=0)
        assert manager.list_games() == []


class TestFrameLoop:
    @pytest.mark.asyncio
    async def test_frames_advance(self):
        manager = GameManager(GameConfig(fps=200))
        game = manager.create_game(seed=1)
        await asyncio.sleep(0.1)
        assert game.engine.frame > 0
        await manager.cleanup()

    @pytest.mark.asyncio
    async def test_push_input(self):
        manager = GameManager()
        game = manager.create_game(seed=1)
        await manager.push_input(game.game_id, Direction.DOWN)
        assert game.engine.state == GameState.GAME
        await manager.cleanup()

    @pytest.mark.asyncio
    async def test_push_input_unknown(self):
        manager = GameManager()
        with pytest.raises(KeyError):
            await manager.push_input("missing", Direction.UP)

    @pytest.mark.asyncio
    async def test_stop_game(self):
        manager = GameManager()
        game = manager.create_game(seed=1)
        await manager.stop_game(game.game_id)
        assert game.status == GameStatus.FINISHED
        assert game._task.done()
        assert manager.list_games() == []
        with pytest.raises(ValueError, match="not active"):
            await manager.push_input(game.game_id, Direction.UP)

    @pytest.mark.asyncio
    async def test_finished_games_pruned(self):
        manager = GameManager(max_finished_games=0)
        game = manager.create_game(seed=1)
        await manager.stop_game(game.game_id)
        assert manager.get_game(game.game_id) is None


class TestInputRace:
    @pytest.mark.asyncio
    async def test_input_waiting_on_lock_rejected_after_stop(self):
        manager = GameManager()
        game = manager.create_game(seed=1)
        async with game.lock:
            pending = asyncio.create_task(
                manager.push_input(game.game_id, Direction.UP),
            )
            await asyncio.sleep(0)
            await manager.stop_game(game.game_id)
        with pytest.raises(ValueError, match="not active"):
            await pending
        assert game.engine.state == GameState.PRE_GAME
        assert len(game.engine.inputs) == 0


class TestRetention:
    @pytest.mark.asyncio
    async def test_oldest_finished_games_dropped(self):
        manager = GameManager(max_finished_games=2)
        games = [manager.create_game(seed=i) for i in range(4)]
        for game in games[:3]:
            await manager.stop_game(game.game_id)
        assert manager.get_game(games[0].game_id) is None
        assert manager.get_game(games[1].game_id) is games[1]
        assert manager.get_game(games[2].game_id) is games[2]
        # Active sessions never count against the limit.
        assert manager.get_game(games[3].game_id) is games[3]
        assert [s.game_id for s in manager.list_games()] == [games[3].game_id]
        await manager.cleanup()
