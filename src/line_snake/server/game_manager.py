"""In-memory game registry, lifecycle management, and async frame loops."""

from __future__ import annotations

import asyncio
import json
import logging
import time
import uuid
from dataclasses import dataclass, field, replace

from starlette.websockets import WebSocket, WebSocketState

from line_snake.config import GameConfig
from line_snake.direction import Direction
from line_snake.engine import GameData
from line_snake.server.models import GameStatus, GameSummary

logger = logging.getLogger(__name__)

_MAX_FINISHED_GAMES = 100


@dataclass
class GameSession:
    """All state for a single game."""

    game_id: str
    engine: GameData
    status: GameStatus = GameStatus.ACTIVE
    viewers: list[WebSocket] = field(default_factory=list)
    created_at: float = field(default_factory=time.monotonic)
    finished_at: float | None = None
    lock: asyncio.Lock = field(default_factory=asyncio.Lock)
    _task: asyncio.Task | None = field(default=None, repr=False)

    @property
    def config(self) -> GameConfig:
        return self.engine.config

    def summary(self) -> GameSummary:
        return GameSummary(
            game_id=self.game_id,
            status=self.status,
            state=self.engine.state.value,
            score=self.engine.score,
            frame=self.engine.frame,
            fps=self.config.fps,
        )


class GameManager:
    """Central registry managing all game sessions."""

    def __init__(
        self,
        base_config: GameConfig | None = None,
        max_finished_games: int = _MAX_FINISHED_GAMES,
    ) -> None:
        if max_finished_games < 0:
            raise ValueError("max_finished_games must be >= 0.")
        self._base_config = base_config if base_config is not None else GameConfig()
        self._games: dict[str, GameSession] = {}
        self._max_finished_games = max_finished_games

    def create_game(self, **overrides) -> GameSession:
        """Create a session and start its frame loop.

        *overrides* replace fields of the base config; invalid values raise
        ``ValueError``.
        """
        config = replace(self._base_config, **overrides)
        game_id = uuid.uuid4().hex[:12]
        session = GameSession(game_id=game_id, engine=GameData(config))
        self._games[game_id] = session
        session._task = asyncio.create_task(self._frame_loop(session))
        logger.info("Game %s created (fps=%d).", game_id, config.fps)
        return session

    def get_game(self, game_id: str) -> GameSession | None:
        return self._games.get(game_id)

    def list_games(self) -> list[GameSummary]:
        """Return summaries of non-finished games."""
        return [
            g.summary() for g in self._games.values()
            if g.status != GameStatus.FINISHED
        ]

    async def push_input(self, game_id: str, direction: Direction) -> None:
        """Queue a direction for the given game."""
        game = self._games.get(game_id)
        if game is None:
            raise KeyError(f"Game {game_id} not found.")
        async with game.lock:
            # stop_game may finish while this call waits for the lock.
            if game.status != GameStatus.ACTIVE:
                raise ValueError("Game is not active.")
            game.engine.push_input(direction)

    async def stop_game(self, game_id: str) -> None:
        """Stop a game's frame loop and close its viewers."""
        game = self._games.get(game_id)
        if game is None:
            raise KeyError(f"Game {game_id} not found.")
        self._mark_game_finished(game)
        if game._task and not game._task.done():
            game._task.cancel()
            await asyncio.gather(game._task, return_exceptions=True)
        await self._close_connections(game)
        self._prune_finished_games()
        logger.info("Game %s stopped.", game_id)

    async def _frame_loop(self, game: GameSession) -> None:
        """Run the game frame loop, broadcasting state each frame."""
        interval = game.config.frame_interval
        last = time.monotonic()
        try:
            while game.status == GameStatus.ACTIVE:
                await asyncio.sleep(interval)
                now = time.monotonic()
                async with game.lock:
                    state = game.engine.update(now - last)
                last = now
                await self._broadcast(game, state)
        except asyncio.CancelledError:
            logger.info("Frame loop cancelled for game %s.", game.game_id)
        except Exception:
            logger.exception("Frame loop error in game %s.", game.game_id)
            self._mark_game_finished(game)
        finally:
            if game.status == GameStatus.FINISHED:
                await self._close_connections(game)
                self._prune_finished_games()

    def _mark_game_finished(self, game: GameSession) -> None:
        """Transition a game to finished exactly once."""
        if game.status != GameStatus.FINISHED:
            game.status = GameStatus.FINISHED
            game.finished_at = time.monotonic()

    async def _close_connections(self, game: GameSession) -> None:
        """Close any live viewer sockets for a finished game."""
        for ws in list(game.viewers):
            try:
                if ws.client_state == WebSocketState.CONNECTED:
                    await ws.close(code=1000, reason="Game finished.")
            except Exception:
                logger.warning("Failed closing viewer socket in game %s.", game.game_id)
        game.viewers.clear()

    def _prune_finished_games(self) -> None:
        """Forget the oldest finished sessions beyond the retention limit."""
        finished = sorted(
            (g for g in self._games.values() if g.status == GameStatus.FINISHED),
            key=lambda g: g.finished_at or g.created_at,
        )
        stale = finished[: max(0, len(finished) - self._max_finished_games)]
        for game in stale:
            del self._games[game.game_id]
        if stale:
            logger.info(
                "Dropped %d finished games; %d retained.",
                len(stale), len(finished) - len(stale),
            )

    async def _broadcast(self, game: GameSession, state: dict) -> None:
        """Send game state to all connected viewers."""
        if not game.viewers:
            return
        payload = json.dumps(state, separators=(",", ":"))
        dead: list[WebSocket] = []

        # Iterate over a snapshot so disconnect handlers can mutate the live
        # viewer list without affecting this send loop.
        for ws in list(game.viewers):
            try:
                if ws.client_state == WebSocketState.CONNECTED:
                    await ws.send_text(payload)
            except Exception:
                dead.append(ws)

        for ws in dead:
            if ws in game.viewers:
                game.viewers.remove(ws)

    async def cleanup(self) -> None:
        """Cancel all running frame loops."""
        tasks = [
            g._task for g in self._games.values()
            if g._task and not g._task.done()
        ]
        for task in tasks:
            task.cancel()
        if tasks:
            await asyncio.gather(*tasks, return_exceptions=True)
        logger.info("GameManager cleanup complete.")
