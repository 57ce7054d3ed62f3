"""FastAPI application factory."""

from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI

from line_snake.config import GameConfig
from line_snake.server.game_manager import GameManager
from line_snake.server.routes import router
from line_snake.server.websocket import ws_router


def create_app(
    base_config: GameConfig | None = None,
    max_finished_games: int | None = None,
) -> FastAPI:
    """Build the FastAPI application.

    *base_config* supplies the defaults every ``POST /games`` request
    overrides; *max_finished_games* bounds how many stopped sessions stay
    queryable.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        kwargs = {}
        if max_finished_games is not None:
            kwargs["max_finished_games"] = max_finished_games
        app.state.game_manager = GameManager(base_config, **kwargs)
        yield
        await app.state.game_manager.cleanup()

    app = FastAPI(title="Line Snake API", version="0.1.0", lifespan=lifespan)
    app.include_router(router)
    app.include_router(ws_router)
    return app
