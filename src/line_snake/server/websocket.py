"""WebSocket handlers for real-time play and spectating."""

from __future__ import annotations

import json
import logging

from fastapi import APIRouter, WebSocket, WebSocketDisconnect

from line_snake.direction import Direction
from line_snake.server.game_manager import GameManager
from line_snake.server.models import GameStatus

logger = logging.getLogger(__name__)

ws_router = APIRouter()


def _get_manager(ws: WebSocket) -> GameManager:
    return ws.app.state.game_manager


def _parse_direction(raw: str) -> Direction | None:
    """Extract a direction from a ``{"direction": ...}`` message."""
    try:
        msg = json.loads(raw)
    except json.JSONDecodeError:
        return None
    if not isinstance(msg, dict):
        return None
    name = msg.get("direction")
    if not isinstance(name, str):
        return None
    try:
        return Direction.from_name(name)
    except ValueError:
        return None


@ws_router.websocket("/games/{game_id}/play")
async def play(websocket: WebSocket, game_id: str) -> None:
    """Player WebSocket: send directions, receive game state each frame."""
    game = _get_manager(websocket).get_game(game_id)
    if game is None or game.status != GameStatus.ACTIVE:
        await websocket.close(code=4004, reason="Game not found.")
        return

    await websocket.accept()
    game.viewers.append(websocket)
    logger.info("Player connected to game %s.", game_id)

    # Send initial state snapshot so the client gets immediate feedback.
    async with game.lock:
        state = game.engine.get_state()
    await websocket.send_text(json.dumps(state, separators=(",", ":")))

    try:
        while True:
            direction = _parse_direction(await websocket.receive_text())
            if direction is None:
                continue
            async with game.lock:
                if game.status == GameStatus.ACTIVE:
                    game.engine.push_input(direction)
    except WebSocketDisconnect:
        logger.info("Player disconnected from game %s.", game_id)
    finally:
        if websocket in game.viewers:
            game.viewers.remove(websocket)


@ws_router.websocket("/games/{game_id}/spectate")
async def spectate(websocket: WebSocket, game_id: str) -> None:
    """Spectator WebSocket: receive-only game state stream."""
    game = _get_manager(websocket).get_game(game_id)
    if game is None:
        await websocket.close(code=4004, reason="Game not found.")
        return

    await websocket.accept()
    game.viewers.append(websocket)
    logger.info("Spectator connected to game %s.", game_id)

    async with game.lock:
        state = game.engine.get_state()
    await websocket.send_text(json.dumps(state, separators=(",", ":")))

    try:
        while True:
            await websocket.receive_text()
    except WebSocketDisconnect:
        logger.info("Spectator disconnected from game %s.", game_id)
    finally:
        if websocket in game.viewers:
            game.viewers.remove(websocket)
