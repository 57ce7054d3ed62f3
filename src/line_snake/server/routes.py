"""REST API route handlers for game session management."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, Request, Response

from line_snake.direction import Direction
from line_snake.server.models import CreateGameRequest, GameSummary, InputRequest

router = APIRouter(prefix="/games", tags=["games"])


def _get_manager(request: Request):
    return request.app.state.game_manager


@router.post("", status_code=201)
async def create_game(body: CreateGameRequest, request: Request) -> GameSummary:
    """Create a new game session and start its frame loop."""
    manager = _get_manager(request)
    try:
        game = manager.create_game(**body.overrides())
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    return game.summary()


@router.get("")
async def list_games(request: Request) -> list[GameSummary]:
    """List active games."""
    return _get_manager(request).list_games()


@router.get("/{game_id}")
async def get_game(game_id: str, request: Request) -> dict:
    """Get game metadata and the latest frame state."""
    game = _get_manager(request).get_game(game_id)
    if game is None:
        raise HTTPException(status_code=404, detail="Game not found.")
    async with game.lock:
        result = game.summary().model_dump(mode="json")
        result["config"] = game.config.to_dict()
        result["frame_state"] = game.engine.get_state()
    return result


@router.post("/{game_id}/input", status_code=202)
async def push_input(game_id: str, body: InputRequest, request: Request) -> dict:
    """Queue a direction change for the snake."""
    manager = _get_manager(request)
    try:
        await manager.push_input(game_id, Direction.from_name(body.direction))
    except KeyError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except ValueError as exc:
        raise HTTPException(status_code=409, detail=str(exc)) from exc
    return {"status": "queued", "direction": body.direction}


@router.delete("/{game_id}", status_code=204)
async def stop_game(game_id: str, request: Request) -> Response:
    """Stop a game session."""
    try:
        await _get_manager(request).stop_game(game_id)
    except KeyError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    return Response(status_code=204)
