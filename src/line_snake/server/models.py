"""Pydantic models for API request/response schemas."""

from __future__ import annotations

import enum
from typing import Literal

from pydantic import BaseModel, Field


class GameStatus(str, enum.Enum):
    """Lifecycle states for a game session."""

    ACTIVE = "active"
    FINISHED = "finished"


class CreateGameRequest(BaseModel):
    """Request body for POST /games. Omitted fields use config defaults."""

    field_width: float | None = Field(default=None, gt=0)
    field_height: float | None = Field(default=None, gt=0)
    snake_width: float | None = Field(default=None, gt=0)
    initial_length: float | None = Field(default=None, ge=0)
    start_direction: Literal["up", "down", "left", "right"] | None = None
    food_size: float | None = Field(default=None, gt=0)
    growth_per_food: float | None = Field(default=None, ge=0)
    speed: float | None = Field(default=None, gt=0)
    secs_per_input_update: float | None = Field(default=None, ge=0)
    fps: int | None = Field(default=None, ge=1, le=240)
    seed: int | None = None

    def overrides(self) -> dict:
        """Return only the fields the client set."""
        return self.model_dump(exclude_none=True)


class InputRequest(BaseModel):
    """Request body for POST /games/{game_id}/input."""

    direction: Literal["up", "down", "left", "right"]


class GameSummary(BaseModel):
    """Compact game info for list endpoints."""

    game_id: str
    status: GameStatus
    state: str
    score: int
    frame: int
    fps: int
