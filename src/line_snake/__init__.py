"""Line Snake — continuous-motion snake game core."""

from line_snake.config import GameConfig
from line_snake.direction import Direction
from line_snake.engine import GameData, GameState
from line_snake.food import Food, FoodSpawner
from line_snake.geometry import Point, Rect
from line_snake.segment import Line
from line_snake.snake import Snake

__all__ = [
    "Direction",
    "Food",
    "FoodSpawner",
    "GameConfig",
    "GameData",
    "GameState",
    "Line",
    "Point",
    "Rect",
    "Snake",
]
