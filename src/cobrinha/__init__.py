"""Cobrinha: wrap-around snake game core."""

from cobrinha.config import GameConfig
from cobrinha.engine import GameEngine, SelfCollision
from cobrinha.grid import Grid
from cobrinha.session import GameSession, RunState
from cobrinha.snake import Direction, Snake
from cobrinha.storage import BestScore, JsonFileStore, MemoryStore

__all__ = [
    "BestScore",
    "Direction",
    "GameConfig",
    "GameEngine",
    "GameSession",
    "Grid",
    "JsonFileStore",
    "MemoryStore",
    "RunState",
    "SelfCollision",
    "Snake",
]
