"""Step-based game engine composing grid, snake, and food logic."""

from __future__ import annotations

import logging

import numpy as np

from cobrinha.food import FoodSpawner
from cobrinha.grid import Cell, Grid
from cobrinha.snake import Direction, Snake

logger = logging.getLogger(__name__)


class SelfCollision(Exception):
    """Raised when the snake's next head lands on its own body."""

    def __init__(self, score: int, head: Cell) -> None:
        super().__init__(f"Snake collided with itself at {head} (score {score}).")
        self.score = score
        self.head = head


class GameEngine:
    """Single-snake, step-based game engine on a wrap-around grid.

    The engine owns the snake, the food cell, and the current and
    buffered directions. Input only ever writes the buffered direction;
    :meth:`step` applies it and advances the game by one tick.
    """

    def __init__(
        self,
        grid: Grid,
        rng: np.random.Generator | None = None,
        seed: int | None = None,
    ) -> None:
        self.grid = grid
        self.rng = rng if rng is not None else np.random.default_rng(seed)
        self.food_spawner = FoodSpawner(grid, rng=self.rng)

        self.snake: Snake | None = None
        self.direction = Direction.RIGHT
        self._pending_direction = Direction.RIGHT
        self.food: Cell | None = None
        self.score = 0
        self.tick = 0
        self.game_over = False

    @property
    def initialized(self) -> bool:
        return self.snake is not None

    @property
    def buffered_direction(self) -> Direction:
        return self._pending_direction

    def reset(self) -> None:
        """Start over with a one-cell snake in the middle of the grid."""
        self.snake = Snake([self.grid.center()])
        self.direction = Direction.RIGHT
        self._pending_direction = Direction.RIGHT
        self.score = 0
        self.tick = 0
        self.game_over = False
        self.food = self.food_spawner.place(self.snake)

    def set_direction(self, direction: Direction) -> bool:
        """Buffer a direction change for the next step.

        Reversals of the current direction are rejected. Returns whether
        the request was accepted.
        """
        if direction.is_reverse_of(self.direction):
            return False
        self._pending_direction = direction
        return True

    def step(self) -> dict:
        """Advance the game by one tick.

        Returns the full game state as a serializable dict. Raises
        :class:`SelfCollision` when the snake runs into itself; the snake
        is left as it was before the fatal move.
        """
        if self.snake is None:
            raise RuntimeError("Engine must be reset before stepping.")
        if self.game_over:
            raise RuntimeError("Game is over; reset before stepping again.")

        self.direction = self._pending_direction
        new_head = self.grid.wrap(*self.snake.next_head(self.direction))

        if self.snake.occupies(new_head):
            self.game_over = True
            logger.info(
                "Snake collided with itself at tick %d with score %d.",
                self.tick, self.score,
            )
            raise SelfCollision(self.score, new_head)

        ate = self.food is not None and new_head == self.food
        self.snake.advance(new_head, grow=ate)
        if ate:
            self.score += 1
            self.food = self.food_spawner.place(self.snake)

        self.tick += 1
        return self.get_state()

    def get_state(self) -> dict:
        """Return the full, serializable game state."""
        return {
            "tick": self.tick,
            "score": self.score,
            "game_over": self.game_over,
            "grid": self.grid.to_dict(),
            "snake": self.snake.to_dict() if self.snake is not None else None,
            "direction": list(self.direction.value),
            "food": list(self.food) if self.food is not None else None,
        }
