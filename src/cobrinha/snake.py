"""Snake representation and direction handling."""

from __future__ import annotations

import enum
from collections import deque
from collections.abc import Iterable

from cobrinha.grid import Cell


class Direction(enum.Enum):
    """Cardinal movement directions with (dx, dy) values."""

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def opposite(self) -> Direction:
        dx, dy = self.value
        return Direction((-dx, -dy))

    def is_reverse_of(self, other: Direction) -> bool:
        """Return True if moving this way would turn straight back."""
        return self.opposite is other


class Snake:
    """A snake represented as an ordered deque of (x, y) body cells.

    The head is ``body[0]``; the tail is ``body[-1]``.
    """

    def __init__(self, cells: Iterable[Cell]) -> None:
        self.body: deque[Cell] = deque(cells)
        if not self.body:
            raise ValueError("Snake length must be at least 1.")
        if len(set(self.body)) != len(self.body):
            raise ValueError("Snake cells must be unique.")

    def __len__(self) -> int:
        return len(self.body)

    @property
    def head(self) -> Cell:
        """Return the head coordinate."""
        return self.body[0]

    def next_head(self, direction: Direction) -> Cell:
        """Compute the next head position without moving or wrapping."""
        dx, dy = direction.value
        x, y = self.head
        return x + dx, y + dy

    def occupies(self, cell: Cell) -> bool:
        """Check whether the snake occupies a given cell."""
        return cell in self.body

    def advance(self, new_head: Cell, grow: bool = False) -> Cell | None:
        """Push *new_head* onto the front of the body.

        Returns the vacated tail cell, or ``None`` if the snake grew.
        """
        self.body.appendleft(new_head)
        if grow:
            return None
        return self.body.pop()

    def to_dict(self) -> dict:
        """Serialize snake state to a dictionary."""
        return {"body": [list(cell) for cell in self.body]}
