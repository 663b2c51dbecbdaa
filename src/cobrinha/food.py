"""Food placement logic."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from cobrinha.grid import Cell, Grid
    from cobrinha.snake import Snake

logger = logging.getLogger(__name__)


class FoodSpawner:
    """Places food on a random cell not covered by the snake.

    Candidates are drawn uniformly from the whole grid and redrawn until
    one lands on a free cell. Uses a NumPy RNG so placement is
    reproducible when seeded.
    """

    def __init__(
        self,
        grid: Grid,
        rng: np.random.Generator | None = None,
    ) -> None:
        self.grid = grid
        self.rng = rng if rng is not None else np.random.default_rng()

    def place(self, snake: Snake) -> Cell | None:
        """Return a free cell for the next food item.

        Returns ``None`` when the snake covers every cell of the grid.
        """
        if len(snake) >= self.grid.size:
            logger.warning("No free cells left for food placement.")
            return None

        while True:
            x = int(self.rng.integers(self.grid.cols))
            y = int(self.rng.integers(self.grid.rows))
            if not snake.occupies((x, y)):
                return x, y
