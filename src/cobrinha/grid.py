"""Grid model for the snake game."""

from __future__ import annotations

Cell = tuple[int, int]


class Grid:
    """Fixed-size toroidal grid of ``cols`` × ``rows`` cells.

    Coordinates use (x, y) ordering: ``x`` is the column, ``y`` the row.
    """

    def __init__(self, cols: int = 20, rows: int = 20) -> None:
        if cols < 1 or rows < 1:
            raise ValueError("Grid dimensions must be at least 1×1.")
        self.cols = cols
        self.rows = rows

    @classmethod
    def from_canvas(cls, width: int, height: int, cell_size: int) -> Grid:
        """Derive the grid that fits a drawing surface of the given size."""
        if cell_size < 1:
            raise ValueError("cell_size must be at least 1.")
        return cls(cols=width // cell_size, rows=height // cell_size)

    @property
    def size(self) -> int:
        return self.cols * self.rows

    def wrap(self, x: int, y: int) -> Cell:
        """Wrap coordinates around the grid edges."""
        return x % self.cols, y % self.rows

    def center(self) -> Cell:
        return self.cols // 2, self.rows // 2

    def to_dict(self) -> dict:
        """Serialize grid dimensions to a dictionary."""
        return {"cols": self.cols, "rows": self.rows}
