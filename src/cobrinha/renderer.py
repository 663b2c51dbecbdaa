"""Drawing of the grid, snake and food onto canvas-like surfaces."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from cobrinha.grid import Cell, Grid
    from cobrinha.snake import Snake


@dataclass(frozen=True)
class Palette:
    """Colors used by the renderer."""

    grid_line: str = "rgba(255,255,255,0.02)"
    food: str = "#ff6b6b"
    head: str = "#4ade80"
    body: str = "#9ee7b7"


class Canvas(Protocol):
    """The subset of a 2D drawing context the renderer needs."""

    width: int
    height: int

    def clear(self) -> None: ...

    def stroke_line(
        self, x0: int, y0: int, x1: int, y1: int, color: str,
    ) -> None: ...

    def fill_rect(self, x: int, y: int, w: int, h: int, color: str) -> None: ...


class CommandCanvas:
    """Records draw calls as JSON-ready operations.

    A browser client replays the operations on a real ``<canvas>``.
    """

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self.ops: list[dict] = []

    def clear(self) -> None:
        self.ops = [{"op": "clear"}]

    def stroke_line(self, x0, y0, x1, y1, color):
        self.ops.append(
            {"op": "line", "from": [x0, y0], "to": [x1, y1], "color": color},
        )

    def fill_rect(self, x, y, w, h, color):
        self.ops.append(
            {"op": "rect", "x": x, "y": y, "w": w, "h": h, "color": color},
        )


class Renderer:
    """Stateless painter for the current grid, snake and food."""

    def __init__(self, cell_size: int = 20, palette: Palette | None = None) -> None:
        if cell_size < 3:
            raise ValueError("cell_size must be at least 3.")
        self.cell_size = cell_size
        self.palette = palette if palette is not None else Palette()

    def draw(
        self,
        canvas: Canvas,
        grid: Grid,
        snake: Snake | None,
        food: Cell | None,
    ) -> None:
        canvas.clear()
        self._draw_grid(canvas, grid)

        if food is not None:
            self._draw_cell(canvas, food, self.palette.food)

        if snake is not None:
            for i, cell in enumerate(snake.body):
                color = self.palette.head if i == 0 else self.palette.body
                self._draw_cell(canvas, cell, color)

    def _draw_grid(self, canvas: Canvas, grid: Grid) -> None:
        size = self.cell_size
        for i in range(grid.cols + 1):
            canvas.stroke_line(i * size, 0, i * size, canvas.height, self.palette.grid_line)
        for j in range(grid.rows + 1):
            canvas.stroke_line(0, j * size, canvas.width, j * size, self.palette.grid_line)

    def _draw_cell(self, canvas: Canvas, cell: Cell, color: str) -> None:
        # Inset by one pixel so neighbouring cells stay visually separate.
        x, y = cell
        size = self.cell_size
        canvas.fill_rect(x * size + 1, y * size + 1, size - 2, size - 2, color)
