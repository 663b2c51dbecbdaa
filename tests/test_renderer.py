"""Tests for the renderer and canvas implementations."""

import pytest

from cobrinha.grid import Grid
from cobrinha.renderer import CommandCanvas, Palette, Renderer
from cobrinha.snake import Snake


class TestRendererCommands:
    def _draw(self, snake, food):
        canvas = CommandCanvas(60, 40)
        Renderer(cell_size=20).draw(canvas, Grid(cols=3, rows=2), snake, food)
        return canvas.ops

    def test_starts_with_clear(self):
        ops = self._draw(Snake([(0, 0)]), None)
        assert ops[0] == {"op": "clear"}

    def test_grid_lines_on_every_boundary(self):
        ops = self._draw(None, None)
        lines = [op for op in ops if op["op"] == "line"]
        assert len(lines) == (3 + 1) + (2 + 1)
        assert all(op["color"] == Palette().grid_line for op in lines)

    def test_food_then_head_then_body(self):
        ops = self._draw(Snake([(1, 0), (0, 0)]), (2, 1))
        rects = [op for op in ops if op["op"] == "rect"]
        palette = Palette()
        assert rects == [
            {"op": "rect", "x": 41, "y": 21, "w": 18, "h": 18, "color": palette.food},
            {"op": "rect", "x": 21, "y": 1, "w": 18, "h": 18, "color": palette.head},
            {"op": "rect", "x": 1, "y": 1, "w": 18, "h": 18, "color": palette.body},
        ]

    def test_redraw_replaces_previous_ops(self):
        canvas = CommandCanvas(60, 40)
        renderer = Renderer(cell_size=20)
        grid = Grid(cols=3, rows=2)
        renderer.draw(canvas, grid, Snake([(0, 0)]), None)
        first = list(canvas.ops)
        renderer.draw(canvas, grid, Snake([(0, 0)]), None)
        assert canvas.ops == first

    def test_cell_size_minimum(self):
        with pytest.raises(ValueError, match="at least 3"):
            Renderer(cell_size=2)


class TestRendererRaster:
    @pytest.fixture()
    def canvas(self, array_canvas):
        canvas = array_canvas(60, 40)
        Renderer(cell_size=20).draw(
            canvas, Grid(cols=3, rows=2), Snake([(1, 0), (0, 0)]), (2, 1),
        )
        return canvas

    def test_shape(self, canvas):
        assert canvas.pixels.shape == (40, 60, 3)

    def test_head_and_body_colors_differ(self, canvas):
        assert canvas.pixel(30, 10) == (0x4A, 0xDE, 0x80)
        assert canvas.pixel(10, 10) == (0x9E, 0xE7, 0xB7)

    def test_food_color(self, canvas):
        assert canvas.pixel(50, 30) == (0xFF, 0x6B, 0x6B)

    def test_empty_cell_is_background(self, canvas):
        assert canvas.pixel(50, 10) == (0, 0, 0)

    def test_grid_line_is_faint(self, canvas):
        assert canvas.pixel(20, 5) == (5, 5, 5)

    def test_renders_without_snake_or_food(self, array_canvas):
        canvas = array_canvas(60, 40)
        Renderer(cell_size=20).draw(canvas, Grid(cols=3, rows=2), None, None)
        assert canvas.pixel(10, 10) == (0, 0, 0)
        assert canvas.pixel(20, 5) == (5, 5, 5)

    def test_diagonal_line_rejected(self, array_canvas):
        with pytest.raises(ValueError, match="axis-aligned"):
            array_canvas(10, 10).stroke_line(0, 0, 5, 5, "#ffffff")
