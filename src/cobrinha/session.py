"""Game session: one engine, one tick timer and the best-score binding."""

from __future__ import annotations

import enum
import logging
from collections.abc import Callable

import numpy as np

from cobrinha.config import GameConfig
from cobrinha.engine import GameEngine, SelfCollision
from cobrinha.grid import Grid
from cobrinha.renderer import CommandCanvas, Renderer
from cobrinha.storage import BestScore, KeyValueStore, MemoryStore
from cobrinha.ticker import Ticker, interval_for

logger = logging.getLogger(__name__)

FrameListener = Callable[[dict], None]


class RunState(str, enum.Enum):
    """Whether the tick timer is active."""

    STOPPED = "stopped"
    RUNNING = "running"


class GameSession:
    """Owns the state of one game and the operations wired to its controls.

    All operations, including the tick, are plain synchronous callbacks
    executed on one event loop, so they never interleave. Listeners get a
    ``frame`` event after every redraw and a ``game_over`` event when the
    snake runs into itself.
    """

    def __init__(
        self,
        config: GameConfig | None = None,
        store: KeyValueStore | None = None,
        rng: np.random.Generator | None = None,
        on_frame: FrameListener | None = None,
        on_game_over: FrameListener | None = None,
        autoreset: bool = True,
    ) -> None:
        self.config = config if config is not None else GameConfig()
        self.grid = Grid.from_canvas(
            self.config.canvas_width,
            self.config.canvas_height,
            self.config.cell_size,
        )
        if rng is None:
            rng = np.random.default_rng(self.config.seed)
        self.engine = GameEngine(self.grid, rng=rng)
        self.best_score = BestScore(
            store if store is not None else MemoryStore(),
            key=self.config.best_key,
        )
        self.renderer = Renderer(self.config.cell_size)
        self.ticker = Ticker(self._tick)
        self.speed = self.config.speed
        self.best = self.best_score.load()
        self.last_frame: dict | None = None
        self._on_frame = on_frame
        self._on_game_over = on_game_over

        if autoreset:
            self._reset_state()

    @property
    def run_state(self) -> RunState:
        return RunState.RUNNING if self.ticker.running else RunState.STOPPED

    @property
    def running(self) -> bool:
        return self.ticker.running

    def start(self) -> None:
        """Start ticking; resets first if there is no live snake."""
        if self.running:
            return
        if not self.engine.initialized or self.engine.game_over:
            self._reset_state()
        self.ticker.start(interval_for(self.speed))
        logger.info("Session started at %d ticks/s.", self.speed)

    def pause(self) -> None:
        """Stop ticking; no-op if already stopped."""
        if not self.running:
            return
        self.ticker.stop()
        logger.info("Session paused at tick %d.", self.engine.tick)
        self._draw()

    def toggle(self) -> None:
        """Pause if running, start otherwise."""
        if self.running:
            self.pause()
        else:
            self.start()

    def reset(self) -> None:
        """Stop any run in progress and start over from a fresh board."""
        self.ticker.stop()
        self._reset_state()

    def set_speed(self, speed: int) -> None:
        """Change the tick rate, keeping the game state intact."""
        if not self.config.min_speed <= speed <= self.config.max_speed:
            raise ValueError(
                f"speed must lie between {self.config.min_speed} "
                f"and {self.config.max_speed}.",
            )
        self.speed = speed
        if self.running:
            self.ticker.restart(interval_for(speed))
        logger.info("Speed set to %d ticks/s.", speed)
        self._draw()

    async def aclose(self) -> None:
        """Stop the timer and wait for its task to wind down."""
        await self.ticker.aclose()

    def _reset_state(self) -> None:
        self.engine.reset()
        self.best = self.best_score.load()
        self._draw()

    def _tick(self) -> None:
        try:
            self.engine.step()
        except SelfCollision as exc:
            self._game_over(exc.score)
            return
        self._draw()

    def _game_over(self, score: int) -> None:
        self.ticker.stop()
        self.best_score.save_if_better(score)
        self.best = self.best_score.load()
        logger.info("Game over with score %d (best %d).", score, self.best)
        if self._on_game_over is not None:
            self._on_game_over(
                {"type": "game_over", "score": score, "best": self.best},
            )

    def _draw(self) -> None:
        canvas = CommandCanvas(self.config.canvas_width, self.config.canvas_height)
        self.renderer.draw(canvas, self.grid, self.engine.snake, self.engine.food)
        frame = {
            "type": "frame",
            **self.engine.get_state(),
            "best": self.best,
            "speed": self.speed,
            "run_state": self.run_state.value,
            "ops": canvas.ops,
        }
        self.last_frame = frame
        if self._on_frame is not None:
            self._on_frame(frame)
