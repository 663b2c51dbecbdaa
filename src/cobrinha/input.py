"""Keyboard and swipe input mapped onto the buffered direction."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from cobrinha.snake import Direction

if TYPE_CHECKING:
    from cobrinha.session import GameSession

logger = logging.getLogger(__name__)

SWIPE_THRESHOLD = 20

_KEY_MAP: dict[str, Direction] = {
    "ArrowUp": Direction.UP,
    "ArrowDown": Direction.DOWN,
    "ArrowLeft": Direction.LEFT,
    "ArrowRight": Direction.RIGHT,
    "w": Direction.UP,
    "s": Direction.DOWN,
    "a": Direction.LEFT,
    "d": Direction.RIGHT,
}

_TOGGLE_KEY = " "


class InputAdapter:
    """Translates raw key and touch events into session commands.

    Direction requests only ever reach the engine's buffered slot; the
    engine rejects reversals of the current direction.
    """

    def __init__(
        self,
        session: GameSession,
        swipe_threshold: int = SWIPE_THRESHOLD,
    ) -> None:
        self.session = session
        self.swipe_threshold = swipe_threshold
        self._touch_start: tuple[float, float] | None = None

    def handle_key(self, key: str) -> bool:
        """Handle a key press. Returns False for keys with no binding."""
        if key == _TOGGLE_KEY:
            self.session.toggle()
            return True
        direction = _KEY_MAP.get(key)
        if direction is None and len(key) == 1:
            direction = _KEY_MAP.get(key.lower())
        if direction is None:
            logger.debug("Ignoring unbound key %r.", key)
            return False
        self.session.engine.set_direction(direction)
        return True

    def touch_start(self, x: float, y: float) -> None:
        self._touch_start = (x, y)

    def touch_end(self, x: float, y: float) -> Direction | None:
        """Finish a swipe; returns the requested direction, if any."""
        if self._touch_start is None:
            return None
        sx, sy = self._touch_start
        self._touch_start = None

        direction = self.swipe_direction(x - sx, y - sy)
        if direction is not None:
            self.session.engine.set_direction(direction)
        return direction

    def swipe_direction(self, dx: float, dy: float) -> Direction | None:
        """Classify a displacement by its dominant axis."""
        limit = self.swipe_threshold
        if abs(dx) > abs(dy):
            if dx > limit:
                return Direction.RIGHT
            if dx < -limit:
                return Direction.LEFT
        else:
            if dy > limit:
                return Direction.DOWN
            if dy < -limit:
                return Direction.UP
        return None
