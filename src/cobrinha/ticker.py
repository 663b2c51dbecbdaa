"""Repeating asyncio timer driving the game tick."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable

logger = logging.getLogger(__name__)


def interval_for(speed: float) -> int:
    """Return the tick interval in milliseconds for *speed* ticks/second."""
    if speed <= 0:
        raise ValueError("speed must be positive.")
    return round(1000 / speed)


class Ticker:
    """Invokes a callback every ``interval_ms`` milliseconds.

    At most one tick task exists at a time. The timer must be started
    from inside a running event loop; callbacks run on that loop, so they
    never overlap with other callbacks scheduled there.
    """

    def __init__(self, callback: Callable[[], None]) -> None:
        self._callback = callback
        self._task: asyncio.Task | None = None
        self._retired: asyncio.Task | None = None
        self.interval_ms: int | None = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self, interval_ms: int) -> None:
        """Begin ticking; no-op if already running."""
        if self.running:
            return
        if interval_ms < 1:
            raise ValueError("interval_ms must be at least 1.")
        self.interval_ms = interval_ms
        self._task = asyncio.get_running_loop().create_task(self._loop())

    def stop(self) -> None:
        """Cancel the tick task; no-op if not running."""
        task, self._task = self._task, None
        if task is not None and not task.done():
            task.cancel()
            self._retired = task

    def restart(self, interval_ms: int) -> None:
        """Replace the running timer with one at a new interval."""
        self.stop()
        self.start(interval_ms)

    async def aclose(self) -> None:
        """Stop ticking and wait for the task to finish cancelling."""
        self.stop()
        task, self._retired = self._retired, None
        if task is not None and task is not asyncio.current_task():
            await asyncio.gather(task, return_exceptions=True)

    async def _loop(self) -> None:
        interval = self.interval_ms / 1000.0
        me = asyncio.current_task()
        try:
            while self._task is me:
                await asyncio.sleep(interval)
                if self._task is not me:
                    break
                self._callback()
        except asyncio.CancelledError:
            logger.debug("Ticker cancelled.")
            raise
        except Exception:
            logger.exception("Tick callback failed; stopping ticker.")
            if self._task is me:
                self._task = None
