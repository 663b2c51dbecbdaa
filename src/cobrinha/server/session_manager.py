"""Registry of live game sessions sharing one best-score store."""

from __future__ import annotations

import asyncio
import logging

from cobrinha.config import GameConfig
from cobrinha.session import FrameListener, GameSession
from cobrinha.storage import BestScore, JsonFileStore, KeyValueStore

logger = logging.getLogger(__name__)


class SessionManager:
    """Creates one :class:`GameSession` per connected client.

    Every session persists its best score into the same store, so the
    best survives both reconnects and server restarts when the store is
    file-backed.
    """

    def __init__(
        self,
        config: GameConfig | None = None,
        store: KeyValueStore | None = None,
    ) -> None:
        self.config = config if config is not None else GameConfig()
        self.store = (
            store if store is not None
            else JsonFileStore(self.config.storage_path)
        )
        self._sessions: set[GameSession] = set()

    @property
    def active_count(self) -> int:
        return len(self._sessions)

    def best(self) -> int:
        """Return the persisted best score."""
        return BestScore(self.store, key=self.config.best_key).load()

    def open_session(
        self,
        on_frame: FrameListener | None = None,
        on_game_over: FrameListener | None = None,
    ) -> GameSession:
        """Create and register a fresh session; it draws its first frame."""
        session = GameSession(
            self.config,
            store=self.store,
            on_frame=on_frame,
            on_game_over=on_game_over,
        )
        self._sessions.add(session)
        logger.info("Session opened (%d active).", len(self._sessions))
        return session

    async def close_session(self, session: GameSession) -> None:
        """Stop a session's timer and forget it."""
        self._sessions.discard(session)
        await session.aclose()
        logger.info("Session closed (%d active).", len(self._sessions))

    async def cleanup(self) -> None:
        """Stop every live session's timer."""
        sessions = list(self._sessions)
        self._sessions.clear()
        if sessions:
            await asyncio.gather(
                *(s.aclose() for s in sessions), return_exceptions=True,
            )
        logger.info("SessionManager cleanup complete.")
