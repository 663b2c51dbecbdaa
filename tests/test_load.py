"""Load test: many sessions ticking on one event loop."""

from __future__ import annotations

import asyncio

import pytest

from cobrinha.config import GameConfig
from cobrinha.server.session_manager import SessionManager
from cobrinha.storage import MemoryStore


class TestConcurrentSessions:
    @pytest.mark.asyncio
    async def test_50_concurrent_sessions(self):
        """Spin up 50 sessions at top speed; verify all advance and stop."""
        manager = SessionManager(GameConfig(seed=1), MemoryStore())
        sessions = [manager.open_session() for _ in range(50)]
        for session in sessions:
            session.set_speed(20)
            session.start()

        for _ in range(100):
            await asyncio.sleep(0.05)
            if all(s.engine.tick >= 3 for s in sessions):
                break

        advanced = sum(1 for s in sessions if s.engine.tick >= 3)
        assert advanced == 50, f"Only {advanced}/50 sessions advanced"

        await manager.cleanup()
        assert manager.active_count == 0
        assert not any(s.running for s in sessions)

    @pytest.mark.asyncio
    async def test_close_session_stops_ticker(self):
        manager = SessionManager(GameConfig(), MemoryStore())
        session = manager.open_session()
        session.start()
        await manager.close_session(session)
        assert not session.running
        assert manager.active_count == 0
