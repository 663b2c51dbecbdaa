"""FastAPI application factory."""

from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI

from cobrinha.config import GameConfig
from cobrinha.server.routes import router
from cobrinha.server.session_manager import SessionManager
from cobrinha.server.websocket import ws_router
from cobrinha.storage import KeyValueStore


def create_app(
    config: GameConfig | None = None,
    store: KeyValueStore | None = None,
) -> FastAPI:
    """Build and return the FastAPI application."""

    @asynccontextmanager
    async def _lifespan(app: FastAPI):
        app.state.session_manager = SessionManager(config, store)
        yield
        await app.state.session_manager.cleanup()

    app = FastAPI(title="Cobrinha", version="0.1.0", lifespan=_lifespan)
    app.include_router(router)
    app.include_router(ws_router)
    return app
