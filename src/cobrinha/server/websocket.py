"""WebSocket handler for real-time play."""

from __future__ import annotations

import asyncio
import json
import logging

from fastapi import APIRouter, WebSocket, WebSocketDisconnect
from pydantic import ValidationError

from cobrinha.input import InputAdapter
from cobrinha.server.models import ClientMessage
from cobrinha.server.session_manager import SessionManager
from cobrinha.session import GameSession

logger = logging.getLogger(__name__)

ws_router = APIRouter()


def _get_manager(ws: WebSocket) -> SessionManager:
    return ws.app.state.session_manager


def _parse(raw: str) -> ClientMessage | None:
    try:
        return ClientMessage.model_validate_json(raw)
    except ValidationError:
        return None


def _dispatch(
    session: GameSession, adapter: InputAdapter, msg: ClientMessage,
) -> None:
    """Apply one client message to the session."""
    if msg.type == "key":
        if msg.key is not None:
            adapter.handle_key(msg.key)
    elif msg.type == "touchstart":
        if msg.x is not None and msg.y is not None:
            adapter.touch_start(msg.x, msg.y)
    elif msg.type == "touchend":
        if msg.x is not None and msg.y is not None:
            adapter.touch_end(msg.x, msg.y)
    elif msg.type == "start":
        session.start()
    elif msg.type == "pause":
        session.pause()
    elif msg.type == "toggle":
        session.toggle()
    elif msg.type == "reset":
        session.reset()
    elif msg.type == "speed":
        if msg.value is None:
            return
        try:
            session.set_speed(msg.value)
        except ValueError:
            logger.debug("Ignoring out-of-range speed %d.", msg.value)


async def _pump(websocket: WebSocket, outbox: asyncio.Queue) -> None:
    """Forward session events to the client in order."""
    while True:
        event = await outbox.get()
        await websocket.send_text(json.dumps(event, separators=(",", ":")))


@ws_router.websocket("/play")
async def play(websocket: WebSocket) -> None:
    """Player WebSocket: send control events, receive frames."""
    manager = _get_manager(websocket)
    await websocket.accept()

    outbox: asyncio.Queue[dict] = asyncio.Queue()
    session = manager.open_session(
        on_frame=outbox.put_nowait, on_game_over=outbox.put_nowait,
    )
    adapter = InputAdapter(session, swipe_threshold=manager.config.swipe_threshold)
    sender = asyncio.create_task(_pump(websocket, outbox))
    logger.info("Player connected.")

    try:
        while True:
            message = await websocket.receive()
            if message["type"] == "websocket.disconnect":
                raise WebSocketDisconnect(message.get("code", 1000))
            raw = message.get("text")
            if raw is None:
                logger.debug("Ignoring non-text message.")
                continue
            msg = _parse(raw)
            if msg is None:
                continue
            _dispatch(session, adapter, msg)
    except WebSocketDisconnect:
        logger.info("Player disconnected.")
    finally:
        sender.cancel()
        await asyncio.gather(sender, return_exceptions=True)
        await manager.close_session(session)
