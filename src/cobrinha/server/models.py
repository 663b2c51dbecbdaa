"""Pydantic models for HTTP responses and WebSocket messages."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

MessageType = Literal[
    "key", "touchstart", "touchend", "start", "pause", "toggle", "reset", "speed",
]


class ClientMessage(BaseModel):
    """A control event sent by the browser over the play socket."""

    type: MessageType
    key: str | None = Field(default=None, max_length=32)
    x: float | None = None
    y: float | None = None
    value: int | None = None


class BestResponse(BaseModel):
    """Response for GET /best."""

    best: int


class ConfigResponse(BaseModel):
    """Board and speed settings the client needs to lay out its controls."""

    cols: int
    rows: int
    cell_size: int
    canvas_width: int
    canvas_height: int
    speed: int
    min_speed: int
    max_speed: int
