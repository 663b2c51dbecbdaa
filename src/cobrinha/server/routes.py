"""HTTP route handlers: the game page and read-only settings."""

from __future__ import annotations

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse

from cobrinha.server.models import BestResponse, ConfigResponse
from cobrinha.server.page import render_page
from cobrinha.server.session_manager import SessionManager

router = APIRouter()


def _get_manager(request: Request) -> SessionManager:
    return request.app.state.session_manager


@router.get("/", response_class=HTMLResponse)
async def index(request: Request) -> HTMLResponse:
    """Serve the game page."""
    return HTMLResponse(render_page(_get_manager(request).config))


@router.get("/config")
async def get_config(request: Request) -> ConfigResponse:
    """Board geometry and speed range."""
    config = _get_manager(request).config
    return ConfigResponse(
        cols=config.cols,
        rows=config.rows,
        cell_size=config.cell_size,
        canvas_width=config.canvas_width,
        canvas_height=config.canvas_height,
        speed=config.speed,
        min_speed=config.min_speed,
        max_speed=config.max_speed,
    )


@router.get("/best")
async def get_best(request: Request) -> BestResponse:
    """Persisted best score."""
    return BestResponse(best=_get_manager(request).best())
