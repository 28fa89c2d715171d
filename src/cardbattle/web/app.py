"""FastAPI application for playing a card battle from a browser."""

from __future__ import annotations

import asyncio
import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from cardbattle.playtest.manager import GameManager
from cardbattle.web.dependencies import get_manager
from cardbattle.web.routes import game

logger = logging.getLogger(__name__)

# Real seconds between clock polls
TICK_POLL_SECONDS = float(os.environ.get("CARDBATTLE_TICK_POLL", "0.25"))


async def run_ticker(manager: GameManager, poll: float = TICK_POLL_SECONDS, speed: float = 1.0) -> None:
    """Feed elapsed event-loop time into the manager until cancelled."""
    loop = asyncio.get_running_loop()
    last = loop.time()
    while True:
        await asyncio.sleep(poll)
        now = loop.time()
        manager.tick((now - last) * speed)
        last = now


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    # Startup
    manager = get_manager()
    ticker = asyncio.create_task(run_ticker(manager))
    logger.info("Game clock started")

    yield

    # Shutdown
    ticker.cancel()
    try:
        await ticker
    except asyncio.CancelledError:
        pass
    manager.loop.stop()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="CardBattle",
        description="East vs West card battles against the AI opponent",
        version="0.1.0",
        lifespan=lifespan,
    )

    # CORS for frontend dev
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["http://localhost:5173"],  # Vite dev server
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Health check
    @app.get("/health")
    async def health():
        return {"status": "ok"}

    app.include_router(game.router, prefix="/api", tags=["game"])

    return app


# Default app instance
app = create_app()
