"""FastAPI application factory with lifespan management."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from geocoin.api.dependencies import set_session_manager
from geocoin.api.routes import api_router
from geocoin.api.session_manager import SessionManager
from geocoin.config import GameConfig
from geocoin.utils.logging import setup_logging

logger = logging.getLogger(__name__)


def create_app(config: GameConfig | None = None) -> FastAPI:
    """Build and return the fully-configured FastAPI application."""
    if config is None:
        config = GameConfig()

    _config = config

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        setup_logging(_config)
        set_session_manager(SessionManager(_config))
        logger.info("API server started: session ready.")
        yield
        set_session_manager(None)
        logger.info("API server shutting down.")

    app = FastAPI(
        title="Geocoin Carrier",
        description=(
            "Grid-cell coin caches on a geographic map.\n\n"
            "## API Groups\n\n"
            "- **State**: Full session snapshot and event feed\n"
            "- **Player**: Player position, inventory and movement\n"
            "- **Caches**: Visible caches; take and deposit coins\n"
            "- **Control**: Session reset\n"
            "- **Config**: Read-only game configuration\n"
        ),
        version="0.1.0",
        lifespan=lifespan,
        openapi_tags=[
            {"name": "State", "description": "Session snapshot polled by the map client: player, visible caches, totals, events."},
            {"name": "Player", "description": "Player position and inventory. Moving one tile spawns caches around the new position."},
            {"name": "Caches", "description": "Caches within the visibility radius. Take pops the top coin; deposit pushes the player's last coin."},
            {"name": "Control", "description": "Rebuild the session from its configuration."},
            {"name": "Config", "description": "Read-only game configuration (origin, tile size, radii, spawn policy)."},
        ],
    )

    # CORS: allow any origin in dev
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(api_router)

    return app
