"""
bskatar — FastAPI application.

Holds one ``AvatarSession`` in ``app.state`` and exposes it to the editor UI
and the renderer.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import settings
from .health import router as health_router
from .router import router as avatar_router
from .session import AvatarSession


@asynccontextmanager
async def lifespan(app: FastAPI):
    logging.basicConfig(level=settings.BSKATAR_LOG_LEVEL.upper())
    logger = logging.getLogger("bskatar")
    logger.info(f"Starting {settings.SERVICE_NAME} v{settings.SERVICE_VERSION}")
    logger.info(f"PDS URL: {settings.BSKATAR_SERVICE_URL}")
    yield
    logger.info(f"Shutting down {settings.SERVICE_NAME}")


def create_app() -> FastAPI:
    app = FastAPI(
        title="bskatar",
        description="Low-poly avatar builder backed by AT Protocol records.",
        version=settings.SERVICE_VERSION,
        lifespan=lifespan,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins or ["http://localhost:5173"],
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.include_router(health_router)
    app.include_router(avatar_router)
    app.state.session = AvatarSession()
    return app


app = create_app()
