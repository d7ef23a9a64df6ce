"""HTTP API package initialization."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from kantodex import __version__
from kantodex.config import settings
from kantodex.database import close_db, init_db
from kantodex.logging import get_logger

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Open the database and the PokeAPI client for the app's lifetime."""
    await init_db()
    logger.info("Database connection established")

    app.state.catalog_client = httpx.AsyncClient(
        base_url=settings.pokeapi_base_url,
        timeout=settings.http_timeout_seconds,
    )
    try:
        yield
    finally:
        await app.state.catalog_client.aclose()
        await close_db()
        logger.info("API stopped")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(title="Kantodex", version=__version__, lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET", "POST", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type"],
    )

    from kantodex.api.routes import register_all_routes

    register_all_routes(app)

    return app


__all__ = ["create_app"]
