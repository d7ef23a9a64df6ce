"""Seed the database from PokeAPI.

Creates the 18 types, then fetches Pokemon #1..#dex_size one at a time
and stores any that are missing. Safe to re-run: existing rows are
skipped, never updated.
"""

import asyncio

import httpx

from kantodex.config import settings
from kantodex.core.catalog import SyncResult, sync_catalog
from kantodex.core.pokedex import ensure_types
from kantodex.database import async_session_factory, close_db, init_db
from kantodex.logging import get_logger, setup_logging

logger = get_logger(__name__)


async def seed_types() -> None:
    """Make sure every type row exists."""
    async with async_session_factory() as session:
        created = await ensure_types(session)
    logger.info("Seeded types table", created=created)


async def seed_pokemon() -> SyncResult:
    """Fill missing Pokemon from the catalog."""
    async with httpx.AsyncClient(
        base_url=settings.pokeapi_base_url,
        timeout=settings.http_timeout_seconds,
    ) as client:
        async with async_session_factory() as session:
            return await sync_catalog(session, client, settings.dex_size)


async def main() -> None:
    """Run all seed functions."""
    setup_logging()
    await init_db()

    logger.info("Starting database seeding...", dex_size=settings.dex_size)
    try:
        await seed_types()
        result = await seed_pokemon()
    finally:
        await close_db()

    if result.failed:
        logger.warning("Some Pokemon could not be imported", numbers=result.failed)
    logger.info("Database seeding complete!")


def run() -> None:
    """Console script entry point."""
    asyncio.run(main())


if __name__ == "__main__":
    run()
