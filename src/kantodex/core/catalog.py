"""PokeAPI reference catalog client and one-way sync."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import httpx
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from kantodex.core.constants import KANTO_DEX_SIZE
from kantodex.core.pokedex import (
    PokemonAlreadyExists,
    UnknownTypeError,
    create_pokemon,
    get_pokemon,
)
from kantodex.database.models import Pokemon
from kantodex.logging import get_logger

logger = get_logger(__name__)


class CatalogFetchError(Exception):
    """Raised when the catalog cannot provide data for a number."""

    def __init__(self, number: int, reason: str):
        super().__init__(f"Failed to fetch Pokemon #{number} from PokeAPI: {reason}")
        self.number = number
        self.reason = reason


@dataclass
class CatalogEntry:
    """Fields we keep from a PokeAPI ``/pokemon/{id}`` response."""

    number: int
    name: str
    image_url: str | None
    type_names: list[str]


@dataclass
class SyncResult:
    """Outcome of a catalog sync run."""

    added: list[int] = field(default_factory=list)
    skipped: list[int] = field(default_factory=list)
    failed: list[int] = field(default_factory=list)


def parse_catalog_entry(data: dict[str, Any]) -> CatalogEntry:
    """Extract number, name, sprite and slot-ordered types."""
    types = sorted(data["types"], key=lambda t: t.get("slot", 0))
    return CatalogEntry(
        number=data["id"],
        name=data["name"],
        image_url=(data.get("sprites") or {}).get("front_default"),
        type_names=[t["type"]["name"] for t in types],
    )


async def fetch_catalog_entry(client: httpx.AsyncClient, number: int) -> CatalogEntry:
    """Fetch one Pokemon from PokeAPI.

    The client is expected to carry the PokeAPI base URL.

    Raises:
        CatalogFetchError: on network errors, non-success responses or
            payloads missing the expected fields
    """
    try:
        response = await client.get(f"/pokemon/{number}")
    except httpx.HTTPError as e:
        raise CatalogFetchError(number, str(e) or type(e).__name__) from e

    if not response.is_success:
        raise CatalogFetchError(number, f"HTTP {response.status_code}")

    try:
        return parse_catalog_entry(response.json())
    except (ValueError, KeyError, TypeError) as e:
        raise CatalogFetchError(number, f"malformed payload ({e!r})") from e


async def import_pokemon(
    session: AsyncSession,
    client: httpx.AsyncClient,
    number: int,
    check_existing: bool = True,
) -> Pokemon:
    """Fetch a Pokemon from PokeAPI and store it.

    With ``check_existing=False`` the caller vouches that the number is free.

    Raises:
        PokemonAlreadyExists: the number is already stored
        CatalogFetchError: the catalog call failed
        UnknownTypeError: the catalog returned a type outside the vocabulary
    """
    if check_existing and await get_pokemon(session, number) is not None:
        raise PokemonAlreadyExists(number)

    entry = await fetch_catalog_entry(client, number)
    return await create_pokemon(
        session,
        number=entry.number,
        name=entry.name,
        image_url=entry.image_url,
        type_names=entry.type_names,
        # Only re-check when the catalog answered with a different id
        check_existing=entry.number != number,
    )


async def sync_catalog(
    session: AsyncSession,
    client: httpx.AsyncClient,
    dex_size: int = KANTO_DEX_SIZE,
) -> SyncResult:
    """Fill missing Pokedex numbers from the catalog, one at a time.

    Existing rows are never touched. A failure for one number is logged
    and the loop moves on to the next.
    """
    result = SyncResult()

    for number in range(1, dex_size + 1):
        if await get_pokemon(session, number) is not None:
            logger.debug("Pokemon already exists, skipping", number=number)
            result.skipped.append(number)
            continue

        try:
            pokemon = await import_pokemon(session, client, number, check_existing=False)
        except (CatalogFetchError, UnknownTypeError, PokemonAlreadyExists) as e:
            logger.error("Skipping Pokemon", number=number, error=str(e))
            result.failed.append(number)
            continue
        except SQLAlchemyError as e:
            await session.rollback()
            logger.error("Failed to store Pokemon", number=number, error=str(e))
            result.failed.append(number)
            continue

        logger.info(
            "Added Pokemon",
            number=number,
            name=pokemon.name,
            types=pokemon.type_names,
        )
        result.added.append(number)

    logger.info(
        "Catalog sync finished",
        added=len(result.added),
        skipped=len(result.skipped),
        failed=len(result.failed),
    )
    return result
