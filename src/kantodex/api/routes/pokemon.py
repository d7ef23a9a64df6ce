"""Pokemon endpoints."""

from typing import Annotated, Any

from fastapi import APIRouter, HTTPException, Query, Response, status

from kantodex.api.dependencies import CatalogClientDep, SessionDep
from kantodex.core import pokedex
from kantodex.core.catalog import CatalogFetchError, import_pokemon
from kantodex.core.filtering import (
    DexQuery,
    StatusFilter,
    collection_stats,
    filter_pokemon,
)
from kantodex.logging import get_logger
from kantodex.schemas import (
    DexStatsOut,
    ErrorResponse,
    PokemonCreate,
    PokemonOut,
    PokemonUpdate,
)

router = APIRouter(prefix="/pokemon", tags=["pokemon"])
logger = get_logger(__name__)


def serialize_pokemon(pokemon: Any) -> dict[str, Any]:
    """Render an ORM Pokemon in the public JSON shape."""
    return PokemonOut.model_validate(pokemon).model_dump(mode="json", by_alias=True)


@router.get("", response_model=list[PokemonOut])
async def list_pokemon(
    session: SessionDep,
    q: str = "",
    status_filter: Annotated[StatusFilter, Query(alias="status")] = StatusFilter.ALL,
    types: Annotated[list[str], Query()] = [],
) -> list[Any]:
    """List every Pokemon, optionally narrowed by search/status/types."""
    all_pokemon = await pokedex.get_all_pokemon(session)
    query = DexQuery.build(text=q, status=status_filter, types=types)
    if query.is_identity:
        return all_pokemon
    return filter_pokemon(all_pokemon, query)


@router.get("/stats", response_model=DexStatsOut)
async def pokedex_stats(session: SessionDep) -> DexStatsOut:
    stats = collection_stats(await pokedex.get_all_pokemon(session))
    return DexStatsOut(seen=stats.seen, caught=stats.caught, total=stats.total)


@router.post("/reset", response_model=list[PokemonOut])
async def reset_pokemon(session: SessionDep) -> list[Any]:
    """Clear seen/caught on every Pokemon."""
    return await pokedex.reset_all_pokemon(session)


@router.post(
    "",
    response_model=PokemonOut,
    status_code=status.HTTP_201_CREATED,
    responses={409: {"model": ErrorResponse}, 422: {"model": ErrorResponse}},
)
async def create_pokemon(body: PokemonCreate, session: SessionDep) -> Any:
    try:
        return await pokedex.create_pokemon(
            session,
            number=body.number,
            name=body.name,
            image_url=body.image_url,
            type_names=body.types,
            seen=body.seen,
            caught=body.caught,
        )
    except pokedex.PokemonAlreadyExists as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e)) from e
    except pokedex.UnknownTypeError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e


@router.get("/{number}", response_model=None)
async def get_pokemon(number: int, session: SessionDep) -> dict[str, Any]:
    """Get one Pokemon; unknown numbers give an empty object."""
    pokemon = await pokedex.get_pokemon(session, number)
    if pokemon is None:
        return {}
    return serialize_pokemon(pokemon)


@router.patch(
    "/{number}",
    response_model=PokemonOut,
    responses={404: {"model": ErrorResponse}},
)
async def update_pokemon(number: int, body: PokemonUpdate, session: SessionDep) -> Any:
    pokemon = await pokedex.update_pokemon(
        session, number, seen=body.seen, caught=body.caught
    )
    if pokemon is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Pokemon #{number} not found",
        )
    return pokemon


@router.delete(
    "/{number}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={404: {"model": ErrorResponse}},
)
async def delete_pokemon(number: int, session: SessionDep) -> Response:
    if not await pokedex.delete_pokemon(session, number):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Pokemon #{number} not found",
        )
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post(
    "/{number}/import",
    response_model=PokemonOut,
    status_code=status.HTTP_201_CREATED,
    responses={409: {"model": ErrorResponse}, 502: {"model": ErrorResponse}},
)
async def import_from_catalog(
    number: int, session: SessionDep, client: CatalogClientDep
) -> Any:
    """Fetch a Pokemon from PokeAPI and store it."""
    try:
        return await import_pokemon(session, client, number)
    except pokedex.PokemonAlreadyExists as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e)) from e
    except CatalogFetchError as e:
        logger.error("Catalog import failed", number=number, error=e.reason)
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(e)) from e
    except pokedex.UnknownTypeError as e:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(e)) from e
