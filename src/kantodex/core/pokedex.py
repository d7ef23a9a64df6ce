"""Pokemon storage operations.

Thin async helpers over the ORM. Missing Pokemon are reported as ``None``
(or ``False`` for deletes) rather than exceptions.
"""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from kantodex.core.constants import TYPE_NAMES, VALID_TYPES
from kantodex.database.models import Pokemon, PokemonType, Type
from kantodex.logging import get_logger

logger = get_logger(__name__)


class PokemonAlreadyExists(Exception):
    """Raised when creating a Pokemon whose number is taken."""

    def __init__(self, number: int):
        super().__init__(f"Pokemon #{number} already exists")
        self.number = number


class UnknownTypeError(ValueError):
    """Raised when a type name is outside the 18-type vocabulary."""

    def __init__(self, names: Sequence[str]):
        super().__init__(f"Unknown type name(s): {', '.join(names)}")
        self.names = list(names)


async def ensure_types(session: AsyncSession) -> int:
    """Create any missing rows of the type vocabulary.

    Returns:
        Number of type rows created
    """
    result = await session.execute(select(Type.name))
    existing = set(result.scalars().all())

    missing = [name for name in TYPE_NAMES if name not in existing]
    session.add_all(Type(name=name) for name in missing)
    await session.commit()
    return len(missing)


async def get_all_pokemon(session: AsyncSession) -> list[Pokemon]:
    """Get every Pokemon with its types, ordered by number."""
    result = await session.execute(select(Pokemon).order_by(Pokemon.number))
    return list(result.scalars().all())


async def get_pokemon(session: AsyncSession, number: int) -> Pokemon | None:
    """Get a single Pokemon by number."""
    result = await session.execute(select(Pokemon).where(Pokemon.number == number))
    return result.scalar_one_or_none()


async def update_pokemon(
    session: AsyncSession,
    number: int,
    seen: bool | None = None,
    caught: bool | None = None,
) -> Pokemon | None:
    """Apply the provided flags and return the merged record.

    Flags left as ``None`` keep their stored value. No seen/caught rule is
    enforced here.
    """
    pokemon = await get_pokemon(session, number)
    if pokemon is None:
        logger.debug("Update for unknown Pokemon", number=number)
        return None

    if seen is not None:
        pokemon.seen = seen
    if caught is not None:
        pokemon.caught = caught

    await session.commit()
    logger.debug("Updated Pokemon", number=number, seen=pokemon.seen, caught=pokemon.caught)
    return pokemon


async def reset_all_pokemon(session: AsyncSession) -> list[Pokemon]:
    """Clear seen/caught on every Pokemon in one statement."""
    result = await session.execute(update(Pokemon).values(seen=False, caught=False))
    await session.commit()
    logger.info("Reset all Pokemon", rows=result.rowcount)

    refreshed = await session.execute(
        select(Pokemon)
        .order_by(Pokemon.number)
        .execution_options(populate_existing=True)
    )
    return list(refreshed.scalars().all())


async def create_pokemon(
    session: AsyncSession,
    number: int,
    name: str,
    image_url: str | None,
    type_names: Sequence[str],
    seen: bool = False,
    caught: bool = False,
    check_existing: bool = True,
) -> Pokemon:
    """Create a Pokemon with its type associations.

    Types keep the order given in ``type_names``; repeated names are stored
    once. Pass ``check_existing=False`` when the caller already looked the
    number up.

    Raises:
        PokemonAlreadyExists: the number is taken
        UnknownTypeError: a type name is not in the vocabulary
    """
    type_names = list(dict.fromkeys(type_names))
    unknown = [t for t in type_names if t not in VALID_TYPES]
    if unknown:
        raise UnknownTypeError(unknown)

    if check_existing and await get_pokemon(session, number) is not None:
        raise PokemonAlreadyExists(number)

    result = await session.execute(select(Type).where(Type.name.in_(type_names)))
    types_by_name = {t.name: t for t in result.scalars().all()}
    missing = [t for t in type_names if t not in types_by_name]
    if missing:
        # Vocabulary rows not seeded yet
        raise UnknownTypeError(missing)

    pokemon = Pokemon(
        number=number,
        name=name,
        image_url=image_url,
        seen=seen,
        caught=caught,
    )
    pokemon.types = [
        PokemonType(type=types_by_name[type_name], slot=slot)
        for slot, type_name in enumerate(type_names, start=1)
    ]
    session.add(pokemon)
    await session.commit()

    logger.debug("Created Pokemon", number=number, name=name, types=type_names)
    return pokemon


async def delete_pokemon(session: AsyncSession, number: int) -> bool:
    """Delete a Pokemon and its associations."""
    pokemon = await get_pokemon(session, number)
    if pokemon is None:
        return False

    await session.delete(pokemon)
    await session.commit()
    logger.info("Deleted Pokemon", number=number)
    return True
