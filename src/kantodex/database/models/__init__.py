"""Database models package."""

from kantodex.database.models.base import Base, TimestampMixin
from kantodex.database.models.pokemon import Pokemon
from kantodex.database.models.type import PokemonType, Type

__all__ = [
    # Base
    "Base",
    "TimestampMixin",
    # Core
    "Pokemon",
    "Type",
    "PokemonType",
]
