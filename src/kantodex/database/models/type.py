"""Elemental type and the Pokemon-type association."""

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from kantodex.database.models.base import Base


class Type(Base):
    """One of the 18 elemental types."""

    __tablename__ = "types"

    name: Mapped[str] = mapped_column(String(20), primary_key=True)

    def __repr__(self) -> str:
        return f"<Type {self.name}>"


class PokemonType(Base):
    """Links a Pokemon to one of its types."""

    __tablename__ = "pokemon_types"

    # Composite primary key keeps (pokemon, type) unique
    pokemon_number: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("pokemon.number", ondelete="CASCADE"),
        primary_key=True,
    )
    type_name: Mapped[str] = mapped_column(
        String(20),
        ForeignKey("types.name"),
        primary_key=True,
    )

    # Position in the source data (1 = primary type)
    slot: Mapped[int] = mapped_column(Integer, default=1, nullable=False)

    # Relationships
    pokemon = relationship("Pokemon", back_populates="types")
    type = relationship("Type", lazy="joined")

    def __repr__(self) -> str:
        return f"<PokemonType #{self.pokemon_number} {self.type_name}>"
