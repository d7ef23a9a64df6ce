"""Pokemon model - one row per Pokedex number."""

from sqlalchemy import Boolean, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from kantodex.database.models.base import Base, TimestampMixin


class Pokemon(Base, TimestampMixin):
    """A tracked Pokemon with its seen/caught flags."""

    __tablename__ = "pokemon"

    # National Pokedex number, never reassigned
    number: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)

    name: Mapped[str] = mapped_column(String(50), nullable=False, index=True)
    image_url: Mapped[str | None] = mapped_column(Text, nullable=True)

    # Tracking flags
    caught: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    seen: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)

    # Relationships
    types = relationship(
        "PokemonType",
        back_populates="pokemon",
        order_by="PokemonType.slot",
        cascade="all, delete-orphan",
        lazy="selectin",
    )

    def __repr__(self) -> str:
        return f"<Pokemon #{self.number} {self.name}>"

    @property
    def type_names(self) -> list[str]:
        """Get type names in display order."""
        return [link.type_name for link in self.types]
