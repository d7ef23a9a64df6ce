"""Client-side view state."""

from dataclasses import dataclass, field

from kantodex.core.filtering import (
    DexQuery,
    DexStats,
    StatusFilter,
    available_types,
    collection_stats,
    filter_pokemon,
)
from kantodex.schemas import PokemonOut


@dataclass
class DexState:
    """Everything the view renders from.

    Owned by whoever drives the view and passed in explicitly; records
    are replaced by number when the server confirms a change.
    """

    pokemon: list[PokemonOut] = field(default_factory=list)
    search: str = ""
    status: StatusFilter = StatusFilter.ALL
    selected_types: list[str] = field(default_factory=list)
    loaded: bool = False

    def replace_all(self, pokemon: list[PokemonOut]) -> None:
        self.pokemon = list(pokemon)
        self.loaded = True

    def get(self, number: int) -> PokemonOut | None:
        for record in self.pokemon:
            if record.number == number:
                return record
        return None

    def merge(self, updated: PokemonOut) -> bool:
        """Replace the record with the same number. Returns False if absent."""
        for i, record in enumerate(self.pokemon):
            if record.number == updated.number:
                self.pokemon[i] = updated
                return True
        return False

    @property
    def query(self) -> DexQuery:
        return DexQuery.build(
            text=self.search, status=self.status, types=self.selected_types
        )

    def visible(self) -> list[PokemonOut]:
        """Records passing the current search and filters."""
        return filter_pokemon(self.pokemon, self.query)

    def set_search(self, text: str) -> None:
        self.search = text

    def set_status(self, status: StatusFilter | str) -> None:
        self.status = StatusFilter(status)

    def toggle_type(self, type_name: str) -> None:
        if type_name in self.selected_types:
            self.selected_types.remove(type_name)
        else:
            self.selected_types.append(type_name)

    def clear_types(self) -> None:
        self.selected_types.clear()

    def stats(self) -> DexStats:
        return collection_stats(self.pokemon)

    def available_types(self) -> list[str]:
        return available_types(self.pokemon)
