"""Search and filter over a Pokemon collection.

Filtering is pure and total: it never raises and is recomputed on every
call. It works on anything shaped like a Pokedex record, so the API
(ORM rows) and the client (response models) share it.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum
from typing import Protocol, TypeVar

from kantodex.core.constants import DEX_NUMBER_WIDTH


class DexRecord(Protocol):
    number: int
    name: str
    seen: bool
    caught: bool

    @property
    def type_names(self) -> list[str]: ...


R = TypeVar("R", bound=DexRecord)


class StatusFilter(str, Enum):
    """Status filter buttons."""

    ALL = "all"
    SEEN = "seen"
    UNSEEN = "unseen"
    CAUGHT = "caught"


def matches_text(record: DexRecord, text: str) -> bool:
    """Case-insensitive match on name or (padded/unpadded) number."""
    if not text:
        return True
    needle = text.lower()
    return (
        needle in record.name.lower()
        or needle in str(record.number)
        or needle in str(record.number).zfill(DEX_NUMBER_WIDTH)
    )


def matches_status(record: DexRecord, status: StatusFilter) -> bool:
    if status is StatusFilter.SEEN:
        return record.seen
    if status is StatusFilter.UNSEEN:
        return not record.seen
    if status is StatusFilter.CAUGHT:
        return record.caught
    return True


def matches_types(record: DexRecord, required: Iterable[str]) -> bool:
    """Every required type must be present (AND semantics)."""
    owned = {name.lower() for name in record.type_names}
    return all(name.lower() in owned for name in required)


@dataclass(frozen=True)
class DexQuery:
    """Search text, status filter and required types."""

    text: str = ""
    status: StatusFilter = StatusFilter.ALL
    types: frozenset[str] = field(default_factory=frozenset)

    @classmethod
    def build(
        cls,
        text: str = "",
        status: StatusFilter | str = StatusFilter.ALL,
        types: Iterable[str] = (),
    ) -> "DexQuery":
        return cls(text=text, status=StatusFilter(status), types=frozenset(types))

    @property
    def is_identity(self) -> bool:
        return not self.text and self.status is StatusFilter.ALL and not self.types

    def matches(self, record: DexRecord) -> bool:
        return (
            matches_text(record, self.text)
            and matches_status(record, self.status)
            and matches_types(record, self.types)
        )


def filter_pokemon(records: Iterable[R], query: DexQuery) -> list[R]:
    """Return matching records in their original order."""
    return [record for record in records if query.matches(record)]


@dataclass(frozen=True)
class DexStats:
    """Completion counters for a collection."""

    seen: int
    caught: int
    total: int


def collection_stats(records: Iterable[DexRecord]) -> DexStats:
    seen = caught = total = 0
    for record in records:
        total += 1
        seen += record.seen
        caught += record.caught
    return DexStats(seen=seen, caught=caught, total=total)


def available_types(records: Iterable[DexRecord]) -> list[str]:
    """Sorted unique type names present in a collection."""
    return sorted({name for record in records for name in record.type_names})
