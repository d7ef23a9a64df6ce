"""Formatting utilities for display."""

from kantodex.core.constants import DEX_NUMBER_WIDTH, KANTO_DEX_SIZE
from kantodex.core.filtering import DexRecord, DexStats

HIDDEN_NAME = "???"
CAUGHT_BADGE = "(o)"


def format_dex_number(number: int) -> str:
    """Format a Pokedex number as ``#025``."""
    return f"#{str(number).zfill(DEX_NUMBER_WIDTH)}"


def format_type_label(type_name: str) -> str:
    return type_name[:1].upper() + type_name[1:]


def format_dex_card(record: DexRecord) -> str:
    """Format a single Pokedex entry as one line.

    Unseen Pokemon show ``???`` and no types; caught ones get a badge.

    Args:
        record: The Pokemon to render

    Returns:
        Formatted card line
    """
    parts = [format_dex_number(record.number)]

    if record.seen:
        parts.append(record.name.capitalize())
        types = "/".join(format_type_label(t) for t in record.type_names)
        if types:
            parts.append(f"[{types}]")
    else:
        parts.append(HIDDEN_NAME)

    if record.caught:
        parts.append(CAUGHT_BADGE)

    return " ".join(parts)


def format_stats_header(stats: DexStats, dex_size: int = KANTO_DEX_SIZE) -> str:
    """Format the seen/caught counters, e.g. ``Seen: 12/151 | Caught: 3/151``."""
    return f"Seen: {stats.seen}/{dex_size} | Caught: {stats.caught}/{dex_size}"
