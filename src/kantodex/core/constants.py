"""Shared constants for the Kanto Pokedex.

Import from this module instead of hardcoding values elsewhere.
"""

# ------------------------------------------------------------------ #
# Pokedex
# ------------------------------------------------------------------ #
KANTO_DEX_SIZE: int = 151
DEX_NUMBER_WIDTH: int = 3

# ------------------------------------------------------------------ #
# Types (18 canonical Pokemon types, in seeding order)
# ------------------------------------------------------------------ #
TYPE_NAMES: tuple[str, ...] = (
    "normal", "fire", "water", "electric", "grass", "ice",
    "fighting", "poison", "ground", "flying", "psychic", "bug",
    "rock", "ghost", "dragon", "dark", "steel", "fairy",
)

VALID_TYPES: frozenset[str] = frozenset(TYPE_NAMES)
