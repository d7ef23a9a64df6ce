"""Utility functions package."""

from kantodex.utils.formatting import (
    format_dex_card,
    format_dex_number,
    format_stats_header,
    format_type_label,
)

__all__ = [
    "format_dex_number",
    "format_type_label",
    "format_dex_card",
    "format_stats_header",
]
