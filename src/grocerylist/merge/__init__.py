"""Combine grocery lists."""

from grocerylist.merge.lists import (
    combine_display_quantities,
    merge_lists,
    merge_parsed,
)

__all__ = [
    "combine_display_quantities",
    "merge_lists",
    "merge_parsed",
]
