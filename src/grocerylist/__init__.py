"""Ingredient line parsing and grocery list merging."""

from grocerylist.items import GroceryItem, ParsedIngredient
from grocerylist.merge import merge_lists, merge_parsed
from grocerylist.parse import format_ingredient, parse_ingredient, parse_ingredients

__version__ = "0.1.0"

__all__ = [
    "GroceryItem",
    "ParsedIngredient",
    "format_ingredient",
    "merge_lists",
    "merge_parsed",
    "parse_ingredient",
    "parse_ingredients",
]
