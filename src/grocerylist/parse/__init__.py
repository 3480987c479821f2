"""Parse free-text ingredient lines into structured records."""

from grocerylist.parse.ingredient import (
    format_ingredient,
    is_complete,
    parse_ingredient,
    parse_ingredients,
)
from grocerylist.parse.quantity import (
    DecimalQuantity,
    FractionQuantity,
    MixedQuantity,
    QuantityToken,
    RangeQuantity,
    parse_quantity_value,
    tokenize_quantity,
)
from grocerylist.parse.units import UnitTable, canonical_unit, match_unit
from grocerylist.parse.vocab import DEFAULT_TABLES, ParserTables

__all__ = [
    "DEFAULT_TABLES",
    "DecimalQuantity",
    "FractionQuantity",
    "MixedQuantity",
    "ParserTables",
    "QuantityToken",
    "RangeQuantity",
    "UnitTable",
    "canonical_unit",
    "format_ingredient",
    "is_complete",
    "match_unit",
    "parse_ingredient",
    "parse_ingredients",
    "parse_quantity_value",
    "tokenize_quantity",
]
