"""Merging of grocery lists.

Items are the same line item when their trimmed names match case-insensitively
and their units are identical. Quantities of such items are summed; items with
the same name but different units stay separate since no unit conversion is
attempted. The first occurrence of a key decides the emitted name casing, unit
and position.
"""

from collections.abc import Iterable
from dataclasses import replace
from fractions import Fraction

from grocerylist.items import GroceryItem, ParsedIngredient, merge_key
from grocerylist.logging_config import get_logger
from grocerylist.parse.quantity import (
    Amount,
    FractionQuantity,
    MixedQuantity,
    RangeQuantity,
    tokenize_quantity,
)

logger = get_logger(__name__)

# Largest denominator a merged fraction is written with ("1/16 cup")
MAX_DENOMINATOR = 16


# =============================================================================
# Grocery Items
# =============================================================================


def merge_lists(
    list_a: Iterable[GroceryItem],
    list_b: Iterable[GroceryItem],
) -> list[GroceryItem]:
    """
    Merge two grocery lists, summing quantities of matching items.

    Anything with name, quantity and unit attributes is accepted as an item,
    so parser output can be merged without converting it first.

    Args:
        list_a: Items emitted first, in order.
        list_b: Items appended after list_a; matches fold into earlier entries.

    Returns:
        New list with one entry per (name, unit) key, in first-seen order.
        Input items are not modified.
    """
    merged: dict[tuple[str, str], GroceryItem] = {}
    incoming = 0

    for source in (list_a, list_b):
        for item in source:
            incoming += 1
            key = merge_key(item.name, item.unit)

            if key in merged:
                merged[key].quantity += item.quantity
            else:
                merged[key] = GroceryItem(
                    name=item.name,
                    quantity=item.quantity,
                    unit=item.unit,
                )

    logger.debug(f"Merged {incoming} items into {len(merged)} entries")
    return list(merged.values())


# =============================================================================
# Display Quantities
# =============================================================================


def _format_number(value: float) -> str:
    if value == int(value):
        return str(int(value))
    return f"{value:.3f}".rstrip("0").rstrip(".")


def _format_fraction(value: float) -> str:
    """Render ``value`` as "2/3" or "1 1/2" when it is a common fraction."""
    fraction = Fraction(value).limit_denominator(MAX_DENOMINATOR)
    if fraction.denominator == 1 or abs(float(fraction) - value) > 1e-9:
        return _format_number(value)

    whole, numerator = divmod(fraction.numerator, fraction.denominator)
    if whole:
        return f"{whole} {numerator}/{fraction.denominator}"
    return f"{numerator}/{fraction.denominator}"


def _is_fractional(amount: Amount) -> bool:
    return isinstance(amount, (FractionQuantity, MixedQuantity))


def _bounds(display: str | None, fallback: float) -> tuple[float, float, bool, bool]:
    """Resolve a display quantity to (low, high, is_range, is_fractional)."""
    token = tokenize_quantity(display or "")
    if token is None or token.remainder:
        return fallback, fallback, False, False
    quantity = token.quantity
    if isinstance(quantity, RangeQuantity):
        fractional = _is_fractional(quantity.low) or _is_fractional(quantity.high)
        return quantity.low.value, quantity.high.value, True, fractional
    return quantity.value, quantity.value, False, _is_fractional(quantity)


def combine_display_quantities(
    first: str | None,
    second: str | None,
    first_value: float = 1.0,
    second_value: float = 1.0,
) -> str:
    """
    Add two display quantities, keeping ranges as ranges.

    Examples:
        "10-15" + "10-15" -> "20-30"
        "10-15" + "5" -> "15-20"
        "1 1/2" + "1/2" -> "2"
        "1/3" + "1/3" -> "2/3"

    Sums are written as fractions when either side was written as one, and as
    decimals otherwise. The numeric values are used for either side whose
    display text is not a plain quantity.
    """
    low_a, high_a, range_a, fraction_a = _bounds(first, first_value)
    low_b, high_b, range_b, fraction_b = _bounds(second, second_value)

    fmt = _format_fraction if fraction_a or fraction_b else _format_number
    low = low_a + low_b
    high = high_a + high_b
    if (range_a or range_b) and low != high:
        return f"{fmt(low)}-{fmt(high)}"
    return fmt(low)


# =============================================================================
# Parsed Ingredients
# =============================================================================


def merge_parsed(
    list_a: Iterable[ParsedIngredient],
    list_b: Iterable[ParsedIngredient],
) -> list[ParsedIngredient]:
    """
    Merge parsed ingredients with the same policy as merge_lists.

    Display quantities are combined with combine_display_quantities so that a
    merged range still reads as a range. Preparation and notes come from the
    first-seen item.
    """
    merged: dict[tuple[str, str], ParsedIngredient] = {}

    for source in (list_a, list_b):
        for item in source:
            key = merge_key(item.name, item.unit)

            if key not in merged:
                merged[key] = replace(item)
                continue

            existing = merged[key]
            existing.display_quantity = combine_display_quantities(
                existing.display_quantity,
                item.display_quantity,
                existing.quantity,
                item.quantity,
            )
            existing.quantity += item.quantity

    return list(merged.values())
