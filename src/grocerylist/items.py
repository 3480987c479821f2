"""Value objects produced by the parser and consumed by the merge engine."""

from dataclasses import dataclass

DEFAULT_QUANTITY = 1.0
DEFAULT_DISPLAY_QUANTITY = "1"


@dataclass
class GroceryItem:
    """A single grocery list line: name, amount and canonical unit."""

    name: str
    quantity: float
    unit: str = ""

    @property
    def merge_key(self) -> tuple[str, str]:
        """Key under which items are considered the same line item."""
        return merge_key(self.name, self.unit)


@dataclass
class ParsedIngredient:
    """Structured form of one free-text ingredient line."""

    name: str
    quantity: float
    unit: str
    display_quantity: str
    preparation: str | None = None
    notes: str | None = None

    @property
    def merge_key(self) -> tuple[str, str]:
        return merge_key(self.name, self.unit)

    def to_grocery_item(self) -> GroceryItem:
        """Drop the display, preparation and notes fields."""
        return GroceryItem(name=self.name, quantity=self.quantity, unit=self.unit)


def merge_key(name: str | None, unit: str | None) -> tuple[str, str]:
    return ((name or "").strip().lower(), unit or "")
