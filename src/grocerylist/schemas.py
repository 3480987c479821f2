"""Pydantic schemas for data crossing the package boundary.

Persistence layers and the AI ingredient normalizer hand us plain dicts; these
models validate them before they reach the merge engine.
"""

from pydantic import BaseModel, Field, field_validator

from grocerylist.items import GroceryItem, ParsedIngredient
from grocerylist.merge.lists import merge_lists
from grocerylist.parse.units import canonical_unit


class GroceryItemSchema(BaseModel):
    """A grocery list row as stored or supplied by a collaborator."""

    name: str
    quantity: float = Field(1.0, ge=0)
    unit: str = ""

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        return v.strip()

    @field_validator("unit", mode="before")
    @classmethod
    def canonicalize_unit(cls, v: object) -> object:
        if v is None or isinstance(v, str):
            return canonical_unit(v)
        return v

    def to_item(self) -> GroceryItem:
        return GroceryItem(name=self.name, quantity=self.quantity, unit=self.unit)

    @classmethod
    def from_item(cls, item: GroceryItem) -> "GroceryItemSchema":
        return cls(name=item.name, quantity=item.quantity, unit=item.unit)


class ParsedIngredientSchema(BaseModel):
    """Serialized form of a parsed ingredient line."""

    name: str
    quantity: float = Field(ge=0)
    unit: str = ""
    display_quantity: str = Field(min_length=1)
    preparation: str | None = None
    notes: str | None = None

    @classmethod
    def from_parsed(cls, parsed: ParsedIngredient) -> "ParsedIngredientSchema":
        return cls(
            name=parsed.name,
            quantity=parsed.quantity,
            unit=parsed.unit,
            display_quantity=parsed.display_quantity,
            preparation=parsed.preparation,
            notes=parsed.notes,
        )

    def to_parsed(self) -> ParsedIngredient:
        return ParsedIngredient(**self.model_dump())


class MergeRequest(BaseModel):
    """Two lists to combine, e.g. the current list and a saved one."""

    list_a: list[GroceryItemSchema] = Field(default_factory=list)
    list_b: list[GroceryItemSchema] = Field(default_factory=list)

    def merge(self) -> list[GroceryItemSchema]:
        merged = merge_lists(
            [item.to_item() for item in self.list_a],
            [item.to_item() for item in self.list_b],
        )
        return [GroceryItemSchema.from_item(item) for item in merged]
