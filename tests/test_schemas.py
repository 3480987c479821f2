"""Unit tests for boundary schemas."""

import pytest
from pydantic import ValidationError

from grocerylist.items import GroceryItem
from grocerylist.parse.ingredient import parse_ingredient
from grocerylist.schemas import GroceryItemSchema, MergeRequest, ParsedIngredientSchema


class TestGroceryItemSchema:
    """Tests for GroceryItemSchema validation."""

    def test_defaults(self):
        """Test quantity and unit defaults."""
        schema = GroceryItemSchema(name="salt")
        assert schema.quantity == 1.0
        assert schema.unit == ""

    def test_unit_canonicalized(self):
        """Test abbreviations from collaborators are canonicalized."""
        schema = GroceryItemSchema(name="butter", quantity=2, unit="Tbsp")
        assert schema.unit == "tablespoon"

    def test_none_unit(self):
        """Test a null unit becomes an empty string."""
        assert GroceryItemSchema(name="eggs", quantity=2, unit=None).unit == ""

    def test_name_trimmed(self):
        """Test the name is trimmed."""
        assert GroceryItemSchema(name="  milk ").name == "milk"

    def test_negative_quantity_rejected(self):
        """Test negative quantities fail validation."""
        with pytest.raises(ValidationError):
            GroceryItemSchema(name="flour", quantity=-1)

    def test_non_string_unit_rejected(self):
        """Test a non-string unit fails validation."""
        with pytest.raises(ValidationError):
            GroceryItemSchema(name="flour", unit=5)

    def test_item_round_trip(self):
        """Test conversion to and from GroceryItem."""
        item = GroceryItem(name="flour", quantity=1.5, unit="cup")
        assert GroceryItemSchema.from_item(item).to_item() == item


class TestParsedIngredientSchema:
    """Tests for ParsedIngredientSchema."""

    def test_from_parsed(self):
        """Test serialization of a parsed line."""
        schema = ParsedIngredientSchema.from_parsed(parse_ingredient("1 tsp vanilla (optional)"))
        assert schema.model_dump() == {
            "name": "vanilla",
            "quantity": 1.0,
            "unit": "teaspoon",
            "display_quantity": "1",
            "preparation": None,
            "notes": "optional",
        }

    def test_to_parsed(self):
        """Test rebuilding the dataclass."""
        parsed = parse_ingredient("2 tbsp finely chopped parsley")
        assert ParsedIngredientSchema.from_parsed(parsed).to_parsed() == parsed

    def test_empty_display_rejected(self):
        """Test the display quantity may not be empty."""
        with pytest.raises(ValidationError):
            ParsedIngredientSchema(name="x", quantity=1, display_quantity="")


class TestMergeRequest:
    """Tests for MergeRequest."""

    def test_merge_from_dicts(self):
        """Test merging rows supplied as plain dicts."""
        request = MergeRequest.model_validate(
            {
                "list_a": [{"name": "Flour", "quantity": 1, "unit": "c"}],
                "list_b": [
                    {"name": "flour", "quantity": 0.5, "unit": "cup"},
                    {"name": "flour", "quantity": 200, "unit": "g"},
                ],
            }
        )

        result = request.merge()

        assert [r.model_dump() for r in result] == [
            {"name": "Flour", "quantity": 1.5, "unit": "cup"},
            {"name": "flour", "quantity": 200.0, "unit": "gram"},
        ]

    def test_empty_request(self):
        """Test an empty request merges to nothing."""
        assert MergeRequest().merge() == []
