"""Unit tests for unit matching and canonicalization."""

import pytest

from grocerylist.parse.units import DEFAULT_UNIT_TABLE, UnitTable, canonical_unit, match_unit


class TestMatchUnit:
    """Tests for match_unit."""

    @pytest.mark.parametrize(
        "text, unit",
        [
            ("c flour", "cup"),
            ("C flour", "cup"),
            ("tbsp olive oil", "tablespoon"),
            ("Tbsp olive oil", "tablespoon"),
            ("tsp salt", "teaspoon"),
            ("lbs ground beef", "pound"),
            ("oz cheddar", "ounce"),
            ("g sugar", "gram"),
            ("kg potatoes", "kilogram"),
            ("ml water", "milliliter"),
            ("clove garlic", "cloves"),
            ("cloves garlic", "cloves"),
        ],
    )
    def test_abbreviations_canonicalize(self, text, unit):
        """Test abbreviations map to their canonical unit."""
        result = match_unit(text)
        assert result is not None
        assert result[0] == unit

    def test_spelled_out_units_pass_through(self):
        """Test full unit words are kept as written, lower-cased."""
        assert match_unit("cups milk") == ("cups", "milk")
        assert match_unit("Cup milk") == ("cup", "milk")
        assert match_unit("tablespoons butter") == ("tablespoons", "butter")

    def test_case_sensitive_single_letters(self):
        """Test 'T' is tablespoon and 't' is teaspoon."""
        assert match_unit("T butter") == ("tablespoon", "butter")
        assert match_unit("t salt") == ("teaspoon", "salt")

    def test_two_word_units_win(self):
        """Test the two-word phrase is tried before the single word."""
        assert match_unit("fl oz lime juice") == ("fluid ounce", "lime juice")
        assert match_unit("fl. oz. rum") == ("fluid ounce", "rum")
        assert match_unit("fluid ounces cream") == ("fluid ounces", "cream")

    def test_trailing_punctuation_ignored(self):
        """Test 'tbsp.' and 'cup,' still match."""
        assert match_unit("tbsp. sugar") == ("tablespoon", "sugar")
        assert match_unit("cup, packed brown sugar") == ("cup", "packed brown sugar")

    @pytest.mark.parametrize("text", ["large eggs", "garlic", "sun-dried tomatoes", "", "   "])
    def test_unknown_words_not_consumed(self, text):
        """Test words outside the vocabulary are not units."""
        assert match_unit(text) is None

    def test_unit_alone(self):
        """Test a unit with nothing after it."""
        assert match_unit("cups") == ("cups", "")


class TestUnitTable:
    """Tests for UnitTable configuration."""

    def test_extended_table(self):
        """Test extra aliases and words are recognized."""
        table = DEFAULT_UNIT_TABLE.extended(aliases={"Dl": "deciliter"}, words=("Knob",))
        assert match_unit("dl milk", table) == ("deciliter", "milk")
        assert match_unit("knob butter", table) == ("knob", "butter")
        # Default table is untouched
        assert match_unit("dl milk") is None

    def test_custom_table(self):
        """Test a minimal table only knows its own units."""
        table = UnitTable(aliases={"pc": "piece"}, words=frozenset(), case_sensitive={})
        assert match_unit("pc chicken", table) == ("piece", "chicken")
        assert match_unit("cup flour", table) is None


class TestCanonicalUnit:
    """Tests for canonical_unit."""

    def test_known_units(self):
        """Test abbreviations and words."""
        assert canonical_unit("tbsp") == "tablespoon"
        assert canonical_unit(" Cups ") == "cups"

    def test_unknown_and_empty(self):
        """Test unknown units are kept and empty becomes ''."""
        assert canonical_unit("handful-ish") == "handful-ish"
        assert canonical_unit("") == ""
        assert canonical_unit(None) == ""
