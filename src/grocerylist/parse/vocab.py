"""Phrase tables used by the ingredient line parser.

Tables are ordered tuples. Lookups sort them longest-first, so more specific
phrases ("finely chopped") win over shorter ones ("chopped") regardless of the
order they are listed in here.
"""

from dataclasses import dataclass, field

# =============================================================================
# Unit Vocabulary
# =============================================================================

# Abbreviations and synonyms that map to a single canonical unit
UNIT_ALIASES: dict[str, str] = {
    "c": "cup",
    "tbsp": "tablespoon",
    "tbs": "tablespoon",
    "tbl": "tablespoon",
    "tsp": "teaspoon",
    "lb": "pound",
    "lbs": "pound",
    "oz": "ounce",
    "g": "gram",
    "kg": "kilogram",
    "mg": "milligram",
    "ml": "milliliter",
    "l": "liter",
    "pt": "pint",
    "qt": "quart",
    "gal": "gallon",
    "fl oz": "fluid ounce",
    "fl. oz.": "fluid ounce",
    "fl. oz": "fluid ounce",
    "pkg": "package",
    "clove": "cloves",
    "cloves": "cloves",
}

# Single letters where case carries meaning
CASE_SENSITIVE_UNITS: dict[str, str] = {
    "T": "tablespoon",
    "t": "teaspoon",
}

# Spelled-out unit words; these are kept as written (lower-cased)
UNIT_WORDS: tuple[str, ...] = (
    # Volume
    "cup",
    "cups",
    "tablespoon",
    "tablespoons",
    "teaspoon",
    "teaspoons",
    "fluid ounce",
    "fluid ounces",
    "pint",
    "pints",
    "quart",
    "quarts",
    "gallon",
    "gallons",
    "liter",
    "liters",
    "litre",
    "litres",
    "milliliter",
    "milliliters",
    "millilitre",
    "millilitres",
    # Weight
    "pound",
    "pounds",
    "ounce",
    "ounces",
    "gram",
    "grams",
    "kilogram",
    "kilograms",
    "milligram",
    "milligrams",
    # Count / container
    "piece",
    "pieces",
    "slice",
    "slices",
    "head",
    "heads",
    "bunch",
    "bunches",
    "sprig",
    "sprigs",
    "package",
    "packages",
    "can",
    "cans",
    "jar",
    "jars",
    "bottle",
    "bottles",
    "box",
    "boxes",
    "bag",
    "bags",
    "stick",
    "sticks",
    # Length
    "inch",
    "inches",
    # Small measures
    "pinch",
    "pinches",
    "dash",
    "dashes",
    "handful",
    "handfuls",
    "drop",
    "drops",
)


# =============================================================================
# Name Modifiers
# =============================================================================

PREPARATIONS: tuple[str, ...] = (
    "chopped",
    "finely chopped",
    "coarsely chopped",
    "roughly chopped",
    "diced",
    "finely diced",
    "cubed",
    "sliced",
    "thinly sliced",
    "thickly sliced",
    "minced",
    "finely minced",
    "grated",
    "finely grated",
    "shredded",
    "julienned",
    "spiralized",
    "melted",
    "softened",
    "beaten",
    "lightly beaten",
    "whipped",
    "whisked",
    "crushed",
    "smashed",
    "mashed",
    "peeled",
    "cored",
    "seeded",
    "deseeded",
    "trimmed",
    "rinsed",
    "drained",
    "juiced",
    "zested",
    "toasted",
    "roasted",
    "halved",
    "quartered",
)

NOTE_MARKERS: tuple[str, ...] = (
    "to taste",
    "or to taste",
    "as needed",
    "or as needed",
    "optional",
    "if desired",
    "divided",
    "separated",
    "room temperature",
    "at room temperature",
    "for serving",
    "for garnish",
    "for dusting",
    "see note",
    "see notes",
    "see recipe note",
)

SIZE_DESCRIPTORS: tuple[str, ...] = (
    "small",
    "medium",
    "large",
    "extra large",
    "extra-large",
    "jumbo",
)

FILLER_WORDS: tuple[str, ...] = ("of",)


def longest_first(phrases: tuple[str, ...]) -> tuple[str, ...]:
    """Order phrases so longer ones are tried before their prefixes."""
    return tuple(sorted(phrases, key=len, reverse=True))


@dataclass(frozen=True)
class ParserTables:
    """Phrase tables that drive name/preparation/notes segmentation."""

    preparations: tuple[str, ...] = PREPARATIONS
    note_markers: tuple[str, ...] = NOTE_MARKERS
    size_descriptors: tuple[str, ...] = SIZE_DESCRIPTORS
    filler_words: tuple[str, ...] = FILLER_WORDS
    _sorted: dict[str, tuple[str, ...]] = field(
        default_factory=dict, init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        for table in ("preparations", "note_markers", "size_descriptors", "filler_words"):
            self._sorted[table] = longest_first(getattr(self, table))

    def sorted(self, table: str) -> tuple[str, ...]:
        """Return one of the phrase tables ordered longest-first."""
        return self._sorted[table]

    def extended(
        self,
        preparations: tuple[str, ...] = (),
        note_markers: tuple[str, ...] = (),
        size_descriptors: tuple[str, ...] = (),
    ) -> "ParserTables":
        """Return a copy with extra phrases appended."""
        return ParserTables(
            preparations=self.preparations + tuple(preparations),
            note_markers=self.note_markers + tuple(note_markers),
            size_descriptors=self.size_descriptors + tuple(size_descriptors),
            filler_words=self.filler_words,
        )


DEFAULT_TABLES = ParserTables()
