"""Ingredient line parsing.

A line is read strictly left to right: quantity, unit, then the name with its
optional preparation phrase and trailing note. Nothing here raises for bad
input; missing pieces fall back to default values.
"""

import re
from collections.abc import Iterable
from functools import lru_cache

from grocerylist.items import DEFAULT_DISPLAY_QUANTITY, DEFAULT_QUANTITY, ParsedIngredient
from grocerylist.logging_config import get_logger
from grocerylist.parse.quantity import tokenize_quantity
from grocerylist.parse.units import UnitTable, match_unit
from grocerylist.parse.vocab import DEFAULT_TABLES, ParserTables

logger = get_logger(__name__)

_EDGE_CHARS = ",; \t\r\n\f\v"
_NOTE_OPENERS = ",;("
_WHITESPACE_RE = re.compile(r"\s+")


# =============================================================================
# Phrase Matching
# =============================================================================


@lru_cache(maxsize=64)
def _leading_pattern(phrases: tuple[str, ...]) -> re.Pattern[str]:
    alternatives = "|".join(re.escape(p) for p in phrases)
    # A phrase must end on a word boundary that is not a hyphen ("sun-dried")
    return re.compile(rf"(?:{alternatives})(?![\w-])[,;]?\s*", re.IGNORECASE)


def _split_leading(text: str, phrases: tuple[str, ...]) -> tuple[str | None, str]:
    if not phrases or not text:
        return None, text
    match = _leading_pattern(phrases).match(text)
    if not match:
        return None, text
    phrase = match.group(0).strip(_EDGE_CHARS)
    return phrase, text[match.end() :]


def _split_trailing(text: str, phrases: tuple[str, ...]) -> tuple[str | None, str]:
    """
    Split a note marker off the end of ``text``.

    Markers are compared against the tail only, so the cost does not depend
    on what precedes them. The marker may sit in parentheses and be followed
    by a full stop; it must be preceded by whitespace, a comma, a semicolon
    or an opening parenthesis, or start the text.
    """
    if not phrases or not text:
        return None, text

    tail = text.rstrip().rstrip(".").rstrip()
    if tail.endswith(")"):
        tail = tail[:-1].rstrip()

    for phrase in phrases:
        size = len(phrase)
        if len(tail) < size or tail[-size:].lower() != phrase.lower():
            continue
        head = tail[:-size]
        if head and not (head[-1].isspace() or head[-1] in _NOTE_OPENERS):
            continue
        return tail[-size:], head.rstrip(_EDGE_CHARS + "(")

    return None, text


def _clean_name(text: str) -> str:
    return _WHITESPACE_RE.sub(" ", text).strip(_EDGE_CHARS)


# =============================================================================
# Line Parser
# =============================================================================


def parse_ingredient(
    line: str | None,
    tables: ParserTables | None = None,
    units: UnitTable | None = None,
) -> ParsedIngredient:
    """
    Parse a single ingredient line.

    Examples:
        "1 1/2 cups milk" -> 1.5, "cups", "milk", display "1 1/2"
        "10-15 sun-dried tomatoes, chopped" -> 12.5, "", "sun-dried tomatoes, chopped"
        "salt to taste" -> 1, "", "salt", notes "to taste"

    Args:
        line: Raw ingredient text.
        tables: Preparation/note/descriptor tables; defaults to DEFAULT_TABLES.
        units: Unit vocabulary; defaults to the built-in table.

    Returns:
        ParsedIngredient. Lines without a leading quantity get quantity 1,
        display "1" and no unit.
    """
    tables = tables or DEFAULT_TABLES
    original = (line or "").strip()

    if not original:
        return ParsedIngredient(
            name="",
            quantity=DEFAULT_QUANTITY,
            unit="",
            display_quantity=DEFAULT_DISPLAY_QUANTITY,
        )

    # QUANTITY
    token = tokenize_quantity(original)
    if token is None:
        logger.debug(f"No quantity in {original!r}, using default")
        quantity = DEFAULT_QUANTITY
        display = DEFAULT_DISPLAY_QUANTITY
        unit = ""
        rest = original
    else:
        quantity = token.value
        display = token.display
        rest = token.remainder

        # UNIT
        matched = match_unit(rest, units)
        if matched is None:
            unit = ""
        else:
            unit, rest = matched

    # NAME + MODIFIERS
    _, rest = _split_leading(rest, tables.sorted("filler_words"))
    preparation, rest = _split_leading(rest, tables.sorted("preparations"))

    # NOTES
    notes, head = _split_trailing(rest, tables.sorted("note_markers"))
    if notes is not None and not _clean_name(head):
        # The marker is the whole name ("1 cup optional")
        notes = None
    else:
        rest = head

    _, rest = _split_leading(rest, tables.sorted("size_descriptors"))

    name = _clean_name(rest)
    if not name:
        name = original

    return ParsedIngredient(
        name=name,
        quantity=quantity,
        unit=unit,
        display_quantity=display,
        preparation=preparation or None,
        notes=notes or None,
    )


def parse_ingredients(
    lines: Iterable[str],
    tables: ParserTables | None = None,
    units: UnitTable | None = None,
) -> list[ParsedIngredient]:
    """Parse many lines, one result per line, in input order."""
    parsed = [parse_ingredient(line, tables, units) for line in lines]
    logger.debug(f"Parsed {len(parsed)} ingredient lines")
    return parsed


# =============================================================================
# Helpers
# =============================================================================


def format_ingredient(parsed: ParsedIngredient) -> str:
    """
    Render a parsed ingredient back to a readable line.

    The quantity is left out for quantity-less items ("salt (to taste)").
    """
    parts: list[str] = []

    if parsed.unit or parsed.display_quantity != DEFAULT_DISPLAY_QUANTITY:
        parts.append(parsed.display_quantity)
    if parsed.unit:
        parts.append(parsed.unit)
    parts.append(parsed.name)

    text = " ".join(p for p in parts if p)
    if parsed.preparation:
        text = f"{text}, {parsed.preparation}"
    if parsed.notes:
        text = f"{text} ({parsed.notes})"
    return text


def is_complete(parsed: ParsedIngredient) -> bool:
    """Check that a parse produced a positive quantity and a name."""
    return parsed.quantity > 0 and bool(parsed.name.strip())
