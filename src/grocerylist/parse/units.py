"""Unit recognition and canonicalization for ingredient lines."""

import re
from dataclasses import dataclass, field

from grocerylist.parse.vocab import CASE_SENSITIVE_UNITS, UNIT_ALIASES, UNIT_WORDS

_WORD_RE = re.compile(r"\S+")
_TRAILING_PUNCT = ".,;:"


@dataclass(frozen=True)
class UnitTable:
    """
    Closed vocabulary of measurement units.

    Aliases map abbreviations to a canonical unit; plain unit words are
    returned lower-cased as written. Anything else is not a unit.
    """

    aliases: dict[str, str] = field(default_factory=lambda: dict(UNIT_ALIASES))
    words: frozenset[str] = frozenset(UNIT_WORDS)
    case_sensitive: dict[str, str] = field(default_factory=lambda: dict(CASE_SENSITIVE_UNITS))
    max_words: int = 2

    def lookup(self, phrase: str) -> str | None:
        """Canonical unit for ``phrase``, or None if it is not a known unit."""
        for candidate in (phrase, phrase.rstrip(_TRAILING_PUNCT)):
            if not candidate:
                continue
            if candidate in self.case_sensitive:
                return self.case_sensitive[candidate]
            lowered = candidate.lower()
            if lowered in self.aliases:
                return self.aliases[lowered]
            if lowered in self.words:
                return lowered
        return None

    def extended(
        self,
        aliases: dict[str, str] | None = None,
        words: tuple[str, ...] = (),
    ) -> "UnitTable":
        """Return a copy with extra aliases and unit words."""
        merged = dict(self.aliases)
        merged.update({k.lower(): v for k, v in (aliases or {}).items()})
        return UnitTable(
            aliases=merged,
            words=self.words | {w.lower() for w in words},
            case_sensitive=dict(self.case_sensitive),
            max_words=self.max_words,
        )


DEFAULT_UNIT_TABLE = UnitTable()


def match_unit(text: str, table: UnitTable | None = None) -> tuple[str, str] | None:
    """
    Consume a unit at the start of ``text``.

    The two-word phrase is tried before the single word so that units like
    "fl oz" or "fluid ounces" win over a partial match.

    Returns:
        Tuple of (canonical_unit, remainder), or None when the text does not
        start with a known unit.
    """
    table = table or DEFAULT_UNIT_TABLE
    if not text:
        return None

    words = list(_WORD_RE.finditer(text))
    for count in range(min(table.max_words, len(words)), 0, -1):
        last = words[count - 1]
        phrase = " ".join(m.group(0) for m in words[:count])
        unit = table.lookup(phrase)
        if unit is not None:
            return unit, text[last.end() :].lstrip()

    return None


def canonical_unit(unit: str | None, table: UnitTable | None = None) -> str:
    """
    Canonicalize a standalone unit string.

    Unknown units are returned trimmed but otherwise untouched, so that
    externally supplied units survive a round trip.
    """
    if not unit:
        return ""
    table = table or DEFAULT_UNIT_TABLE
    unit = unit.strip()
    return table.lookup(unit) or unit
