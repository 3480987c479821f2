"""Quantity tokenizer for the leading numeric expression of an ingredient line.

Each grammar rule resolves to its own variant type so the rules can be tested
in isolation:

- ``RangeQuantity``: ``2-3``, ``2 - 3``, ``2–3``, ``2 to 3``
- ``MixedQuantity``: ``1 1/2``, ``1 ½``, ``1½``
- ``FractionQuantity``: ``1/2``, ``½``
- ``DecimalQuantity``: ``2``, ``0.25``

Rules are tried in that order and the first match wins. Range endpoints are
resolved with the mixed, fraction and decimal rules.
"""

import re
from dataclasses import dataclass

from grocerylist.logging_config import get_logger

logger = get_logger(__name__)


# =============================================================================
# Vulgar Fraction Glyphs
# =============================================================================

VULGAR_FRACTIONS: dict[str, tuple[int, int]] = {
    "½": (1, 2),
    "⅓": (1, 3),
    "⅔": (2, 3),
    "¼": (1, 4),
    "¾": (3, 4),
    "⅕": (1, 5),
    "⅖": (2, 5),
    "⅗": (3, 5),
    "⅘": (4, 5),
    "⅙": (1, 6),
    "⅚": (5, 6),
    "⅐": (1, 7),
    "⅛": (1, 8),
    "⅜": (3, 8),
    "⅝": (5, 8),
    "⅞": (7, 8),
    "⅑": (1, 9),
    "⅒": (1, 10),
}

_GLYPHS = "".join(VULGAR_FRACTIONS)

# All patterns are anchored at the scan position, so scanning never looks past
# the quantity expression itself.
_APPROX_RE = re.compile(r"~\s*")
_MIXED_SLASH_RE = re.compile(r"(\d+)\s+(\d+)/(\d+)")
_MIXED_GLYPH_RE = re.compile(rf"(\d+)\s*([{_GLYPHS}])")
_FRACTION_RE = re.compile(r"(\d+)/(\d+)")
_GLYPH_RE = re.compile(rf"[{_GLYPHS}]")
_DECIMAL_RE = re.compile(r"\d+(?:\.\d+)?")
_RANGE_SEP_RE = re.compile(r"\s*[-–]\s*|\s+to\s+", re.IGNORECASE)
_DANGLING_SEP_RE = re.compile(r"\s*[-–]\s*")
_BROKEN_FRACTION_RE = re.compile(r"(?:\s+\d+)?/\d")
_TRAILING_SPACE_RE = re.compile(r"\s*")


# =============================================================================
# Quantity Variants
# =============================================================================


@dataclass(frozen=True)
class DecimalQuantity:
    """An integer or decimal amount such as ``2`` or ``0.25``."""

    text: str

    @property
    def value(self) -> float:
        return float(self.text)


@dataclass(frozen=True)
class FractionQuantity:
    """A simple fraction, written ``N/D`` or as a single vulgar glyph."""

    numerator: int
    denominator: int
    text: str

    @property
    def value(self) -> float:
        return self.numerator / self.denominator


@dataclass(frozen=True)
class MixedQuantity:
    """A whole number followed by a fraction, e.g. ``1 1/2`` or ``2¼``."""

    whole: int
    fraction: FractionQuantity
    text: str

    @property
    def value(self) -> float:
        return self.whole + self.fraction.value


Amount = MixedQuantity | FractionQuantity | DecimalQuantity


@dataclass(frozen=True)
class RangeQuantity:
    """Two amounts joined by a hyphen, an en dash or ``to``."""

    low: Amount
    high: Amount
    text: str

    @property
    def value(self) -> float:
        return (self.low.value + self.high.value) / 2


Quantity = RangeQuantity | Amount


@dataclass(frozen=True)
class QuantityToken:
    """Result of consuming the quantity at the start of a line."""

    quantity: Quantity
    display: str
    remainder: str
    approximate: bool = False

    @property
    def value(self) -> float:
        return self.quantity.value


# =============================================================================
# Scanning
# =============================================================================


def _scan_mixed(text: str, pos: int) -> tuple[MixedQuantity, int] | None:
    match = _MIXED_SLASH_RE.match(text, pos)
    if match and int(match.group(3)) != 0:
        fraction = FractionQuantity(
            numerator=int(match.group(2)),
            denominator=int(match.group(3)),
            text=f"{match.group(2)}/{match.group(3)}",
        )
        return MixedQuantity(int(match.group(1)), fraction, match.group(0)), match.end()

    match = _MIXED_GLYPH_RE.match(text, pos)
    if match:
        glyph = match.group(2)
        num, den = VULGAR_FRACTIONS[glyph]
        fraction = FractionQuantity(num, den, glyph)
        return MixedQuantity(int(match.group(1)), fraction, match.group(0)), match.end()

    return None


def _scan_fraction(text: str, pos: int) -> tuple[FractionQuantity, int] | None:
    match = _FRACTION_RE.match(text, pos)
    if match and int(match.group(2)) != 0:
        return (
            FractionQuantity(int(match.group(1)), int(match.group(2)), match.group(0)),
            match.end(),
        )

    match = _GLYPH_RE.match(text, pos)
    if match:
        num, den = VULGAR_FRACTIONS[match.group(0)]
        return FractionQuantity(num, den, match.group(0)), match.end()

    return None


def _scan_decimal(text: str, pos: int) -> tuple[DecimalQuantity, int] | None:
    match = _DECIMAL_RE.match(text, pos)
    if match:
        return DecimalQuantity(match.group(0)), match.end()
    return None


def scan_amount(text: str, pos: int = 0) -> tuple[Amount, int] | None:
    """
    Scan a single (non-range) amount starting at ``pos``.

    Returns:
        Tuple of (amount, end position), or None if no amount starts there.
    """
    for scanner in (_scan_mixed, _scan_fraction, _scan_decimal):
        result = scanner(text, pos)
        if result is not None:
            return result
    return None


def _scan_range(text: str, pos: int) -> tuple[Quantity, int] | None:
    first = scan_amount(text, pos)
    if first is None:
        return None
    low, end = first

    sep = _RANGE_SEP_RE.match(text, end)
    if sep:
        second = scan_amount(text, sep.end())
        if second is not None:
            high, range_end = second
            return RangeQuantity(low, high, text[pos:range_end]), range_end

    return low, end


def tokenize_quantity(text: str) -> QuantityToken | None:
    """
    Consume the numeric expression at the start of ``text``.

    Returns:
        QuantityToken with the resolved quantity, the display text exactly as
        written and the remaining text, or None when the text does not start
        with a quantity.
    """
    if not text:
        return None

    text = text.lstrip()
    pos = 0
    approximate = False

    approx = _APPROX_RE.match(text)
    if approx:
        approximate = True
        pos = approx.end()

    scanned = _scan_range(text, pos)
    if scanned is None:
        return None

    quantity, end = scanned
    if _BROKEN_FRACTION_RE.match(text, end):
        # "1/0 cup": a fraction that failed to resolve is not a quantity
        logger.debug(f"Unresolvable fraction in {text!r}")
        return None

    rest = _TRAILING_SPACE_RE.match(text, end).end()
    if not isinstance(quantity, RangeQuantity):
        # "3-inch piece": a separator with no second amount belongs to neither side
        dangling = _DANGLING_SEP_RE.match(text, end)
        if dangling:
            rest = dangling.end()

    return QuantityToken(
        quantity=quantity,
        display=text[:end],
        remainder=text[rest:],
        approximate=approximate,
    )


def parse_quantity_value(text: str | None) -> float | None:
    """
    Resolve a bare quantity string such as ``"1 1/2"`` or ``"10-15"``.

    Returns None unless the whole string is a single quantity expression.
    """
    if not text:
        return None

    text = text.strip()
    token = tokenize_quantity(text)
    if token is None or token.display != text:
        logger.debug(f"Not a bare quantity: {text!r}")
        return None
    return token.value
