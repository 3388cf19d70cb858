"""Helpers for Decimal normalization."""

import re
from decimal import Decimal

_LEADING_NUMBER = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")

# Magnitudes a double can hold; anything outside reads as 0.
MAX_AMOUNT = Decimal("1.7976931348623157e308")
MIN_AMOUNT_EXPONENT = -324


def parse_amount(raw: str | None) -> Decimal:
    """Parse the leading decimal literal of a spreadsheet cell.

    Mirrors a lenient float parse: surrounding text after the number is
    ignored (``"12abc"`` reads as 12) and text without a leading number
    reads as 0. Values too large or too small for a double read as 0, so
    sums over parsed amounts never overflow.

    Args:
        raw: Cell text, possibly empty or missing.

    Returns:
        Decimal: Finite parsed value, 0 when nothing parses.
    """
    if not raw:
        return Decimal("0")
    match = _LEADING_NUMBER.match(raw.strip())
    if match is None:
        return Decimal("0")
    try:
        value = Decimal(match.group(0))
    except ArithmeticError:
        return Decimal("0")
    if not value.is_finite() or value.is_zero():
        return Decimal("0")
    if value.adjusted() < MIN_AMOUNT_EXPONENT:
        return Decimal("0")
    if value.copy_abs().compare(MAX_AMOUNT) > 0:
        return Decimal("0")
    return value


def parse_non_negative_amount(raw: str | None) -> Decimal:
    """Parse an amount and clamp negative values to 0."""
    value = parse_amount(raw)
    return value if value > 0 else Decimal("0")


__all__ = ["MAX_AMOUNT", "parse_amount", "parse_non_negative_amount"]
